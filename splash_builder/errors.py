# splash_builder/errors.py


class SplashBuilderError(Exception):
    """Base class for every failure the pipeline reports to the console."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class NoPlatformFound(SplashBuilderError):
    pass


class MissingSplashAsset(SplashBuilderError):
    pass


class MissingConfigFile(SplashBuilderError):
    pass


class ConfigParseError(SplashBuilderError):
    pass


class CropOperationError(SplashBuilderError):
    """One crop failed. Carries the output filename and the underlying error."""

    def __init__(self, filename: str, cause: BaseException | str):
        super().__init__(f"{filename}: {cause}")
        self.filename = filename
        self.cause = cause


class GenerationFailed(SplashBuilderError):
    def __init__(self, failures: list[CropOperationError]):
        super().__init__(f"{len(failures)} splash screen(s) could not be created")
        self.failures = failures
