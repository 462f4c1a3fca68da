# splash_builder/checks.py
from . import display
from .errors import MissingConfigFile, MissingSplashAsset, NoPlatformFound
from .platforms import active_platforms, get_platforms
from .settings import Settings


def at_least_one_platform_found(settings: Settings) -> list[str]:
    """Return the names of the added platforms, or raise NoPlatformFound."""
    names = [p.name for p in active_platforms(get_platforms(settings.root))]
    if not names:
        display.error("No cordova platforms found. Make sure you are in the root folder of your "
                      "Cordova project and add platforms with 'cordova platform add'")
        raise NoPlatformFound()
    display.success("platforms found: " + ", ".join(names))
    return names


def valid_splash_exists(settings: Settings):
    if not settings.splash_path.is_file():
        display.error(f"{settings.splash_file} does not exist in the root folder")
        raise MissingSplashAsset()
    display.success(f"{settings.splash_file} exists")


def config_file_exists(settings: Settings):
    if not settings.config_path.is_file():
        display.error(f"cordova's {settings.config_file} does not exist in the root folder")
        raise MissingConfigFile()
    display.success(f"{settings.config_file} exists")
