# splash_builder/settings.py
import os
from dataclasses import dataclass, replace
from pathlib import Path

# =========================
# Defaults
# =========================
CONFIG_FILE = "config.xml"
SPLASH_FILE = "splash-2208.png"
PROJECT_DIR = "."
CROP_TIMEOUT = 60.0


@dataclass(frozen=True)
class Settings:
    """Names of the config file and of the splash image, plus where to look for them."""

    config_file: str = CONFIG_FILE
    splash_file: str = SPLASH_FILE
    project_dir: str = PROJECT_DIR
    crop_timeout: float = CROP_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        timeout = os.environ.get("SPLASH_CROP_TIMEOUT", str(CROP_TIMEOUT))
        try:
            crop_timeout = float(timeout)
        except ValueError:
            raise ValueError(f"SPLASH_CROP_TIMEOUT must be a number, got {timeout!r}") from None
        return cls(
            config_file=os.environ.get("SPLASH_CONFIG_FILE", CONFIG_FILE),
            splash_file=os.environ.get("SPLASH_FILE", SPLASH_FILE),
            project_dir=os.environ.get("SPLASH_PROJECT_DIR", PROJECT_DIR),
            crop_timeout=crop_timeout,
        )

    def override(self, **values) -> "Settings":
        """Return a copy with every non-None value replaced."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})

    @property
    def root(self) -> Path:
        return Path(self.project_dir)

    @property
    def config_path(self) -> Path:
        return self.root / self.config_file

    @property
    def splash_path(self) -> Path:
        return self.root / self.splash_file
