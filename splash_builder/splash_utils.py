# splash_builder/splash_utils.py
import asyncio
import logging
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

from . import display
from .errors import CropOperationError
from .platforms import Platform, SplashSpec, active_platforms
from .settings import Settings

logger = logging.getLogger(__name__)

# followed by: SRC DST WIDTH HEIGHT
CROP_COMMAND = [sys.executable, "-m", "splash_builder.crop"]


@dataclass
class GenerationReport:
    created: list[Path] = field(default_factory=list)
    failures: list[CropOperationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def extend(self, other: "GenerationReport"):
        self.created.extend(other.created)
        self.failures.extend(other.failures)


# =========================
# Image operation
# =========================
async def run_crop(src: Path, dst: Path, width: int, height: int, timeout: float):
    """Run one crop in a child process, killing it once *timeout* seconds pass."""
    proc = await asyncio.create_subprocess_exec(
        *CROP_COMMAND, str(src), str(dst), str(width), str(height),
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        _, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        # a killed crop may have left a partial file behind
        dst.unlink(missing_ok=True)
        raise CropOperationError(dst.name, f"timed out after {timeout:g}s") from None
    if proc.returncode != 0:
        message = stderr.decode("utf-8", errors="replace").strip()
        raise CropOperationError(dst.name, message or f"crop exited with status {proc.returncode}")


# =========================
# Generation
# =========================
async def generate_splash(platform: Platform, splash: SplashSpec, settings: Settings) -> Path:
    """Crop and create one splash screen in the platform's folder."""
    dst = settings.root / platform.splash_path / splash.name
    started = time.monotonic()
    try:
        await run_crop(settings.splash_path, dst, splash.width, splash.height, settings.crop_timeout)
    except CropOperationError as e:
        display.error(str(e))
        raise
    logger.debug("%s (%dx%d) -> %s in %.2fs", splash.name, splash.width, splash.height, dst,
                 time.monotonic() - started)
    display.success(f"{splash.name} created")
    return dst


async def generate_for_platform(platform: Platform, settings: Settings) -> GenerationReport:
    """Run every crop of *platform* concurrently and wait for all of them to settle."""
    display.header(f"Generating splash screen for {platform.name}")
    results = await asyncio.gather(
        *(generate_splash(platform, splash, settings) for splash in platform.splash),
        return_exceptions=True,
    )
    report = GenerationReport()
    for result in results:
        if isinstance(result, CropOperationError):
            report.failures.append(result)
        elif isinstance(result, BaseException):
            raise result
        else:
            report.created.append(result)
    return report


async def generate_all(platforms: list[Platform], settings: Settings) -> GenerationReport:
    """Generate splash screens platform after platform, skipping the ones not added."""
    report = GenerationReport()
    for platform in active_platforms(platforms):
        report.extend(await generate_for_platform(platform, settings))
    return report
