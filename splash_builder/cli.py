# splash_builder/cli.py
import asyncio
import logging

import click

from . import __version__, display
from .checks import at_least_one_platform_found, config_file_exists, valid_splash_exists
from .errors import GenerationFailed, SplashBuilderError
from .platforms import get_platforms
from .project import get_project_name
from .settings import Settings
from .splash_utils import generate_all

logger = logging.getLogger(__name__)


def run_pipeline(settings: Settings) -> int:
    """Validate the project, then generate every splash screen. Returns the exit status."""
    display.header("Checking Project & Splash")
    status = 0
    try:
        at_least_one_platform_found(settings)
        valid_splash_exists(settings)
        config_file_exists(settings)
        project_name = get_project_name(settings.config_path)
        logger.info("Generating splash screens for project %s", project_name)

        report = asyncio.run(generate_all(get_platforms(settings.root), settings))
        if not report.ok:
            raise GenerationFailed(report.failures)
    except SplashBuilderError as e:
        click.echo(e.message or "splash generation aborted")
        status = 1
    finally:
        display.blank()
    return status


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--config-file", default=None, help="Cordova config file (default: config.xml)")
@click.option("--splash-file", default=None, help="Source splash image (default: splash-2208.png)")
@click.option("--project-dir", default=None, type=click.Path(file_okay=False),
              help="Root folder of the Cordova project (default: current directory)")
@click.option("--timeout", "crop_timeout", default=None, type=click.FloatRange(min=0, min_open=True),
              help="Seconds allowed for a single crop (default: 60)")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="splash-builder")
def main(config_file, splash_file, project_dir, crop_timeout, verbose):
    """Generate Cordova splash screens for every added platform from one source image."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    settings = settings.override(
        config_file=config_file,
        splash_file=splash_file,
        project_dir=project_dir,
        crop_timeout=crop_timeout,
    )
    logger.debug("settings: %s", settings)
    raise SystemExit(run_pipeline(settings))


if __name__ == "__main__":
    main()
