# splash_builder/crop.py
"""Single crop, run as ``python -m splash_builder.crop SRC DST WIDTH HEIGHT``.

Each crop lives in its own process so a hung one can be killed.
"""
from pathlib import Path

import click
from PIL import Image, ImageOps

from .errors import CropOperationError

# PNG zlib level: 1 = fastest / least compression
PNG_COMPRESS_LEVEL = 1


def crop_image(src: str | Path, dst: str | Path, width: int, height: int):
    """Scale *src* to cover width x height, center-crop it and save *dst* as PNG."""
    try:
        with Image.open(src) as img:
            fitted = ImageOps.fit(img.convert("RGBA"), (width, height), Image.LANCZOS)
            fitted.save(dst, format="PNG", compress_level=PNG_COMPRESS_LEVEL)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise CropOperationError(Path(dst).name, e) from e


@click.command()
@click.argument("src", type=click.Path(dir_okay=False))
@click.argument("dst", type=click.Path(dir_okay=False))
@click.argument("width", type=click.IntRange(min=1))
@click.argument("height", type=click.IntRange(min=1))
def main(src, dst, width, height):
    try:
        crop_image(src, dst, width, height)
    except CropOperationError as e:
        raise click.ClickException(str(e.cause)) from e


if __name__ == "__main__":
    main()
