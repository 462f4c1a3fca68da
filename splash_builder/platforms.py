# splash_builder/platforms.py
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SplashSpec:
    name: str
    width: int
    height: int


@dataclass(frozen=True)
class Platform:
    name: str
    is_added: bool
    splash_path: str
    splash: tuple[SplashSpec, ...]


# (platform, output folder, [(file name, width, height), ...])
PLATFORM_DEFINITIONS = [
    ("ios", "res/screen/ios/", [
        # iPhone Non-Retina (1x)
        ("screen-iphone-portrait.png", 320, 480),
        ("screen-iphone-landscape.png", 480, 320),
        # iPhone Retina (2x)
        ("screen-iphone-portrait-2x.png", 640, 960),
        ("screen-iphone-landscape-2x.png", 960, 640),
        # iPhone 5 Retina (2x)
        ("screen-iphone-portrait-568h-2x.png", 640, 1136),
        ("screen-iphone-landscape-568h-2x.png", 1136, 640),
        # iPhone 6 (2x)
        ("screen-iphone-portrait-667h-2x.png", 750, 1334),
        ("screen-iphone-landscape-667h-2x.png", 1334, 750),
        # iPhone 6 Plus (3x)
        ("screen-iphone-portrait-736h-3x.png", 1242, 2208),
        ("screen-iphone-landscape-736h-3x.png", 2208, 1242),
        # iPad Non-Retina (1x)
        ("screen-ipad-portrait.png", 768, 1024),
        ("screen-ipad-landscape.png", 1024, 768),
        # iPad Retina (2x)
        ("screen-ipad-portrait-2x.png", 1536, 2048),
        ("screen-ipad-landscape-2x.png", 2048, 1536),
    ]),
    ("android", "res/screen/android/", [
        ("screen-ldpi-landscape.png", 320, 200),
        ("screen-mdpi-landscape.png", 480, 320),
        ("screen-hdpi-landscape.png", 800, 480),
        ("screen-xhdpi-landscape.png", 1280, 720),

        ("screen-ldpi-portrait.png", 200, 320),
        ("screen-mdpi-portrait.png", 320, 480),
        ("screen-hdpi-portrait.png", 480, 800),
        ("screen-xhdpi-portrait.png", 720, 1280),
    ]),
]


def get_platforms(root: str | Path = ".") -> list[Platform]:
    """Check which platforms are added to the project under *root*.

    A platform counts as added when its splash folder exists. Output paths
    stay relative to *root*.
    """
    root = Path(root)
    platforms = []
    for name, splash_path, sizes in PLATFORM_DEFINITIONS:
        platforms.append(Platform(
            name=name,
            is_added=(root / splash_path).is_dir(),
            splash_path=splash_path,
            splash=tuple(SplashSpec(*size) for size in sizes),
        ))
    return platforms


def active_platforms(platforms: list[Platform]) -> list[Platform]:
    return [p for p in platforms if p.is_added]
