from pathlib import Path

import pytest
from PIL import Image

from splash_builder.settings import Settings

CONFIG_XML = """<?xml version='1.0' encoding='utf-8'?>
<widget id="com.example.hello" version="1.0.0" xmlns="http://www.w3.org/ns/widgets">
    <name>HelloCordova</name>
    <description>A sample Apache Cordova application</description>
</widget>
"""


def make_project(root: Path, platforms=("android",), splash=True, config=CONFIG_XML, size=(400, 400)):
    for name in platforms:
        (root / "res" / "screen" / name).mkdir(parents=True)
    if splash:
        Image.new("RGB", size, (200, 30, 30)).save(root / "splash-2208.png")
    if config is not None:
        (root / "config.xml").write_text(config, encoding="utf-8")
    return root


@pytest.fixture
def project(tmp_path):
    return make_project(tmp_path)


@pytest.fixture
def settings(project):
    return Settings(project_dir=str(project))
