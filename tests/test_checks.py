import pytest

from splash_builder.checks import at_least_one_platform_found, config_file_exists, valid_splash_exists
from splash_builder.errors import MissingConfigFile, MissingSplashAsset, NoPlatformFound
from splash_builder.settings import Settings

from .conftest import make_project


def test_platforms_found_reports_names(tmp_path, capsys):
    make_project(tmp_path, platforms=("ios", "android"))
    names = at_least_one_platform_found(Settings(project_dir=str(tmp_path)))
    assert names == ["ios", "android"]
    assert "platforms found: ios, android" in capsys.readouterr().out


def test_no_platform(tmp_path, capsys):
    with pytest.raises(NoPlatformFound):
        at_least_one_platform_found(Settings(project_dir=str(tmp_path)))
    assert "No cordova platforms found" in capsys.readouterr().out


def test_splash_checks(tmp_path):
    make_project(tmp_path, splash=False)
    settings = Settings(project_dir=str(tmp_path))
    with pytest.raises(MissingSplashAsset):
        valid_splash_exists(settings)
    config_file_exists(settings)


def test_config_check(tmp_path):
    make_project(tmp_path, config=None)
    settings = Settings(project_dir=str(tmp_path))
    valid_splash_exists(settings)
    with pytest.raises(MissingConfigFile):
        config_file_exists(settings)
