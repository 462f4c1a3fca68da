from splash_builder.platforms import active_platforms, get_platforms

from .conftest import make_project


def test_catalog_order_and_sizes(tmp_path):
    platforms = get_platforms(tmp_path)
    assert [p.name for p in platforms] == ["ios", "android"]
    ios, android = platforms
    assert len(ios.splash) == 14
    assert len(android.splash) == 8
    assert ios.splash_path == "res/screen/ios/"
    assert (android.splash[0].name, android.splash[0].width, android.splash[0].height) == (
        "screen-ldpi-landscape.png", 320, 200)
    assert (android.splash[-1].name, android.splash[-1].width, android.splash[-1].height) == (
        "screen-xhdpi-portrait.png", 720, 1280)


def test_filenames_unique_per_platform(tmp_path):
    for platform in get_platforms(tmp_path):
        names = [s.name for s in platform.splash]
        assert len(names) == len(set(names))


def test_presence_follows_directories(tmp_path):
    assert active_platforms(get_platforms(tmp_path)) == []
    make_project(tmp_path, platforms=("ios",), splash=False, config=None)
    flags = {p.name: p.is_added for p in get_platforms(tmp_path)}
    assert flags == {"ios": True, "android": False}


def test_file_in_place_of_directory_is_not_a_platform(tmp_path):
    (tmp_path / "res" / "screen").mkdir(parents=True)
    (tmp_path / "res" / "screen" / "android").write_text("")
    assert active_platforms(get_platforms(tmp_path)) == []
