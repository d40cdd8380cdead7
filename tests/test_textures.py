import pytest

from cub3d.errors import ConfigError
from cub3d.textures import (
    TexturePaths,
    check_multiple_textures,
    has_all_textures,
    is_valid_extension,
    parse_texture,
    parse_textures,
    texture_lines,
    validate_texture_format,
)

FOUR = ["NO ./n.xpm", "SO ./s.xpm", "WE ./w.xpm", "EA ./e.xpm"]


def test_texture_paths_default_empty():
    paths = TexturePaths()
    assert (paths.north, paths.south, paths.west, paths.east) == (None, None, None, None)


def test_parse_texture_sets_field():
    paths = TexturePaths()
    assert parse_texture("NO ./n.xpm", paths) == "./n.xpm"
    assert paths.north == "./n.xpm"
    assert parse_texture("  EA   e.xpm", paths) == "e.xpm"
    assert paths.east == "e.xpm"


def test_parse_texture_ignores_other_lines():
    paths = TexturePaths()
    assert parse_texture("F 1,2,3", paths) is None
    assert paths == TexturePaths()


def test_texture_lines_selects_directives():
    lines = ["NO a.xpm", "F 1,2,3", "SO b.xpm", "111"]
    assert texture_lines(lines) == ["NO a.xpm", "SO b.xpm"]


def test_texture_lines_missing_path():
    assert texture_lines(["NO a.xpm", "WE"]) is None


def test_has_all_textures():
    assert has_all_textures(FOUR) is True
    assert has_all_textures(FOUR[:3]) is False
    assert has_all_textures(["NOx", "SO b", "WE c", "EA d"]) is False


def test_check_multiple_textures():
    assert check_multiple_textures(FOUR) is True
    assert check_multiple_textures(["NO a.xpm", "NO b.xpm"]) is False
    assert check_multiple_textures([]) is False


@pytest.mark.parametrize(
    "path, expected",
    [
        ("a.xpm  ", True),
        ("./textures/wall.xpm", True),
        ("a.png", False),
        ("../a.xpm", False),
        ("axpm", False),
    ],
)
def test_is_valid_extension(path, expected):
    assert is_valid_extension(path) is expected


def test_validate_texture_format():
    assert validate_texture_format(["a.xpm", "b.xpm", "c.xpm", "d.xpm"]) is True
    assert validate_texture_format(["a.xpm", "b.xpm", "c.xpm"]) is False
    assert validate_texture_format(["a.xpm", "b.png", "c.xpm", "d.xpm"]) is False


def test_parse_textures_full_scene():
    lines = ["NO ./n.xpm  ", "SO ./s.xpm", "", "WE ./w.xpm", "EA ./e.xpm", "F 1,2,3", "1111"]
    assert parse_textures(lines) == TexturePaths(
        north="./n.xpm", south="./s.xpm", west="./w.xpm", east="./e.xpm"
    )


@pytest.mark.parametrize(
    "lines, message",
    [
        (FOUR[:3] + ["EA"], "missing path"),
        (FOUR + ["NO ./x.xpm"], "Only one of each texture is allowed (NO,SO,WE,EA)"),
        (FOUR[:3], "Missing texture"),
        (FOUR[:3] + ["EA ./e.png"], "Texture files must have .xpm extension"),
    ],
)
def test_parse_textures_errors(lines, message):
    with pytest.raises(ConfigError) as info:
        parse_textures(lines)
    assert info.value.message == message