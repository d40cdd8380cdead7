import pytest

from cub3d.errors import ConfigError, format_error


def test_format_error_matches_report_layout():
    assert format_error("map must be last") == "\033[1;31mError : \033[0mmap must be last"


def test_format_error_ends_with_message():
    message = "Invalid file extension. Must be .cub"
    text = format_error(message)
    assert text.endswith(message)
    assert text.startswith("\033[1;31m")


def test_config_error_keeps_message():
    error = ConfigError("map must be surrounded by walls")
    assert str(error) == "map must be surrounded by walls"
    assert error.message == "map must be surrounded by walls"


def test_config_error_is_caught_as_value_error():
    error = ConfigError("missing path")
    try:
        raise error
    except ValueError as caught:
        assert caught is error
        assert caught.message == "missing path"
    else:
        pytest.fail("ConfigError was not caught as ValueError")


def test_format_error_accepts_error_text():
    error = ConfigError("Missing texture")
    assert format_error(str(error)).endswith("Missing texture")