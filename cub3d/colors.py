"""Floor and ceiling colour definitions."""

from .errors import ConfigError
from .lines import find_color_line, no_empty_values, skip_space, truncate_at_blank

_DIGITS = "0123456789"
_BLANKS = " \t"
_NAMES = {"F": "Floor", "C": "Ceiling"}


def convert_color(red, green, blue):
    """Pack three channel values into one 0xRRGGBB integer."""
    return (red << 16) | (green << 8) | blue


def only_digits(s):
    """Whether the part of *s* before its first blank is made of digits."""
    if s is None:
        return False
    return all(char in _DIGITS for char in truncate_at_blank(s))


def is_valid_rgb_component(s, key):
    """Whether *s* is optional blanks or keys, digits, then optional blanks."""
    rest = s.lstrip(_BLANKS + key)
    after_digits = rest.lstrip(_DIGITS)
    if len(after_digits) == len(rest):
        return False
    return after_digits.strip(_BLANKS) == ""


def rgb_components(lines, key):
    """Return the three raw comma-separated parts of the *key* line, or None."""
    line = find_color_line(lines, key)
    if line is None or ",," in line:
        return None
    parts = [part for part in line.split(",") if part]
    if len(parts) != 3:
        return None
    if not all(is_valid_rgb_component(part, key) for part in parts):
        return None
    return parts


def clean_component(value, key, is_first):
    """Strip blanks (and the leading key for the first part); None if empty."""
    i = skip_space(value)
    if is_first and value[i:i + 1] == key:
        i += 1
    trimmed = value[i:].strip(_BLANKS)
    if not trimmed or trimmed.startswith("\n"):
        return None
    return trimmed


def split_color(lines, key):
    """Return the cleaned R, G, B strings of the *key* line, or None."""
    rgb = rgb_components(lines, key)
    if rgb is None:
        return None
    result = [clean_component(value, key, index == 0) for index, value in enumerate(rgb)]
    if any(value is None for value in result):
        return None
    return result


def color_format(lines, key):
    """Return the packed colour of the *key* line; raise ConfigError if invalid."""
    name = _NAMES.get(key, key)
    rgb = split_color(lines, key)
    if rgb is None or not no_empty_values(rgb) or not all(only_digits(v) for v in rgb):
        raise ConfigError(f"{name} color definition is missing or incomplete")
    red, green, blue = (int(value) for value in rgb)
    if min(red, green, blue) < 0:
        raise ConfigError(f"{name} color values must be positive")
    if max(red, green, blue) > 255:
        raise ConfigError(f"{name} color values must be between (0,255)")
    return convert_color(red, green, blue)


def _count_key(lines, key):
    return sum(
        1
        for line in lines
        for index, char in enumerate(line)
        if char == key and line[index + 1:index + 2] in ("", " ")
    )


def check_color_duplicate(lines):
    """Whether exactly one ceiling and one floor key appear in *lines*."""
    return _count_key(lines, "C") == 1 and _count_key(lines, "F") == 1


def floor_color(lines):
    """Return the packed floor colour."""
    return color_format(lines, "F")


def ceiling_color(lines):
    """Return the packed ceiling colour."""
    return color_format(lines, "C")


def parse_colors(lines):
    """Return (ceiling, floor) colours, checking duplicates and then each colour."""
    if not check_color_duplicate(lines):
        raise ConfigError(
            "there must be exactly one ceiling color and one floor color.!"
        )
    ceiling = ceiling_color(lines)
    floor = floor_color(lines)
    return ceiling, floor