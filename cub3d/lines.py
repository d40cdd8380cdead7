"""Classification of the individual lines of a .cub scene file."""

TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_KEY_IDS = {key: number for number, key in enumerate(TEXTURE_KEYS, start=1)}
_ELEMENT_PREFIXES = TEXTURE_KEYS + ("F", "C")
_BLANKS = " \t"
_WHITESPACE = " \t\n\v\f\r"
_MAP_CHARS = "10NSEW"
FLOOR_ID = 5
CEILING_ID = 6


def skip_space(s, i=0):
    """Return the first index at or after *i* that is not a space or tab."""
    if s is None:
        return i
    while i < len(s) and s[i] in _BLANKS:
        i += 1
    return i


def texture_key_at(s, i):
    """Return 1-4 for NO, SO, WE, EA found at position *i*, else 0."""
    if s is None or i < 0:
        return 0
    return _KEY_IDS.get(s[i:i + 2], 0)


def texture_id(line):
    """Return the texture id of a line whose key is followed by a space, else 0."""
    if line is None:
        return 0
    i = skip_space(line)
    if len(line) < i + 3 or line[i + 2] != " ":
        return 0
    return _KEY_IDS.get(line[i:i + 2], 0)


def texture_prefix_id(line):
    """Return the texture id of a line that merely starts with a texture key."""
    if line is None:
        return 0
    return texture_key_at(line, skip_space(line))


def element_id(line):
    """Return 1-4 for texture keys, 5 for a floor line, 6 for a ceiling line, else 0."""
    if line is None:
        return 0
    i = skip_space(line)
    if i >= len(line):
        return 0
    if line[i] == "F":
        return FLOOR_ID
    if line[i] == "C":
        return CEILING_ID
    return texture_key_at(line, i)


def is_texture_directive(s):
    """Whether *s* starts with a texture key followed by a space or tab."""
    if not s or len(s) < 3:
        return False
    return s[:2] in _KEY_IDS and s[2] in _BLANKS


def is_color_line(s):
    """Whether the first non-blank character of *s* is F or C."""
    if s is None:
        return False
    i = skip_space(s)
    return s[i:i + 1] in ("F", "C") and i < len(s)


def find_color_line(lines, key):
    """Return the first line whose first non-blank character is *key* (F or C)."""
    for line in lines:
        if is_color_line(line) and line[skip_space(line)] == key:
            return line
    return None


def truncate_at_blank(s):
    """Return *s* cut at its first space, tab or newline."""
    for index, char in enumerate(s):
        if char in " \t\n":
            return s[:index]
    return s


def strip_trailing_space(s):
    """Return *s* without trailing spaces, tabs, newlines and carriage returns."""
    return s.rstrip(" \t\n\r")


def is_texture_line(line):
    """Whether *line* starts, after whitespace, with a texture or colour key."""
    if line is None:
        return False
    return line.lstrip(_WHITESPACE).startswith(_ELEMENT_PREFIXES)


def is_map_line(line):
    """Whether *line* holds only map characters and is not a directive."""
    if line is None:
        return False
    rest = line.lstrip(_WHITESPACE)
    if not rest or rest.startswith(_ELEMENT_PREFIXES):
        return False
    rest = rest.lstrip(_MAP_CHARS + _BLANKS)
    return rest == "" or rest.startswith("\n")


def check_map_position(lines):
    """Whether no texture or colour directive follows the start of the map."""
    map_started = False
    for line in lines:
        if is_map_line(line):
            map_started = True
        if map_started and is_texture_line(line):
            return False
    return True


def is_grid(s):
    """Whether the first non-blank character of *s* is a wall or floor cell."""
    return s.lstrip(_BLANKS)[:1] in ("1", "0") and s.strip(_BLANKS) != ""


def is_empty(s):
    """Whether *s* holds nothing but spaces, tabs and newlines."""
    return s.lstrip(" \t\n") == ""


def is_map_content(c):
    """Whether *c* is a wall, floor or player cell."""
    return len(c) == 1 and c in _MAP_CHARS


def no_empty_values(rgb):
    """Whether none of the colour components is an empty string."""
    return all(value != "" for value in rgb)


def missing_path(p):
    """Whether *p* is a bare texture key with no path after it."""
    if p is None:
        return False
    i = skip_space(p)
    return p[i:i + 2] in _KEY_IDS and p[i + 2:i + 3] in ("", "\n")