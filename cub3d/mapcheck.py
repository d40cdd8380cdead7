"""Extraction and validation of the map grid of a scene file."""

import re

from .errors import ConfigError
from .lines import element_id, is_empty, is_map_content

_BORDER_CHARS = "1 \t"
_ALLOWED_CHARS = "10NSEW \t"
_PLAYER_CHARS = "NSEW"
_OPEN_CHARS = "0NSEW"
_MAP_CHARS = "10NSEW"
_BLANKS = " \t"
_GAP = re.compile(r"[ \t]{3,}")


def _without_newline(row):
    return row[:-1] if row.endswith("\n") else row


def check_border_row(row):
    """Whether a top or bottom row holds only walls and blanks."""
    return all(char in _BORDER_CHARS for char in _without_newline(row))


def check_middle_row(row):
    """Whether an inner row starts and ends, past its blanks, with a wall."""
    row = _without_newline(row)
    leading = row.lstrip(_BLANKS)
    if leading and leading[0] != "1":
        return False
    return row.rstrip(_BLANKS).endswith("1")


def check_close_walls(grid):
    """Whether the map is closed by walls on its outer rows and row ends."""
    last = len(grid) - 1
    for index, row in enumerate(grid):
        if index in (0, last):
            if not check_border_row(row):
                return False
        elif not check_middle_row(row):
            return False
    return True


def check_characters(grid):
    """Whether every row uses only map characters and none is one character long."""
    for row in grid:
        if len(row) == 1:
            return False
        if any(char not in _ALLOWED_CHARS for char in row):
            return False
    return True


def _leaks(grid, start, visited):
    """Whether the open area reachable from *start* touches a blank or the edge."""
    stack = [start]
    while stack:
        i, j = stack.pop()
        if not 0 <= i < len(grid) or j < 0 or j >= len(grid[i]):
            return True
        if (i, j) in visited:
            continue
        cell = grid[i][j]
        if cell in ("1", "V"):
            continue
        if cell in _BLANKS:
            return True
        visited.add((i, j))
        stack.extend(((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)))
    return False


def check_space_on_map(grid):
    """Whether no floor or player cell can reach a blank or the map's edge."""
    visited = set()
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell in _OPEN_CHARS and (i, j) not in visited:
                if _leaks(grid, (i, j), visited):
                    return False
    return True


def check_player(grid):
    """Whether the map holds exactly one player start."""
    return sum(row.count(char) for row in grid for char in _PLAYER_CHARS) == 1


def player_position(grid):
    """Return (x, y) of the first player start found, or None."""
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char in _PLAYER_CHARS:
                return x, y
    return None


def content_bounds(line):
    """Return (first, last) indices of map content in *line*, or None."""
    indices = [index for index, char in enumerate(line) if is_map_content(char)]
    if not indices:
        return None
    return indices[0], indices[-1]


def check_single_line(line, first, last):
    """Whether no gap of more than two blanks separates content in *line*."""
    segment = line[first:last + 1]
    for gap in _GAP.finditer(segment):
        end = first + gap.end()
        if end <= last and is_map_content(line[end]):
            return False
    return True


def check_trailing_content(grid):
    """Whether no row holds disconnected sections of map content."""
    for row in grid:
        bounds = content_bounds(row)
        if bounds is not None and not check_single_line(row, *bounds):
            return False
    return True


def map_width(grid):
    """Return the length of the longest row."""
    return max((len(row) for row in grid), default=0)


def is_map_empty(lines):
    """Whether no line holds any wall, floor or player character."""
    return not any(char in _MAP_CHARS for line in lines for char in line)


def map_bounds(lines):
    """Return (start, end) indices of the first and last map lines, or None."""
    candidates = [
        index
        for index, line in enumerate(lines)
        if not element_id(line) and not is_empty(line)
    ]
    if not candidates:
        return None
    return candidates[0], candidates[-1]


def extract_grid(lines):
    """Return the rows of the map found in the newline-free *lines*."""
    if is_map_empty(lines):
        raise ConfigError("the file is empty")
    bounds = map_bounds(lines)
    if bounds is None or bounds[0] >= bounds[1]:
        raise ConfigError("No map found in file")
    start, end = bounds
    return [
        line.split("\n", 1)[0]
        for line in lines[start:end + 1]
        if not element_id(line) and not line.startswith("\n")
    ]


def validate_map(grid):
    """Check the grid in the order the scene rules are applied; return it."""
    if not check_characters(grid):
        raise ConfigError("map contains invalid characters")
    if not check_close_walls(grid):
        raise ConfigError("map must be surrounded by walls")
    if not check_space_on_map(grid):
        raise ConfigError("Map contains invalid spaces")
    if not check_trailing_content(grid):
        raise ConfigError("Map has disconnected sections or trailing content")
    if not check_player(grid):
        raise ConfigError("map most have only one player")
    return grid