"""Wall texture directives (NO, SO, WE, EA) of a scene file."""

from dataclasses import dataclass
from itertools import dropwhile, islice

from .errors import ConfigError
from .lines import (
    is_texture_directive,
    missing_path,
    skip_space,
    strip_trailing_space,
    texture_id,
    texture_key_at,
    texture_prefix_id,
)

_FIELDS = {1: "north", 2: "south", 3: "west", 4: "east"}


@dataclass
class TexturePaths:
    """Paths of the four wall textures."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None


def parse_texture(line, paths):
    """Store the path of a texture directive in *paths* and return it, or None."""
    start = skip_space(line)
    key = texture_key_at(line, start)
    if not key:
        return None
    path = line[skip_space(line, start + 2):]
    setattr(paths, _FIELDS[key], path)
    return path


def texture_lines(lines):
    """Return the texture directives of *lines*, or None if one has no path."""
    selected = []
    for line in lines:
        if missing_path(line):
            return None
        if texture_id(line):
            selected.append(line)
    return selected


def has_all_textures(lines):
    """Whether the first four non-newline lines are all texture directives."""
    remaining = dropwhile(lambda line: line.startswith("\n"), lines)
    first_four = list(islice(remaining, 4))
    if len(first_four) != 4:
        return False
    return all(
        is_texture_directive(line[skip_space(line):][:3]) for line in first_four
    )


def check_multiple_textures(lines):
    """Whether each texture key appears at most once; False for no lines."""
    if not lines:
        return False
    seen = set()
    for line in lines:
        key = texture_prefix_id(line)
        if key:
            if key in seen:
                return False
            seen.add(key)
    return True


def is_valid_extension(path):
    """Whether *path*, without trailing blanks, ends in .xpm and has no '..'."""
    path = strip_trailing_space(path)
    dot = path.rfind(".")
    if dot < 0 or path[dot:] != ".xpm":
        return False
    return ".." not in path


def validate_texture_format(paths):
    """Whether there are four paths and each has a valid extension."""
    if len(paths) < 4:
        return False
    return all(path and is_valid_extension(path) for path in paths[:4])


def parse_textures(lines):
    """Return the four texture paths of the scene; raise ConfigError if invalid."""
    selected = texture_lines(lines)
    if selected is None:
        raise ConfigError("missing path")
    if not check_multiple_textures(selected):
        raise ConfigError("Only one of each texture is allowed (NO,SO,WE,EA)")
    if not has_all_textures(selected):
        raise ConfigError("Missing texture")
    paths = TexturePaths()
    found = [
        path
        for path in (parse_texture(line, paths) for line in selected)
        if path is not None
    ]
    if not validate_texture_format(found):
        raise ConfigError("Texture files must have .xpm extension")
    return TexturePaths(
        **{
            name: strip_trailing_space(value) if value is not None else None
            for name, value in vars(paths).items()
        }
    )