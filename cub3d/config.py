"""Loading and checking a complete .cub scene file."""

import os
from dataclasses import dataclass, field

from .colors import parse_colors
from .errors import ConfigError
from .lines import check_map_position
from .mapcheck import extract_grid, map_width, player_position, validate_map
from .textures import TexturePaths, parse_textures

_EXTENSION = ".cub"


@dataclass
class CubConfig:
    """Everything a scene file describes: map, colours, textures and start."""

    path: str
    grid: list = field(default_factory=list)
    lines: list = field(default_factory=list)
    width: int = 0
    height: int = 0
    ceiling: int = 0
    floor: int = 0
    player_x: int = 0
    player_y: int = 0
    textures: TexturePaths = field(default_factory=TexturePaths)

    @property
    def player_direction(self):
        """The map character at the player's start: N, S, E or W."""
        return self.grid[self.player_y][self.player_x]


def check_extension(path):
    """Whether the part of *path* from its last dot is exactly '.cub'."""
    dot = path.rfind(".")
    return dot >= 0 and path[dot:] == _EXTENSION


def check_file_status(path):
    """Raise ConfigError unless *path* is a readable file with a .cub name."""
    if path is None:
        return
    if not (os.path.exists(path) and os.access(path, os.R_OK)):
        raise ConfigError("file does not exist")
    if len(path) <= len(_EXTENSION):
        raise ConfigError("Invalid file name")
    if not check_extension(path):
        raise ConfigError("Invalid file extension. Must be .cub")


def read_lines(path):
    """Return the lines of *path*, each keeping its trailing newline if it has one."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
        text = handle.read()
    pieces = text.split("\n")
    lines = [piece + "\n" for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def strip_newlines(lines):
    """Return *lines* with one trailing newline removed from each."""
    return [line[:-1] if line.endswith("\n") else line for line in lines]


def load_config(path):
    """Read, check and return the scene described by the file at *path*."""
    check_file_status(path)
    raw = read_lines(path)
    if not check_map_position(raw):
        raise ConfigError("map must be last")
    lines = strip_newlines(raw)
    grid = extract_grid(lines)
    ceiling, floor = parse_colors(lines)
    validate_map(grid)
    textures = parse_textures(lines)
    player_x, player_y = player_position(grid)
    return CubConfig(
        path=path,
        grid=grid,
        lines=lines,
        width=map_width(grid),
        height=len(grid),
        ceiling=ceiling,
        floor=floor,
        player_x=player_x,
        player_y=player_y,
        textures=textures,
    )


def describe_color(name, color):
    """Return one line showing *color* as a number and as its R, G, B parts."""
    red = (color >> 16) & 0xFF
    green = (color >> 8) & 0xFF
    blue = color & 0xFF
    return f"{name}: {color} -> (R:{red}, G:{green}, B:{blue})"


def _shown(value):
    return "(null)" if value is None else value


def describe(config):
    """Return a readable dump of *config* for debugging."""
    textures = config.textures
    parts = [
        "===== DEBUG GAME =====",
        f"Map width: {config.width}",
        f"Map height: {config.height}",
        describe_color("Floor", config.floor),
        describe_color("Ceiling", config.ceiling),
        "",
        "Textures:",
        f"  NO: -> {_shown(textures.north)}",
        f"  SO: -> {_shown(textures.south)}",
        f"  WE: -> {_shown(textures.west)}",
        f"  EA: -> {_shown(textures.east)}",
        "",
        "Map grid:",
        *config.grid[: config.height],
        "======================",
    ]
    return "\n".join(parts) + "\n"