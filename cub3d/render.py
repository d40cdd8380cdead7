"""Drawing a frame: floor, ceiling and textured wall columns."""

from dataclasses import dataclass

import numpy as np
from PIL import Image

from .errors import ConfigError
from .raycast import (
    TEX_HEIGHT,
    WIN_HEIGHT,
    WIN_WIDTH,
    calculate_texture_x,
    cast_ray,
)


@dataclass
class Texture:
    """A wall image as rows of packed 0xRRGGBB pixels."""

    pixels: np.ndarray

    def __post_init__(self):
        self.pixels = np.asarray(self.pixels, dtype=np.uint32)

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]

    def pixel(self, x, y):
        """Return the colour at (x, y), or 0 outside the image."""
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return 0
        return int(self.pixels[y, x])

    def _sample(self, x, ys):
        out = np.zeros(len(ys), dtype=np.uint32)
        if not 0 <= x < self.width:
            return out
        valid = (ys >= 0) & (ys < self.height)
        out[valid] = self.pixels[ys[valid], x]
        return out

    @classmethod
    def load(cls, path):
        """Read an image file into a texture."""
        with Image.open(path) as image:
            rgb = np.asarray(image.convert("RGB"), dtype=np.uint32)
        packed = (rgb[:, :, 0] << 16) | (rgb[:, :, 1] << 8) | rgb[:, :, 2]
        return cls(packed)


@dataclass
class Textures:
    """The four wall textures, one per facing."""

    north: Texture
    south: Texture
    east: Texture
    west: Texture

    def for_ray(self, ray):
        """Return the texture of the wall face the ray struck."""
        if ray.side == 0:
            return self.east if ray.ray_dir_x > 0 else self.west
        return self.south if ray.ray_dir_y > 0 else self.north

    @classmethod
    def load(cls, paths):
        """Load the textures named by a TexturePaths; raise ConfigError on failure."""
        loaded = {}
        for name in ("north", "south", "east", "west"):
            path = getattr(paths, name)
            try:
                if path is None:
                    raise FileNotFoundError(name)
                loaded[name] = Texture.load(path)
            except (OSError, ValueError, SyntaxError) as exc:
                raise ConfigError(f"Failed to load {name} texture: {path}") from exc
        return cls(**loaded)


def new_frame():
    """Return a blank window-sized frame of packed colours."""
    return np.zeros((WIN_HEIGHT, WIN_WIDTH), dtype=np.uint32)


def put_pixel(frame, x, y, color):
    """Set one pixel of *frame*, ignoring positions outside the window."""
    if x < 0 or x >= WIN_WIDTH or y < 0 or y >= WIN_HEIGHT:
        return
    frame[y, x] = color


def draw_floor_ceiling(frame, ceiling, floor):
    """Fill the upper half with the ceiling colour and the lower with the floor."""
    frame[: WIN_HEIGHT // 2, :WIN_WIDTH] = ceiling
    frame[WIN_HEIGHT // 2 : WIN_HEIGHT, :WIN_WIDTH] = floor
    return frame


def draw_column(frame, ray, texture, x):
    """Draw the textured wall slice of a traced ray into column *x*."""
    if ray.line_height <= 0:
        return frame
    ray.step = TEX_HEIGHT / ray.line_height
    ray.tex_pos = (
        ray.draw_start - WIN_HEIGHT // 2 + ray.line_height // 2
    ) * ray.step
    count = ray.draw_end - ray.draw_start
    if count <= 0:
        return frame
    positions = ray.tex_pos + ray.step * np.arange(count)
    ray.tex_pos += ray.step * count
    if not 0 <= x < WIN_WIDTH:
        return frame
    tex_y = positions.astype(np.int64) & (TEX_HEIGHT - 1)
    frame[ray.draw_start : ray.draw_end, x] = texture._sample(ray.tex_x, tex_y)
    return frame


def raycast(frame, player, grid, textures):
    """Cast one ray per screen column and draw the walls it meets."""
    for x in range(WIN_WIDTH):
        ray = cast_ray(player, grid, x)
        calculate_texture_x(ray, player)
        draw_column(frame, ray, textures.for_ray(ray), x)
    return frame


def render(frame, player, grid, textures, ceiling, floor):
    """Draw a complete view of the scene into *frame* and return it."""
    draw_floor_ceiling(frame, ceiling, floor)
    raycast(frame, player, grid, textures)
    return frame