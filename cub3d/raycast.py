"""Casting one ray per screen column through the map grid (DDA)."""

import math
from dataclasses import dataclass

from .player import is_wall

WIN_WIDTH = 1280
WIN_HEIGHT = 720
TEX_WIDTH = 64
TEX_HEIGHT = 64
FAR = 1e30


@dataclass
class Ray:
    """State of one ray from the player through a screen column."""

    camera_x: float = 0.0
    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    perp_wall_dist: float = 0.0
    step_x: int = 0
    step_y: int = 0
    hit: bool = False
    side: int = 0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0
    wall_x: float = 0.0
    tex_x: int = 0
    step: float = 0.0
    tex_pos: float = 0.0


def init_ray(player, x):
    """Return the ray for screen column *x*, starting in the player's cell."""
    camera_x = 2 * x / WIN_WIDTH - 1
    ray_dir_x = player.dir_x + player.plane_x * camera_x
    ray_dir_y = player.dir_y + player.plane_y * camera_x
    return Ray(
        camera_x=camera_x,
        ray_dir_x=ray_dir_x,
        ray_dir_y=ray_dir_y,
        map_x=int(player.pos_x),
        map_y=int(player.pos_y),
        delta_dist_x=FAR if ray_dir_x == 0 else abs(1 / ray_dir_x),
        delta_dist_y=FAR if ray_dir_y == 0 else abs(1 / ray_dir_y),
        hit=False,
    )


def set_step_and_side_dist(ray, player):
    """Set the grid step and the distance to the first cell edge on each axis."""
    if ray.ray_dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.pos_x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.pos_x) * ray.delta_dist_x
    if ray.ray_dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.pos_y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.pos_y) * ray.delta_dist_y
    return ray


def is_hit(grid, map_x, map_y):
    """Whether grid cell (map_x, map_y) stops a ray."""
    return is_wall(grid, map_x, map_y)


def perform_dda(ray, grid):
    """Step the ray cell by cell until it enters a wall."""
    while not ray.hit:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if is_hit(grid, ray.map_x, ray.map_y):
            ray.hit = True
    return ray


def calculate_wall_distance(ray, player):
    """Set the perpendicular wall distance and the on-screen wall slice."""
    if ray.side == 0:
        ray.perp_wall_dist = (
            ray.map_x - player.pos_x + (1 - ray.step_x) // 2
        ) / ray.ray_dir_x
    else:
        ray.perp_wall_dist = (
            ray.map_y - player.pos_y + (1 - ray.step_y) // 2
        ) / ray.ray_dir_y
    distance = ray.perp_wall_dist if ray.perp_wall_dist > 1e-12 else 1e-12
    ray.line_height = int(WIN_HEIGHT / distance)
    half = ray.line_height // 2
    ray.draw_start = max(-half + WIN_HEIGHT // 2, 0)
    ray.draw_end = min(half + WIN_HEIGHT // 2, WIN_HEIGHT - 1)
    return ray


def calculate_texture_x(ray, player):
    """Set where on the wall the ray struck and the texture column to sample."""
    if ray.side == 0:
        wall_x = player.pos_y + ray.perp_wall_dist * ray.ray_dir_y
    else:
        wall_x = player.pos_x + ray.perp_wall_dist * ray.ray_dir_x
    ray.wall_x = wall_x - math.floor(wall_x)
    ray.tex_x = int(ray.wall_x * TEX_WIDTH)
    if ray.side == 0 and ray.ray_dir_x > 0:
        ray.tex_x = TEX_WIDTH - ray.tex_x - 1
    if ray.side == 1 and ray.ray_dir_y < 0:
        ray.tex_x = TEX_WIDTH - ray.tex_x - 1
    return ray


def cast_ray(player, grid, x):
    """Return the fully traced ray for screen column *x*."""
    ray = init_ray(player, x)
    set_step_and_side_dist(ray, player)
    perform_dda(ray, grid)
    calculate_wall_distance(ray, player)
    return ray