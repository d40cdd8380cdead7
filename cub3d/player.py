"""The player: position, facing, movement and collision with walls."""

import math
from dataclasses import dataclass

MOVE_SPEED = 0.1
ROT_SPEED = 0.1
COLLISION_RADIUS = 0.25
PLANE_LENGTH = 0.66

_SOLID = ("1", " ")
_CORNERS = (
    (COLLISION_RADIUS, COLLISION_RADIUS),
    (-COLLISION_RADIUS, COLLISION_RADIUS),
    (COLLISION_RADIUS, -COLLISION_RADIUS),
    (-COLLISION_RADIUS, -COLLISION_RADIUS),
)
_DIRECTIONS = {
    "N": (0.0, -1.0, PLANE_LENGTH, 0.0),
    "S": (0.0, 1.0, -PLANE_LENGTH, 0.0),
    "E": (1.0, 0.0, 0.0, PLANE_LENGTH),
    "W": (-1.0, 0.0, 0.0, -PLANE_LENGTH),
}


def is_wall(grid, x, y):
    """Whether the cell containing (x, y) is a wall, a blank or off the map."""
    ix = int(x)
    iy = int(y)
    if iy < 0 or iy >= len(grid) or ix < 0:
        return True
    row = grid[iy]
    if row is None or ix >= len(row):
        return True
    return row[ix] in _SOLID


def check_collision(grid, x, y):
    """Whether a player of fixed radius standing at (x, y) touches a wall."""
    return any(is_wall(grid, x + dx, y + dy) for dx, dy in _CORNERS)


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0

    def set_direction(self, direction):
        """Face N, S, E or W; any other character faces south."""
        self.dir_x, self.dir_y, self.plane_x, self.plane_y = _DIRECTIONS.get(
            direction, _DIRECTIONS["S"]
        )

    def _step(self, grid, dx, dy):
        new_x = self.pos_x + dx
        new_y = self.pos_y + dy
        if not check_collision(grid, new_x, self.pos_y):
            self.pos_x = new_x
        if not check_collision(grid, self.pos_x, new_y):
            self.pos_y = new_y

    def move_forward(self, grid):
        """Step along the view direction, sliding along walls."""
        self._step(grid, self.dir_x * MOVE_SPEED, self.dir_y * MOVE_SPEED)

    def move_backward(self, grid):
        """Step against the view direction, sliding along walls."""
        self._step(grid, -self.dir_x * MOVE_SPEED, -self.dir_y * MOVE_SPEED)

    def move_left(self, grid):
        """Strafe against the camera plane, sliding along walls."""
        self._step(grid, -self.plane_x * MOVE_SPEED, -self.plane_y * MOVE_SPEED)

    def move_right(self, grid):
        """Strafe along the camera plane, sliding along walls."""
        self._step(grid, self.plane_x * MOVE_SPEED, self.plane_y * MOVE_SPEED)

    def _rotate(self, angle):
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def rotate_left(self):
        """Turn the view and camera plane counter-clockwise on screen."""
        self._rotate(-ROT_SPEED)

    def rotate_right(self):
        """Turn the view and camera plane clockwise on screen."""
        self._rotate(ROT_SPEED)


def spawn_player(config):
    """Place a player at the centre of the scene's start cell, facing its letter."""
    pos_x = config.player_x + 0.5
    pos_y = config.player_y + 0.5
    if pos_x < 1.5:
        pos_x = 1.5
    if pos_y < 1.5:
        pos_y = 1.5
    if pos_x > config.width - 1.5:
        pos_x = config.width - 1.5
    if pos_y > config.height - 1.5:
        pos_y = config.height - 1.5
    player = Player(pos_x=pos_x, pos_y=pos_y)
    player.set_direction(config.player_direction)
    return player