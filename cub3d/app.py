"""The game window: scene loading, key handling and the main loop."""

import os
import sys
from dataclasses import dataclass, field

import numpy as np

from .config import CubConfig, load_config
from .errors import ConfigError, format_error
from .player import Player, spawn_player
from .raycast import WIN_HEIGHT, WIN_WIDTH
from .render import Textures, new_frame, render

KEY_ESC = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_LEFT = 65361
KEY_RIGHT = 65363

_USAGE = "Usage: ./cub <map_file.cub>"
_TITLE = "cub3D"


@dataclass
class Game:
    """A running scene: its configuration, player, textures and frame."""

    config: CubConfig
    player: Player
    textures: Textures
    frame: np.ndarray = field(default_factory=new_frame)

    @classmethod
    def from_config(cls, config, textures):
        """Start a game at the scene's player position."""
        return cls(
            config=config,
            player=spawn_player(config),
            textures=textures,
            frame=new_frame(),
        )

    def handle_key(self, keycode):
        """Apply one key press and redraw; return False when the game should end."""
        grid = self.config.grid
        actions = {
            KEY_W: lambda: self.player.move_forward(grid),
            KEY_S: lambda: self.player.move_backward(grid),
            KEY_A: lambda: self.player.move_left(grid),
            KEY_D: lambda: self.player.move_right(grid),
            KEY_LEFT: self.player.rotate_left,
            KEY_RIGHT: self.player.rotate_right,
        }
        if keycode == KEY_ESC:
            return False
        action = actions.get(keycode)
        if action is not None:
            action()
        self.render()
        return True

    def render(self):
        """Draw the current view into the frame and return it."""
        return render(
            self.frame,
            self.player,
            self.config.grid,
            self.textures,
            self.config.ceiling,
            self.config.floor,
        )


def _to_rgb(frame):
    channels = ((frame >> 16) & 0xFF, (frame >> 8) & 0xFF, frame & 0xFF)
    return np.stack(channels, axis=-1).astype(np.uint8).swapaxes(0, 1)


def _run_window(game):
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    keys = {
        pygame.K_ESCAPE: KEY_ESC,
        pygame.K_w: KEY_W,
        pygame.K_a: KEY_A,
        pygame.K_s: KEY_S,
        pygame.K_d: KEY_D,
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_RIGHT: KEY_RIGHT,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(_TITLE)
        pygame.key.set_repeat(200, 20)
        clock = pygame.time.Clock()
        game.render()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not game.handle_key(keys.get(event.key, -1)):
                        running = False
                elif event.type == pygame.VIDEOEXPOSE:
                    game.render()
            pygame.surfarray.blit_array(screen, _to_rgb(game.frame))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


def main(argv=None):
    """Load the scene named on the command line and play it in a window."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print(_USAGE)
        return 1
    try:
        config = load_config(argv[0])
    except ConfigError as exc:
        print(format_error(exc.message), file=sys.stderr)
        return 0
    try:
        textures = Textures.load(config.textures)
    except ConfigError as exc:
        print(f"Error\n{exc.message}")
        return 1
    return _run_window(Game.from_config(config, textures))


if __name__ == "__main__":
    sys.exit(main())