"""The game: a window that shows the rendered scene and reacts to keys."""

from __future__ import annotations

import sys
from array import array
from collections.abc import Sequence

from .constants import KeyCode
from .keys import KeyState, key_exit
from .parsing import Scene, read_scene
from .player import Player
from .render import Frame, render_frame
from .utils import CubError

TITLE = "title"
FPS = 60


class Game:
    """A loaded scene together with the held keys and the frame buffer."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self.keys = KeyState()
        grid = scene.grid
        self.frame = Frame(grid.window_width, grid.window_height)

    @property
    def player(self) -> Player:
        return self.scene.player

    def step(self) -> Frame:
        """Advance the player by one tick and render the frame."""
        render_frame(self.scene, self.scene.player, self.keys, self.frame)
        return self.frame

    def handle_key(self, keycode: int, pressed: bool) -> None:
        """Record a key press or release; Escape ends the program."""
        if pressed:
            self.keys.press(keycode)
        else:
            self.keys.release(keycode)


def _key_bindings(pygame) -> dict[int, KeyCode]:
    return {
        pygame.K_ESCAPE: KeyCode.ESC,
        pygame.K_w: KeyCode.W,
        pygame.K_a: KeyCode.A,
        pygame.K_s: KeyCode.S,
        pygame.K_d: KeyCode.D,
        pygame.K_LEFT: KeyCode.LEFT,
        pygame.K_RIGHT: KeyCode.RIGHT,
        pygame.K_UP: KeyCode.UP,
        pygame.K_DOWN: KeyCode.DOWN,
    }


def _frame_bytes(frame: Frame) -> bytes:
    pixels = array("I", ((c & 0xFFFFFF) | 0xFF000000 for c in frame.data))
    if sys.byteorder == "big":
        pixels.byteswap()
    return pixels.tobytes()


def _run_window(game: Game) -> None:
    import pygame

    pygame.init()
    try:
        size = (game.frame.width, game.frame.height)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(TITLE)
        bindings = _key_bindings(pygame)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    key_exit()
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    code = bindings.get(event.key)
                    if code is not None:
                        game.handle_key(code, event.type == pygame.KEYDOWN)
            frame = game.step()
            surface = pygame.image.frombuffer(_frame_bytes(frame), size, "BGRA")
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the ``.cub`` scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Input A map's file name.")
        return 1
    try:
        scene = read_scene(args[0])
    except CubError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    game = Game(scene)
    try:
        _run_window(game)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    return 0


if __name__ == "__main__":
    sys.exit(main())