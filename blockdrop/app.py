"""Window, main loop and keyboard handling."""

import argparse
import time

import pygame

from .colors import BACKGROUND
from .game import Action, Game

SCREEN_WIDTH = 300
SCREEN_HEIGHT = 600
FRAME_RATE = 60
DROP_INTERVAL = 0.01
FONT_SIZE = 20
CAPTION = "Tetris"

_KEY_ACTIONS = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_UP: Action.ROTATE,
}


class IntervalTimer:
    """Fires at most once per interval of elapsed time."""

    def __init__(self, interval: float, start: float = 0.0):
        self.interval = interval
        self.last = start

    def triggered(self, now: float) -> bool:
        """Return True and restart the interval if it has elapsed by ``now``."""
        if now - self.last >= self.interval:
            self.last = now
            return True
        return False


def action_for_key(key: int) -> Action | None:
    """Return the action bound to a key, or None for unbound keys."""
    return _KEY_ACTIONS.get(key)


def _should_quit(event: pygame.event.Event) -> bool:
    return event.type == pygame.QUIT or (
        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
    )


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="blockdrop", description="Play a falling-block puzzle game."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(CAPTION)
        clock = pygame.time.Clock()
        font = pygame.font.Font(None, FONT_SIZE)
        game = Game()
        timer = IntervalTimer(DROP_INTERVAL)
        started = time.monotonic()

        running = True
        while running:
            for event in pygame.event.get():
                if _should_quit(event):
                    running = False
                    break
                if event.type == pygame.KEYDOWN:
                    action = action_for_key(event.key)
                    if action is not None:
                        game.handle_action(action)
            if not running:
                break
            if timer.triggered(time.monotonic() - started):
                game.move_block_down()
            screen.fill(BACKGROUND)
            game.draw(screen, font)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0