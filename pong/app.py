import logging
import os

import pygame

from .constants import HEIGHT, TICK_MS, TITLE, WIDTH
from .controls import handle_input
from .renderer import load_score_font, render
from .simulation import GameSimulation

logger = logging.getLogger(__name__)

# Key repeat (ms), so a held key keeps moving its paddle
KEY_REPEAT_DELAY = 200
KEY_REPEAT_INTERVAL = 30


def log_level(default=logging.INFO):
    """Level named by PONG_LOG_LEVEL, or the default when unset or unknown."""
    name = os.environ.get("PONG_LOG_LEVEL", "").upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


def main():
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize pygame/Start application
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
    except pygame.error as e:
        logger.error("Failed to initialize display: %s", e)
        pygame.quit()
        return 1
    pygame.display.set_caption(TITLE)
    pygame.key.set_repeat(KEY_REPEAT_DELAY, KEY_REPEAT_INTERVAL)

    font = load_score_font()
    clock = pygame.time.Clock()
    game = GameSimulation()
    logger.info("Starting %dx%d game, tick %d ms", WIDTH, HEIGHT, TICK_MS)

    running = True
    while running:
        # One fixed step per tick; the measured frame time is not used
        clock.tick(1000 / TICK_MS)

        running = handle_input(pygame.event.get(), game)
        game.advance()

        render(screen, game.snapshot(), font)
        pygame.display.flip()

    logger.info("Game closed at %s", game.snapshot().score_text)
    pygame.quit()
    return 0
