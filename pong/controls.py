import pygame

from .constants import LEFT, QUIT_KEYS, RIGHT
from .paddle import DOWN, UP

# key -> (paddle, direction)
KEY_BINDINGS = {
    pygame.K_w: (LEFT, UP),
    pygame.K_s: (LEFT, DOWN),
    pygame.K_UP: (RIGHT, UP),
    pygame.K_DOWN: (RIGHT, DOWN),
}


def handle_input(events, simulation) -> bool:
    """
    Turn key presses into paddle moves, one step per KEYDOWN.
    Returns False once the window should close.
    """
    running = True
    for event in events:
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                running = False
            elif event.key in KEY_BINDINGS:
                simulation.move_paddle(*KEY_BINDINGS[event.key])
    return running
