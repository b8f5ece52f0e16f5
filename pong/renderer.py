import pygame

from .constants import (
    BALL_RADIUS,
    BLACK,
    FONT_NAME,
    FONT_SIZE,
    HEIGHT,
    PADDLE_HEIGHT,
    PADDLE_WIDTH,
    WHITE,
    WIDTH,
)


def load_score_font():
    return pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)


def render(screen, snapshot, font):
    screen.fill(BLACK)

    # Paddles
    pygame.draw.rect(screen, WHITE, (0, snapshot.paddle1_y, PADDLE_WIDTH, PADDLE_HEIGHT))
    pygame.draw.rect(screen, WHITE, (WIDTH - PADDLE_WIDTH, snapshot.paddle2_y, PADDLE_WIDTH, PADDLE_HEIGHT))

    # Ball: drawn as a circle inside its bounding box
    half = BALL_RADIUS / 2
    pygame.draw.circle(screen, WHITE, (snapshot.ball_x + half, snapshot.ball_y + half), half)

    # Score, centered in the field
    text = font.render(snapshot.score_text, True, WHITE)
    screen.blit(text, text.get_rect(center=(WIDTH // 2, HEIGHT // 2)))
