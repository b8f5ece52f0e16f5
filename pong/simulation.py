import logging
from dataclasses import dataclass

from .ball import Ball
from .constants import (
    BALL_RADIUS,
    BALL_SPEED,
    HEIGHT,
    LEFT,
    PADDLE_HEIGHT,
    PADDLE_STEP,
    PADDLE_WIDTH,
    RIGHT,
    WIDTH,
)
from .paddle import Paddle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game handed to the renderer."""

    paddle1_y: int
    paddle2_y: int
    ball_x: int
    ball_y: int
    score1: int
    score2: int

    @property
    def score_text(self) -> str:
        return f"{self.score1} - {self.score2}"


class GameSimulation:
    """
    Deterministic two-paddle ball game.

    One call to advance() is one fixed tick of integer physics; nothing here
    looks at wall-clock time. Paddles only move through move_paddle(), which
    clamps them to the field, so advance() never touches paddle positions.
    """

    def __init__(self):
        paddle_y = HEIGHT // 2 - PADDLE_HEIGHT // 2
        self.paddle1 = Paddle(paddle_y, PADDLE_HEIGHT)
        self.paddle2 = Paddle(paddle_y, PADDLE_HEIGHT)
        self.ball = Ball(WIDTH // 2 - BALL_RADIUS // 2,
                         HEIGHT // 2 - BALL_RADIUS // 2,
                         BALL_RADIUS, BALL_SPEED)
        self.score1 = 0
        self.score2 = 0

    # ---------- Flat state ----------
    @property
    def paddle1_y(self) -> int:
        return self.paddle1.y

    @paddle1_y.setter
    def paddle1_y(self, value: int):
        self.paddle1.y = value

    @property
    def paddle2_y(self) -> int:
        return self.paddle2.y

    @paddle2_y.setter
    def paddle2_y(self, value: int):
        self.paddle2.y = value

    @property
    def ball_x(self) -> int:
        return self.ball.x

    @ball_x.setter
    def ball_x(self, value: int):
        self.ball.x = value

    @property
    def ball_y(self) -> int:
        return self.ball.y

    @ball_y.setter
    def ball_y(self, value: int):
        self.ball.y = value

    @property
    def ball_dx(self) -> int:
        return self.ball.dx

    @ball_dx.setter
    def ball_dx(self, value: int):
        self.ball.dx = value

    @property
    def ball_dy(self) -> int:
        return self.ball.dy

    @ball_dy.setter
    def ball_dy(self, value: int):
        self.ball.dy = value

    # ---------- Update ----------
    def advance(self):
        ball = self.ball
        ball.advance()
        ball.bounce_walls(HEIGHT)

        # Paddle hits are position-only checks, so the order below decides
        # corner cases: walls, left paddle, right paddle, then misses.
        if ball.x <= PADDLE_WIDTH and self._in_reach(self.paddle1):
            ball.dx = -ball.dx

        if ball.x >= WIDTH - PADDLE_WIDTH - BALL_RADIUS and self._in_reach(self.paddle2):
            ball.dx = -ball.dx

        # Both misses are checked independently.
        if ball.x <= 0:
            self.score2 += 1
            logger.debug("Right player scores: %d - %d", self.score1, self.score2)
            self.reset()

        if ball.x >= WIDTH - BALL_RADIUS:
            self.score1 += 1
            logger.debug("Left player scores: %d - %d", self.score1, self.score2)
            self.reset()

    def _in_reach(self, paddle: Paddle) -> bool:
        return paddle.y <= self.ball.y <= paddle.y + PADDLE_HEIGHT

    def reset(self):
        self.ball.reset()

    # ---------- Commands ----------
    def move_paddle(self, paddle_id: int, direction: int):
        if paddle_id == LEFT:
            paddle = self.paddle1
        elif paddle_id == RIGHT:
            paddle = self.paddle2
        else:
            raise ValueError(f"unknown paddle: {paddle_id!r}")
        paddle.step(direction, PADDLE_STEP, HEIGHT)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            paddle1_y=self.paddle1.y,
            paddle2_y=self.paddle2.y,
            ball_x=self.ball.x,
            ball_y=self.ball.y,
            score1=self.score1,
            score2=self.score2,
        )
