# direction: -1 up, +1 down
UP = -1
DOWN = 1


class Paddle:
    def __init__(self, y, height):
        self.y = y
        self.height = height

    def move(self, dy, screen_height):
        self.y += dy
        self.y = max(0, min(self.y, screen_height - self.height))

    def step(self, direction: int, step: int, screen_height: int):
        if direction not in (UP, DOWN):
            raise ValueError(f"unknown paddle direction: {direction!r}")
        self.move(direction * step, screen_height)
