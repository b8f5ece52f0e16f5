class Ball:
    """
    Square-bounded ball moving a fixed number of pixels per tick.
    Position is the top-left corner of the bounding box.
    """
    def __init__(self, x, y, size, speed):
        self.spawn_x = x
        self.spawn_y = y
        self.x = x
        self.y = y
        self.size = size
        self.speed = speed
        self.dx = speed
        self.dy = speed

    def advance(self):
        self.x += self.dx
        self.y += self.dy

    def bounce_walls(self, screen_height):
        # No position correction: the ball may sit past the wall for a tick
        if self.y <= 0 or self.y >= screen_height - self.size:
            self.dy = -self.dy

    def reset(self):
        # Serve direction flips relative to whatever dx was at the miss
        self.x = self.spawn_x
        self.y = self.spawn_y
        self.dx = -self.dx
        self.dy = self.speed
