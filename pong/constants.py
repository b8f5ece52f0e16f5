import pygame

# Field
WIDTH, HEIGHT = 640, 480
PADDLE_WIDTH = 20
PADDLE_HEIGHT = 80
BALL_RADIUS = 10

# Speeds, in pixels per tick
BALL_SPEED = 5
PADDLE_STEP = 10

# Fixed tick period of the update loop
TICK_MS = 16

# Window
TITLE = "Pong"
FONT_NAME = "sans"
FONT_SIZE = 48

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Paddle ids
LEFT = 1
RIGHT = 2

QUIT_KEYS = (pygame.K_ESCAPE,)
