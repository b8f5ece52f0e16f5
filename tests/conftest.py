from __future__ import annotations

import os

# Headless SDL so tests never open a window or need an audio device.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from pong.simulation import GameSimulation  # noqa: E402


@pytest.fixture()
def sim() -> GameSimulation:
    return GameSimulation()


@pytest.fixture()
def font():
    pygame.font.init()
    yield pygame.font.Font(None, 48)
    pygame.font.quit()
