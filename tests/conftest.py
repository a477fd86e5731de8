import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from sadlines.simulation import Simulation, SimulationState


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def seeded():
    random.seed(1234)


@pytest.fixture
def sim():
    return Simulation(400, 200, line_count=12)


@pytest.fixture
def state():
    return SimulationState(width=400, height=200)
