import math
import random

import pygame
from noise import pnoise2

from sadlines.config import (
    SMOOTHING, MIN_DROOP_SPEED, MAX_DROOP_SPEED, PUDDLE_DROOP_BOOST,
    SWAY_MIN, SWAY_MAX, DRIFT_MIN, DRIFT_MAX, REVERSE_IMPULSE, REVERSE_JITTER,
    LINE_LENGTH, LINE_THICKNESS, LINE_SPEED_FACTOR, LINE_DRIFT,
    LINE_ANGLE_JITTER, MAIN_COLOR_CHANCE, RESET_Y, BOTTOM_MARGIN, TOP_LIMIT,
)
from sadlines.mathutil import lerp, map_range, constrain

VERTICAL = math.pi / 2


def smooth_noise(x, y):
    """Perlin noise remapped to [0, 1]."""
    return constrain((pnoise2(x, y) + 1) / 2, 0.0, 1.0)


def resting_angle():
    return VERTICAL + random.uniform(-LINE_ANGLE_JITTER, LINE_ANGLE_JITTER)


def flinch_angle():
    # Snapped 45 degrees off vertical while a click is being felt
    return VERTICAL - math.pi / 4 + random.uniform(-REVERSE_JITTER, REVERSE_JITTER)


def random_role():
    return "main" if random.random() > 1 - MAIN_COLOR_CHANCE else "subtle"


class SadLine:
    def __init__(self, index, x, y):
        self.index = index
        self.x = x
        self.y = y
        self.len = random.uniform(*LINE_LENGTH)
        self.thickness = random.uniform(*LINE_THICKNESS)
        self.speed_factor = random.uniform(*LINE_SPEED_FACTOR)
        self.role = random_role()
        self.drift_base = random.uniform(*LINE_DRIFT)
        self.current_angle = resting_angle()
        self.reverse_factor = 0.0

    def reset(self, width):
        self.y = random.uniform(*RESET_Y)
        self.x = random.uniform(0, width)
        self.thickness = random.uniform(*LINE_THICKNESS)
        self.len = random.uniform(*LINE_LENGTH)
        self.role = random_role()
        self.current_angle = resting_angle()

    def droop(self, state):
        speed = state.line_speed_control * self.speed_factor + state.puddle_height * PUDDLE_DROOP_BOOST

        # Upward kick left over from a click, fading out
        self.y -= self.reverse_factor
        self.reverse_factor = lerp(self.reverse_factor, 0, SMOOTHING)

        self.y += speed

        sway = map_range(state.puddle_height, 0, state.height, SWAY_MIN, SWAY_MAX, clamp=True)
        target_angle = VERTICAL + math.sin(state.frame_count * 0.05 + self.x * 0.01) * sway
        if state.reverse_moment > 0:
            target_angle = flinch_angle()
        self.current_angle = lerp(self.current_angle, target_angle, SMOOTHING)

        frantic = map_range(state.line_speed_control, MIN_DROOP_SPEED, MAX_DROOP_SPEED,
                            DRIFT_MIN, DRIFT_MAX, clamp=True)
        self.x += self.drift_base * smooth_noise(self.y * 0.5, state.frame_count * 0.001) * frantic

    def end_point(self):
        return (self.x + math.cos(self.current_angle) * self.len,
                self.y + math.sin(self.current_angle) * self.len)

    def stroke_color(self, state, palette):
        if self.y > state.height - state.puddle_height:
            return palette.accumulated
        return palette.role(self.role)

    def display(self, screen, state, palette):
        color = self.stroke_color(state, palette)
        width = max(1, int(round(self.thickness)))
        start = (self.x, self.y)
        end = self.end_point()
        pygame.draw.line(screen, color, start, end, width)
        if width > 2:
            # round caps
            for x, y in (start, end):
                pygame.draw.circle(screen, color, (int(x), int(y)), width // 2)

    def check_boundaries(self, width, height):
        if self.y > height + BOTTOM_MARGIN or self.y < TOP_LIMIT:
            self.reset(width)
            return True
        return False

    def trigger_reverse(self):
        self.reverse_factor = random.uniform(*REVERSE_IMPULSE)
        self.current_angle = flinch_angle()
