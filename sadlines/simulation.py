"""
Per-frame state for the drooping lines and the rising puddle.

All the continuously driven values (puddle fill rate, line speed) are
smoothed toward targets derived from the pointer instead of jumping, so
moving the mouse never produces a visual discontinuity. ``Simulation`` is
the only writer of ``SimulationState``; it is advanced once per frame.
"""

import random
from dataclasses import dataclass

from sadlines.config import (
    LINE_COUNT, SMOOTHING, MIN_DROOP_SPEED, MAX_DROOP_SPEED,
    MIN_FILL_RATE, MAX_FILL_RATE, PUDDLE_MARGIN, REVERSE_MOMENT_FRAMES,
)
from sadlines.mathutil import lerp, constrain, map_range
from sadlines.palette import PALETTES, toggle_index
from sadlines.sad_line import SadLine


@dataclass
class SimulationState:
    width: int
    height: int
    puddle_height: float = 0.0
    puddle_fill_rate: float = 0.0
    line_speed_control: float = 0.0
    reverse_moment: int = 0
    frame_count: int = 0
    palette_index: int = 0
    pointer: tuple = (0, 0)
    # Set when the whole canvas must be repainted with the background
    needs_clear: bool = True

    @property
    def palette(self):
        return PALETTES[self.palette_index]

    @property
    def puddle_cap(self):
        return self.height + PUDDLE_MARGIN


class Simulation:
    def __init__(self, width, height, line_count=LINE_COUNT):
        self.line_count = line_count
        self.state = SimulationState(width, height)
        self.lines = []
        self.build_lines()

    def build_lines(self):
        w, h = self.state.width, self.state.height
        self.lines = [SadLine(i, random.uniform(0, w), random.uniform(-h, h))
                      for i in range(self.line_count)]

    def reset(self, i):
        self.lines[i].reset(self.state.width)

    def resize(self, width, height):
        self.state.width = width
        self.state.height = height
        self.state.needs_clear = True
        self.build_lines()

    # --- Pointer mapping ---
    def target_fill_rate(self):
        _, y = self.state.pointer
        return map_range(y, self.state.height, 0, MAX_FILL_RATE, MIN_FILL_RATE, clamp=True)

    def target_line_speed(self):
        x, _ = self.state.pointer
        return map_range(x, 0, self.state.width, MIN_DROOP_SPEED, MAX_DROOP_SPEED, clamp=True)

    # --- Palette / click ---
    def apply_palette(self, index):
        self.state.palette_index = index
        self.state.needs_clear = True

    def toggle_palette(self):
        self.apply_palette(toggle_index(self.state.palette_index))

    def press(self):
        self.toggle_palette()
        self.state.puddle_height = 0.0
        self.state.puddle_fill_rate = 0.0
        self.state.reverse_moment = REVERSE_MOMENT_FRAMES
        for line in self.lines:
            line.trigger_reverse()

    # --- Frame update ---
    def update_globals(self):
        s = self.state
        s.frame_count += 1

        s.puddle_fill_rate = lerp(s.puddle_fill_rate, self.target_fill_rate(), SMOOTHING)
        s.puddle_height = constrain(s.puddle_height + s.puddle_fill_rate, 0, s.puddle_cap)

        s.line_speed_control = lerp(s.line_speed_control, self.target_line_speed(), SMOOTHING)

        if s.reverse_moment > 0:
            s.reverse_moment -= 1

    def update_lines(self, screen=None):
        s = self.state
        palette = s.palette
        for line in self.lines:
            line.droop(s)
            if screen is not None:
                line.display(screen, s, palette)
            line.check_boundaries(s.width, s.height)

    def step(self, screen=None):
        self.update_globals()
        self.update_lines(screen)
