from collections import deque

import pygame


class InteractionController:
    """Queues host events and applies them once per frame, before the update."""

    def __init__(self, sim, info_box=None, on_resize=None, on_screenshot=None):
        self.sim = sim
        self.info_box = info_box
        self.on_resize = on_resize
        self.on_screenshot = on_screenshot
        self.queue = deque()
        self.running = True

    def push(self, event):
        self.queue.append(event)

    def pump(self):
        for event in pygame.event.get():
            self.push(event)

    def drain(self):
        while self.queue:
            self.handle(self.queue.popleft())
        return self.running

    def handle(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            self.sim.state.pointer = event.pos
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.sim.state.pointer = event.pos
            self.mouse_pressed(event.pos)
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.KEYDOWN:
            self.key_pressed(event.key)

    def mouse_pressed(self, pos):
        if self.info_box is not None and self.info_box.contains(pos):
            self.info_box.toggle()
            return
        self.sim.press()

    def key_pressed(self, key):
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_c:
            self.sim.press()
        elif key == pygame.K_i and self.info_box is not None:
            self.info_box.toggle()
        elif key == pygame.K_s and self.on_screenshot is not None:
            self.on_screenshot()

    def resize(self, width, height):
        if self.on_resize is not None:
            self.on_resize(width, height)
        self.sim.resize(width, height)
