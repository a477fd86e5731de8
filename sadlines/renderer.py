import pygame

from sadlines.config import WEBCAM_BOX_WIDTH, WEBCAM_MARGIN, WEBCAM_BORDER
from sadlines.palette import fade_color


class Renderer:
    """Paints the trail canvas, then presents it with overlays on the screen.

    Lines and the puddle accumulate on ``canvas`` and fade out slowly. The
    webcam box and the info box go on ``screen`` only, after the canvas is
    copied there, so they never leave marks in the trails.
    """

    def __init__(self, screen):
        self.resize(screen)

    def resize(self, screen):
        self.screen = screen
        self.canvas = pygame.Surface(screen.get_size())
        self._veil = None
        self._veil_key = None

    def clear(self, palette):
        self.canvas.fill(palette.bg[:3])

    def fade(self, palette):
        # Trail effect: blend a nearly transparent layer of background instead of clearing
        color = fade_color(palette)
        key = (self.canvas.get_size(), color)
        if key != self._veil_key:
            self._veil = pygame.Surface(self.canvas.get_size(), pygame.SRCALPHA)
            self._veil.fill(color)
            self._veil_key = key
        self.canvas.blit(self._veil, (0, 0))

    def draw_puddle(self, state):
        if state.puddle_height <= 0:
            return
        # Whole rows from the surface line down to the bottom edge
        top = max(0, int(state.height - state.puddle_height))
        visible = state.height - top
        if visible <= 0:
            return
        surf = pygame.Surface((state.width, visible), pygame.SRCALPHA)
        surf.fill(state.palette.puddle_overlay)
        self.canvas.blit(surf, (0, top))

    def draw_webcam(self, frame, height):
        if frame is None:
            return None
        fw, fh = frame.get_size()
        box_w = WEBCAM_BOX_WIDTH
        box_h = int(fh / fw * box_w)
        x = WEBCAM_MARGIN
        y = height - box_h - WEBCAM_MARGIN
        self.screen.blit(pygame.transform.smoothscale(frame, (box_w, box_h)), (x, y))

        border = pygame.Surface((box_w, box_h), pygame.SRCALPHA)
        pygame.draw.rect(border, WEBCAM_BORDER, border.get_rect(), 1)
        self.screen.blit(border, (x, y))
        return pygame.Rect(x, y, box_w, box_h)

    def present(self):
        self.screen.blit(self.canvas, (0, 0))

    def draw_frame(self, sim, webcam=None, info_box=None):
        state = sim.state
        palette = state.palette
        if state.needs_clear:
            self.clear(palette)
            state.needs_clear = False
        self.fade(palette)

        sim.step(self.canvas)
        self.draw_puddle(state)

        self.present()
        if webcam is not None:
            self.draw_webcam(webcam.read(), state.height)
        if info_box is not None:
            info_box.draw(self.screen)
