import pygame

from sadlines.config import INFO_BOX_POS, INFO_BOX_WIDTH, INFO_BOX_LINES

TITLE = "Sadness Lines"
PADDING = 10
LINE_GAP = 4
PANEL_COLOR = (16, 26, 36, 190)
TEXT_COLOR = (200, 220, 240)
BORDER_COLOR = (74, 144, 226, 100)


class InfoBox:
    def __init__(self, pos=INFO_BOX_POS, width=INFO_BOX_WIDTH, lines=INFO_BOX_LINES):
        self.pos = pos
        self.width = width
        self.lines = list(lines)
        self.collapsed = False
        self._font = None

    @property
    def icon(self):
        return "+" if self.collapsed else "−"

    @property
    def font(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont("Arial", 16)
        return self._font

    def line_height(self):
        return self.font.get_linesize()

    def rect(self):
        rows = 1 if self.collapsed else 1 + len(self.lines)
        height = 2 * PADDING + rows * self.line_height() + (rows - 1) * LINE_GAP
        return pygame.Rect(self.pos[0], self.pos[1], self.width, height)

    def contains(self, point):
        return self.rect().collidepoint(point)

    def toggle(self):
        self.collapsed = not self.collapsed

    def draw(self, screen):
        rect = self.rect()
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        panel.fill(PANEL_COLOR)
        pygame.draw.rect(panel, BORDER_COLOR, panel.get_rect(), 1)

        y = PADDING
        title = self.font.render(TITLE, True, TEXT_COLOR)
        icon = self.font.render(self.icon, True, TEXT_COLOR)
        panel.blit(title, (PADDING, y))
        panel.blit(icon, (rect.width - PADDING - icon.get_width(), y))
        if not self.collapsed:
            for text in self.lines:
                y += self.line_height() + LINE_GAP
                panel.blit(self.font.render(text, True, TEXT_COLOR), (PADDING, y))
        screen.blit(panel, rect.topleft)
