import pygame

from sadlines.info_box import InfoBox


def test_toggle_swaps_icon():
    box = InfoBox()
    assert not box.collapsed
    assert box.icon == "−"
    box.toggle()
    assert box.icon == "+"
    box.toggle()
    assert box.icon == "−"


def test_collapsed_box_is_shorter():
    box = InfoBox(pos=(20, 20), width=230)
    expanded = box.rect()
    box.toggle()
    collapsed = box.rect()
    assert collapsed.height < expanded.height
    assert collapsed.width == expanded.width == 230


def test_contains_follows_current_size():
    box = InfoBox(pos=(20, 20), width=230)
    below_title = (30, box.rect().bottom - 2)
    assert box.contains(below_title)
    box.toggle()
    assert not box.contains(below_title)
    assert box.contains((25, 25))
    assert not box.contains((300, 300))


def test_draw_paints_panel():
    screen = pygame.Surface((400, 300))
    screen.fill((255, 255, 255))
    box = InfoBox(pos=(20, 20), width=230)
    box.draw(screen)
    assert screen.get_at((21, 21))[:3] != (255, 255, 255)
    assert screen.get_at((390, 290))[:3] == (255, 255, 255)
