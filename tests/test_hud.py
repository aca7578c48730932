import pygame
import pytest

from survivalrush.hud import draw_text, health_text, score_text


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 18)


def test_score_text_zero():
    assert score_text(0) == "Score: 00m 00s"


def test_score_text_minutes_and_seconds():
    assert score_text(125.7) == "Score: 02m 05s"


def test_score_text_seconds_below_sixty():
    for value in (0, 30.5, 59.99, 61, 3599):
        seconds = int(score_text(value).split()[2].rstrip("s"))
        assert 0 <= seconds < 60


def test_health_text():
    assert health_text(50, 50) == "Health: 50/50"
    assert health_text(12.4, 50) == "Health: 12/50"


def test_draw_text_position_and_pixels(font):
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    rect = draw_text(surface, font, "Hi", 10, 20)
    assert rect.left == 10
    assert rect.top == 100 - 20 - font.get_ascent()
    pixels = {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    }
    assert (255, 255, 255) in pixels