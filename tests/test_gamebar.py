from types import SimpleNamespace

import pygame
import pytest

from spacecraze.ui.gamebar import GameBar, format_score


def test_format_score_starts_at_zero():
    assert format_score(0) == "0000"


@pytest.mark.parametrize("score", [1, 9, 42, 123, 999, 5000, 9999])
def test_format_score_pads_to_four_digits(score):
    text = format_score(score)
    assert len(text) == 4
    assert int(text) == score


@pytest.mark.parametrize("score", [10000, 10007, 12345, 19999])
def test_format_score_wraps_once(score):
    assert format_score(score) == format_score(score - 10000)


def test_format_score_wraps_only_once():
    assert format_score(20000) == "10000"


def test_gamebar_starts_with_player_hitpoints():
    player = SimpleNamespace(hitpoints=3)
    bar = GameBar(player)
    assert bar.hp_text == "3"
    assert bar.score_text == "0000"


def test_gamebar_update_follows_player():
    player = SimpleNamespace(hitpoints=3)
    bar = GameBar(player)
    player.hitpoints = 5
    bar.update()
    assert bar.hp_text == "5"


def test_gamebar_show_score():
    bar = GameBar(SimpleNamespace(hitpoints=1))
    bar.show_score(17)
    assert bar.score_text == format_score(17)


def test_gamebar_draws_text():
    pygame.font.init()
    bar = GameBar(SimpleNamespace(hitpoints=2), pygame.font.Font(None, 50))
    surface = pygame.Surface((640, 480), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    bar.draw(surface)
    drawn = surface.get_bounding_rect()
    assert drawn.width > 0
    assert drawn.top >= 8