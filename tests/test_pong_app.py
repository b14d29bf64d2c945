import pygame
import pytest

from glarcade.geometry import Vec2
from glarcade.pong.app import main, render
from glarcade.pong.game import PongGame
from glarcade.pong.gamedata import State

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.fixture
def surface():
    return pygame.Surface((600, 600))


def inked_centre_pixels(surface):
    return [
        (x, y)
        for x in range(200, 400, 2)
        for y in range(285, 316)
        if rgb(surface, x, y) != BLACK
    ]


def test_playing_frame_shows_paddles_walls_and_ball(surface):
    game = PongGame()
    render(surface, game)
    assert rgb(surface, 5, 300) == WHITE
    assert rgb(surface, 594, 300) == WHITE
    assert rgb(surface, 300, 5) == WHITE
    assert rgb(surface, 300, 594) == WHITE
    assert rgb(surface, 300, 300) == WHITE
    assert rgb(surface, 150, 150) == BLACK


def test_finished_round_hides_paddles_and_walls(surface):
    game = PongGame()
    game.game_data.state = State.WIN_PLAYER2
    render(surface, game)
    assert rgb(surface, 5, 300) == BLACK
    assert rgb(surface, 300, 5) == BLACK


def test_no_banner_while_playing(surface):
    game = PongGame()
    game.ball.translation = Vec2(0.9, -0.9)
    render(surface, game)
    colours = {rgb(surface, x, y) for x in range(200, 400, 2) for y in range(285, 316)}
    assert colours == {BLACK}


def test_banner_drawn_after_a_win(surface):
    game = PongGame()
    game.ball.translation = Vec2(0.9, -0.9)
    game.game_data.state = State.WIN_PLAYER1
    render(surface, game)
    colours = {rgb(surface, x, y) for x in range(200, 400, 2) for y in range(285, 316)}
    assert len(colours - {BLACK}) > 0


def test_main_rejects_bad_width():
    with pytest.raises(SystemExit) as info:
        main(["--width", "wide"])
    assert info.value.code == 2