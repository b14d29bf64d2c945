import pytest

from glarcade.pong.gamedata import GameData, Input, State


def test_starts_playing_with_no_input():
    data = GameData()
    assert data.state is State.PLAYING
    assert data.input_left == set()
    assert data.input_right == set()


def test_player_one_controls_left():
    data = GameData()
    data.set_input(1, Input.UP, True)
    assert data.input_left == {Input.UP}
    assert data.input_right == set()


def test_player_two_controls_right():
    data = GameData()
    data.set_input(2, Input.DOWN, True)
    assert data.input_right == {Input.DOWN}
    assert data.input_left == set()


def test_release_removes_key():
    data = GameData()
    data.set_input(1, Input.UP, True)
    data.set_input(1, Input.DOWN, True)
    data.set_input(1, Input.UP, False)
    assert data.input_left == {Input.DOWN}


def test_release_of_unheld_key_is_harmless():
    data = GameData()
    data.set_input(2, Input.UP, False)
    assert data.input_right == set()


@pytest.mark.parametrize("player", [0, 3, -1])
def test_unknown_player_rejected(player):
    with pytest.raises(ValueError):
        GameData().set_input(player, Input.UP, True)