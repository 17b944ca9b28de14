import pytest

from boinglogic.blocktypes import ArenaConfig
from boinglogic.state import GameState


def test_play_sound_records_name_and_volume():
    state = GameState()
    state.play_sound("boing", 10)
    state.play_sound("paddle", 50)
    assert state.sounds == [("boing", 10), ("paddle", 50)]


def test_play_sound_silent_when_sound_off():
    state = GameState(no_sound=True)
    state.play_sound("boing", 10)
    assert state.sounds == []


def test_show_message_sets_current_and_history():
    state = GameState()
    state.show_message("Another ball!")
    state.show_message("Extra ball")
    assert state.current_message == "Extra ball"
    assert state.messages == ["Another ball!", "Extra ball"]


def test_add_score_accumulates():
    state = GameState()
    state.add_score(100)
    state.add_score(50)
    assert state.score == 150


def test_add_score_rejects_negative():
    state = GameState()
    with pytest.raises(ValueError):
        state.add_score(-1)


def test_add_bullets_accumulates_and_rejects_negative():
    state = GameState()
    state.add_bullets(4)
    state.add_bullets(2)
    assert state.bullets == 6
    with pytest.raises(ValueError):
        state.add_bullets(-2)


@pytest.mark.parametrize("factor", [1, 2, 4])
def test_set_bonus_multiplier_accepts_supported(factor):
    state = GameState()
    state.set_bonus_multiplier(factor)
    assert state.bonus_multiplier == factor


@pytest.mark.parametrize("factor", [0, 3, 8])
def test_set_bonus_multiplier_rejects_others(factor):
    state = GameState()
    with pytest.raises(ValueError):
        state.set_bonus_multiplier(factor)
    assert state.bonus_multiplier == 1


def test_advance_frame_returns_new_frame():
    state = GameState(frame=41)
    assert state.advance_frame() == 42
    assert state.frame == 42


def test_default_config_is_arena_default():
    state = GameState()
    assert state.config == ArenaConfig()