import pytest

from voxelcraft.controls import KEY_LAST, MOUSE_BUTTON_LAST, Action, Input


@pytest.mark.parametrize("action, expected", [(Action.PRESS, True), (Action.REPEAT, True), (Action.RELEASE, False)])
def test_key_actions(action, expected):
    state = Input()
    state.keys[65] = not expected
    state.on_key(65, action)
    assert state.keys[65] is expected


def test_press_then_release():
    state = Input()
    state.on_key(32, Action.PRESS)
    assert state.keys[32] is True
    state.on_key(32, Action.RELEASE)
    assert state.keys[32] is False


@pytest.mark.parametrize("key", [-1, KEY_LAST, KEY_LAST + 10])
def test_out_of_range_keys_ignored(key):
    state = Input()
    state.on_key(key, Action.PRESS)
    assert not any(state.keys)
    assert len(state.keys) == KEY_LAST


def test_last_valid_key_accepted():
    state = Input()
    state.on_key(KEY_LAST - 1, Action.PRESS)
    assert state.keys[KEY_LAST - 1] is True


def test_mouse_buttons():
    state = Input()
    state.on_mouse_button(1, Action.PRESS)
    state.on_mouse_button(MOUSE_BUTTON_LAST, Action.PRESS)
    assert state.mouse_buttons[1] is True
    assert sum(state.mouse_buttons) == 1
    state.on_mouse_button(1, Action.RELEASE)
    assert state.mouse_buttons[1] is False


def test_cursor_position():
    state = Input()
    state.on_cursor(120.5, 64.25)
    assert (state.mouse_x, state.mouse_y) == (120.5, 64.25)


def test_scroll_overwrites():
    state = Input()
    state.on_scroll(1.0, 2.0)
    state.on_scroll(0.0, -1.0)
    assert (state.scroll_offset_x, state.scroll_offset_y) == (0.0, -1.0)