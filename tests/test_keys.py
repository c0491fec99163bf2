import pytest

from cubraycast.constants import KeyCode
from cubraycast.keys import KeyState, key_exit

BINDINGS = [
    (KeyCode.A, "left"),
    (KeyCode.D, "right"),
    (KeyCode.W, "up"),
    (KeyCode.S, "down"),
    (KeyCode.RIGHT, "right_rotation"),
    (KeyCode.LEFT, "left_rotation"),
]


@pytest.mark.parametrize("code, attribute", BINDINGS)
def test_press_sets_flag(code, attribute):
    keys = KeyState()
    keys.press(code)
    assert getattr(keys, attribute) is True


@pytest.mark.parametrize("code, attribute", BINDINGS)
def test_release_clears_flag(code, attribute):
    keys = KeyState()
    keys.press(code)
    keys.release(code)
    assert getattr(keys, attribute) is False


def test_press_touches_only_its_flag():
    keys = KeyState()
    keys.press(KeyCode.W)
    assert keys == KeyState(up=True)


def test_unbound_key_changes_nothing():
    keys = KeyState()
    keys.press(KeyCode.UP)
    keys.press(99)
    assert keys == KeyState()


def test_reset_releases_everything():
    keys = KeyState()
    for code, _ in BINDINGS:
        keys.press(code)
    keys.reset()
    assert keys == KeyState()


def test_escape_press_exits():
    with pytest.raises(SystemExit) as info:
        KeyState().press(KeyCode.ESC)
    assert info.value.code == 0


def test_escape_release_exits():
    with pytest.raises(SystemExit) as info:
        KeyState().release(KeyCode.ESC)
    assert info.value.code == 0


def test_key_exit():
    with pytest.raises(SystemExit) as info:
        key_exit()
    assert info.value.code == 0