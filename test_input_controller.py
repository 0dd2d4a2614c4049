import curses

import pytest

import input_controller as ic


@pytest.mark.parametrize(
    "key, expected",
    [
        (curses.KEY_UP, ic.Move(-1)),
        (ord("k"), ic.Move(-1)),
        (curses.KEY_DOWN, ic.Move(1)),
        (ord("j"), ic.Move(1)),
        (curses.KEY_RIGHT, ic.Intent(ic.EXPAND)),
        (ord("l"), ic.Intent(ic.EXPAND)),
        (curses.KEY_LEFT, ic.Intent(ic.COLLAPSE)),
        (ord("h"), ic.Intent(ic.COLLAPSE)),
        (ord(" "), ic.Intent(ic.TOGGLE)),
        (10, ic.Intent(ic.CONFIRM)),
        (13, ic.Intent(ic.CONFIRM)),
        (curses.KEY_ENTER, ic.Intent(ic.CONFIRM)),
        (ord("q"), ic.Intent(ic.QUIT)),
        (27, ic.Intent(ic.QUIT)),
        (3, ic.Intent(ic.QUIT)),
        (curses.KEY_RESIZE, ic.Intent(ic.RESIZE)),
        ("j", ic.Move(1)),
        (ord("x"), None),
        (-1, None),
    ],
)
def test_translate(key, expected):
    assert ic.translate(key) == expected


def test_read_intent_skips_unknown_keys():
    keys = iter([ord("x"), -1, ord("Z"), ord("j"), ord("q")])
    assert ic.read_intent(lambda: next(keys)) == ic.Move(1)
    assert next(keys) == ord("q")
