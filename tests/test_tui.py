"""Tests for the curses front end, with a mocked window."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import curses
from unittest.mock import patch, MagicMock

from pangram import tui
from pangram.app import Controller
from pangram.config import Config
from pangram.events import Event


def make_window(keys=(), size=(10, 12)):
    window = MagicMock()
    window.getmaxyx.return_value = size
    window.get_wch.side_effect = list(keys)
    return window


def written(window):
    return [c.args[:3] for c in window.addstr.call_args_list]


def test_alphabet_line():
    snapshot = [False] * 26
    snapshot[0] = snapshot[25] = True
    assert tui.alphabet_line(snapshot) == "A" + "." * 24 + "Z"
    assert tui.alphabet_line([False] * 26, "_") == "_" * 26


def test_border_color(tmp_path):
    config = Config(tmp_path / "c.json")
    assert tui.border_color(True, config) == "green"
    assert tui.border_color(False, config) == "red"


def test_wrap_text():
    assert tui.wrap_text("abcdefg", 3) == ["abc", "def", "g"]
    assert tui.wrap_text("", 3) == [""]
    assert tui.wrap_text("abc", 0) == []


def test_draw_places_text_and_cursor(tmp_path):
    ctl = Controller()
    for c in "abcdefghijkl":  # 12 chars, inner width 10
        ctl.handle_event(Event.char_typed(c))
    window = make_window()
    screen = tui.Screen(window, ctl, Config(tmp_path / "c.json"))
    screen.draw()

    calls = written(window)
    assert (4, 1, "abcdefghij") in calls
    assert (5, 1, "kl") in calls
    assert (1, 1, "ABCDEFGHIJ") in calls
    window.move.assert_called_with(5, 3)
    window.refresh.assert_called()


def test_draw_survives_tiny_terminal(tmp_path):
    ctl = Controller()
    ctl.handle_event(Event.char_typed('x'))
    window = make_window(size=(2, 1))
    tui.Screen(window, ctl, Config(tmp_path / "c.json")).draw()
    window.move.assert_not_called()


def test_loop_runs_until_quit(tmp_path):
    ctl = Controller()
    window = make_window(keys=['h', 'i', '\x7f', '\x1b', curses.error()])
    with patch.object(tui.curses, "raw"), \
            patch.object(tui.curses, "curs_set"), \
            patch.object(tui.curses, "has_colors", return_value=False):
        tui._loop(window, ctl, Config(tmp_path / "c.json"))
    assert ctl.is_quitting()
    assert ctl.displayed_text() == "h"
    assert window.get_wch.call_count == 5


def test_loop_treats_interrupt_as_quit(tmp_path):
    ctl = Controller()
    window = make_window(keys=['a', KeyboardInterrupt()])
    with patch.object(tui.curses, "raw"), \
            patch.object(tui.curses, "curs_set"), \
            patch.object(tui.curses, "has_colors", return_value=False):
        tui._loop(window, ctl, Config(tmp_path / "c.json"))
    assert ctl.displayed_text() == "a"


def test_run_uses_curses_wrapper(tmp_path):
    ctl = Controller()
    config = Config(tmp_path / "c.json")
    with patch.object(tui.curses, "wrapper") as wrapper:
        tui.run(ctl, config)
    wrapper.assert_called_once_with(tui._loop, ctl, config)


def test_lone_escape_quits(tmp_path):
    window = make_window(keys=['\x1b', curses.error()])
    screen = tui.Screen(window, Controller(), Config(tmp_path / "c.json"))
    assert screen.read_event() == Event.quit()
    window.nodelay.assert_any_call(True)
    assert window.nodelay.call_args_list[-1].args == (False,)


def test_alt_key_types_the_key(tmp_path):
    ctl = Controller()
    window = make_window(keys=['\x1b', 'x'])
    screen = tui.Screen(window, ctl, Config(tmp_path / "c.json"))
    event = screen.read_event()
    assert event == Event.char_typed('x')
    ctl.handle_event(event)
    assert not ctl.is_quitting()
    assert ctl.displayed_text() == "x"


def test_double_escape_still_quits(tmp_path):
    window = make_window(keys=['\x1b', '\x1b'])
    screen = tui.Screen(window, Controller(), Config(tmp_path / "c.json"))
    assert screen.read_event() == Event.quit()
