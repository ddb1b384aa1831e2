"""Keyboard input helpers for rich_select.

Predicates over the key strings returned by ``readchar.readkey()``, so the
action mapping reads as plain conditions.
"""

from __future__ import annotations

import readchar


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, readchar.key.CR, readchar.key.LF)


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b\x1b")


def is_interrupt(key: str) -> bool:
    """Check if key is Ctrl+C."""
    return key == readchar.key.CTRL_C


def is_up(key: str, vim_mode: bool = False) -> bool:
    """Check if key is up arrow, Ctrl+P or (in vim mode) 'k'."""
    if vim_mode and key == "k":
        return True
    return key in (readchar.key.UP, readchar.key.CTRL_P)


def is_down(key: str, vim_mode: bool = False) -> bool:
    """Check if key is down arrow, Ctrl+N or (in vim mode) 'j'."""
    if vim_mode and key == "j":
        return True
    return key in (readchar.key.DOWN, readchar.key.CTRL_N)


def is_left(key: str) -> bool:
    return key == readchar.key.LEFT


def is_right(key: str) -> bool:
    return key == readchar.key.RIGHT


def is_page_up(key: str) -> bool:
    return key == readchar.key.PAGE_UP


def is_page_down(key: str) -> bool:
    return key == readchar.key.PAGE_DOWN


def is_home(key: str) -> bool:
    return key in (readchar.key.HOME, "\x1b[1~", "\x1bOH")


def is_end(key: str) -> bool:
    return key in (readchar.key.END, "\x1b[4~", "\x1bOF")


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_delete(key: str) -> bool:
    return key == readchar.key.DELETE


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == readchar.key.SPACE


def is_delete_word(key: str) -> bool:
    """Check if key is Ctrl+W."""
    return key == readchar.key.CTRL_W


def is_clear_line(key: str) -> bool:
    """Check if key is Ctrl+U."""
    return key == readchar.key.CTRL_U


def is_printable(key: str) -> bool:
    """Check if key is a single printable character."""
    return len(key) == 1 and key.isprintable()
