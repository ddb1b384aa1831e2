"""Pytest fixtures for rich-select tests."""

from __future__ import annotations

from typing import Any, Collection

import pytest

from rich_select.backend import Backend
from rich_select.input import Input
from rich_select.types import Page


class ScriptedBackend(Backend):
    """In-memory backend that replays keys and records frames.

    Each committed frame is a list of ``(kind, payload)`` entries. Heights are
    one row per entry, except options which take ``option_height`` rows each.
    """

    def __init__(self, keys, terminal_height: int | None = None, option_height: int = 1):
        self.keys = list(keys)
        self.terminal_height = terminal_height
        self.option_height = option_height
        self.frames: list[list[tuple[str, Any]]] = []
        self.final_frames: list[bool] = []
        self.aborted = 0
        self.closed = False
        self._pending: list[tuple[str, Any]] | None = None

    # ── Frame lifecycle ──

    def frame_setup(self) -> None:
        self._pending = []

    def frame_abort(self) -> None:
        assert self._pending is not None
        self.aborted += 1
        self._pending = None

    def frame_finish(self, move_to_new_line: bool) -> None:
        assert self._pending is not None
        self.frames.append(self._pending)
        self.final_frames.append(move_to_new_line)
        self._pending = None

    def current_flush_height(self) -> int | None:
        rows = 0
        for kind, payload in self._pending or []:
            if kind == "options":
                rows += max(len(payload[0]), 1) * self.option_height
            else:
                rows += 1
        return rows

    def current_terminal_height(self) -> int | None:
        return self.terminal_height

    # ── Frame content ──

    def render_select_prompt(self, message: str, filter_input: Input | None) -> None:
        self._pending.append(("prompt", (message, filter_input.content if filter_input else None)))

    def render_multiselect_prompt(self, message: str, filter_input: Input | None) -> None:
        self._pending.append(("prompt", (message, filter_input.content if filter_input else None)))

    def render_options(self, page: Page[Any], checked: Collection[int] | None = None) -> None:
        self._pending.append(("options", (page, set(checked) if checked is not None else None)))

    def render_help_message(self, message: str) -> None:
        self._pending.append(("help", message))

    def render_error_message(self, message: str) -> None:
        self._pending.append(("error", message))

    def render_canceled_prompt(self, message: str) -> None:
        self._pending.append(("canceled", message))

    def render_prompt_with_answer(self, message: str, answer: str) -> None:
        self._pending.append(("answer", (message, answer)))

    # ── Input ──

    def read_key(self) -> str:
        if not self.keys:
            raise EOFError("No more scripted keys")
        return self.keys.pop(0)

    def close(self) -> None:
        self.closed = True

    # ── Helpers for assertions ──

    def entries(self, kind: str, frame: int = -1) -> list[Any]:
        return [payload for k, payload in self.frames[frame] if k == kind]

    def last_page(self) -> Page[Any]:
        for frame in reversed(self.frames):
            for kind, payload in frame:
                if kind == "options":
                    return payload[0]
        raise AssertionError("No options rendered")


@pytest.fixture
def make_backend():
    """Factory for ScriptedBackend instances.

    Usage: make_backend(key1, key2, ..., terminal_height=20, option_height=3)
    """

    def _make(*keys: str, terminal_height: int | None = None, option_height: int = 1):
        return ScriptedBackend(keys, terminal_height=terminal_height, option_height=option_height)

    return _make


@pytest.fixture(autouse=True)
def _clear_page_size_env(monkeypatch):
    """Keep RICH_SELECT_PAGE_SIZE from the environment out of tests."""
    monkeypatch.delenv("RICH_SELECT_PAGE_SIZE", raising=False)
