"""Rendering backends for selection prompts.

A backend draws frames and reads keys. Each redraw is a frame: the prompt
calls :meth:`Backend.frame_setup`, a sequence of ``render_*`` methods, then
either :meth:`Backend.frame_finish` to show it or :meth:`Backend.frame_abort`
to throw it away. Nothing may reach the terminal before ``frame_finish``;
the prompt measures pending frames and aborts the ones taller than the
terminal.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Collection

import readchar
from rich.console import Console, Group
from rich.live import Live
from rich.text import Text

from .input import Input
from .themes import DEFAULT_THEME, Theme
from .types import Page


class Backend(ABC):
    """Abstract terminal surface used by selection prompts."""

    # ── Frame lifecycle ──

    @abstractmethod
    def frame_setup(self) -> None:
        """Start a new pending frame."""

    @abstractmethod
    def frame_abort(self) -> None:
        """Discard the pending frame without showing anything."""

    @abstractmethod
    def frame_finish(self, move_to_new_line: bool) -> None:
        """Show the pending frame.

        Args:
            move_to_new_line: True for the last frame of a prompt; the frame
                stays on screen and following output starts below it.
        """

    @abstractmethod
    def current_flush_height(self) -> int | None:
        """Rows the pending frame would take once shown, if measurable."""

    @abstractmethod
    def current_terminal_height(self) -> int | None:
        """Visible terminal rows, if known."""

    # ── Frame content ──

    @abstractmethod
    def render_select_prompt(self, message: str, filter_input: Input | None) -> None:
        """Draw the prompt line of a single-select prompt."""

    @abstractmethod
    def render_multiselect_prompt(self, message: str, filter_input: Input | None) -> None:
        """Draw the prompt line of a multi-select prompt."""

    @abstractmethod
    def render_options(self, page: Page[Any], checked: Collection[int] | None = None) -> None:
        """Draw a page of options.

        Args:
            page: Visible window of scored options.
            checked: Canonical indices that are checked; None for single-select.
        """

    @abstractmethod
    def render_help_message(self, message: str) -> None:
        """Draw the help line."""

    @abstractmethod
    def render_error_message(self, message: str) -> None:
        """Draw a validation message."""

    @abstractmethod
    def render_canceled_prompt(self, message: str) -> None:
        """Draw the final frame of a canceled prompt."""

    @abstractmethod
    def render_prompt_with_answer(self, message: str, answer: str) -> None:
        """Draw the final frame of an answered prompt."""

    # ── Input ──

    @abstractmethod
    def read_key(self) -> str:
        """Block until a key is pressed and return it as a readchar key string."""

    def close(self) -> None:
        """Release the terminal once the prompt is over."""


class RichBackend(Backend):
    """Backend drawing with Rich and reading keys with readchar.

    Pending frames are kept as a list of Rich Text lines and measured with
    ``Console.render_lines``, so wrapped options count for every row they
    take. Committed frames are shown through a ``rich.live.Live`` display
    that replaces the previous frame in place.

    Args:
        console: Rich Console to draw on (creates a new one if None).
        theme: Visual theme for styling.
    """

    def __init__(self, console: Console | None = None, theme: Theme | None = None):
        self.console = console or Console(highlight=False)
        self.theme = theme or DEFAULT_THEME
        self._frame: list[Text] | None = None
        self._live: Live | None = None
        self._last_height = 0

    def _pending(self) -> list[Text]:
        if self._frame is None:
            raise RuntimeError("No frame in progress; call frame_setup() first")
        return self._frame

    def _pending_renderable(self) -> Group:
        return Group(*self._pending())

    def _measure(self) -> int:
        lines = self.console.render_lines(
            self._pending_renderable(), self.console.options, pad=False
        )
        return len(lines)

    # ── Frame lifecycle ──

    def frame_setup(self) -> None:
        self._frame = []

    def frame_abort(self) -> None:
        self._frame = None

    def frame_finish(self, move_to_new_line: bool) -> None:
        renderable = self._pending_renderable()
        height = self._measure()
        self._frame = None

        if self._live is None:
            self._live = Live(renderable, console=self.console, auto_refresh=False)
            self._live.start(refresh=True)
        else:
            self._live.update(renderable, refresh=True)

        if move_to_new_line:
            self._live.stop()
            self._live = None
            self._last_height = 0
        else:
            self._last_height = height

    def current_flush_height(self) -> int | None:
        # Clearing a taller previous frame takes as many rows as that frame.
        return max(self._measure(), self._last_height)

    def current_terminal_height(self) -> int | None:
        return self.console.height

    # ── Frame content ──

    def _prompt_line(self, message: str, filter_input: Input | None) -> Text:
        theme = self.theme
        line = Text()
        line.append(theme.prompt_prefix, style=theme.prompt_color)
        line.append(f" {message}")
        if filter_input is not None and not filter_input.is_empty():
            line.append(" ")
            line.append(filter_input.content)
        return line

    def render_select_prompt(self, message: str, filter_input: Input | None) -> None:
        self._pending().append(self._prompt_line(message, filter_input))

    def render_multiselect_prompt(self, message: str, filter_input: Input | None) -> None:
        self._pending().append(self._prompt_line(message, filter_input))

    def render_options(self, page: Page[Any], checked: Collection[int] | None = None) -> None:
        theme = self.theme
        frame = self._pending()

        if not page.content:
            frame.append(Text(f"  {theme.empty_text}", style=theme.dim_color))
            return

        if not page.first:
            frame.append(
                Text(f"  {theme.scroll_up_icon} {page.offset} more", style=theme.dim_color)
            )

        for i, option in enumerate(page.content):
            is_cursor = i == page.cursor
            line = Text()
            if is_cursor:
                line.append(theme.cursor_icon, style=theme.highlighted_color)
            else:
                line.append(" ")
            line.append(" ")
            if checked is not None:
                if option.index in checked:
                    line.append(theme.checked_icon, style=theme.checked_color)
                else:
                    line.append(theme.unchecked_icon)
                line.append(" ")
            line.append(str(option.value), style=theme.highlighted_color if is_cursor else "")
            frame.append(line)

        remaining = page.total - (page.offset + len(page.content))
        if remaining > 0:
            frame.append(
                Text(f"  {theme.scroll_down_icon} {remaining} more", style=theme.dim_color)
            )

    def render_help_message(self, message: str) -> None:
        self._pending().append(Text(f"[{message}]", style=self.theme.help_color))

    def render_error_message(self, message: str) -> None:
        self._pending().append(Text(f"# {message}", style=self.theme.error_color))

    def render_canceled_prompt(self, message: str) -> None:
        theme = self.theme
        line = Text()
        line.append(theme.answered_prefix, style=theme.prompt_color)
        line.append(f" {message} ")
        line.append(theme.canceled_text, style=theme.canceled_color)
        self._pending().append(line)

    def render_prompt_with_answer(self, message: str, answer: str) -> None:
        theme = self.theme
        line = Text()
        line.append(theme.answered_prefix, style=theme.prompt_color)
        line.append(f" {message} ")
        line.append(answer, style=theme.answer_color)
        self._pending().append(line)

    # ── Input ──

    def read_key(self) -> str:
        try:
            return readchar.readkey()
        except KeyboardInterrupt:
            return readchar.key.CTRL_C

    def close(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None
        self._frame = None
        self._last_height = 0
