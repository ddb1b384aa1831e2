"""Action loop shared by list prompts.

:class:`ListPrompt` owns everything single-select and multi-select prompts
have in common: the option list, the scored order, the cursor, the filter
input and the loop that reads keys, dispatches actions and redraws.

Redraws go through :meth:`ListPrompt.redraw_with_adaptive_page_size`.
Options that wrap over several terminal rows can make a page taller than
the terminal, so every frame is measured before it is shown. An oversized
frame is aborted and the page size is shrunk in proportion to the overflow,
until the frame fits or the page size reaches 1. The shrink is kept for the
rest of the prompt.
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable, Generic, Sequence, TypeVar

from .actions import Action, InnerAction, NavigationAction, PromptAction
from .backend import Backend, RichBackend
from .config import SelectConfig
from .errors import (
    InvalidConfigurationError,
    OperationCanceledError,
    OperationInterruptedError,
    PromptError,
)
from .input import Input, InputAction
from .paginator import paginate
from .scoring import ScoredOrder, Scorer, default_scorer
from .types import ActionResult, InputActionResult, ListOption, Page

logger = logging.getLogger(__name__)

T = TypeVar("T")
Output = TypeVar("Output")

ConfigT = TypeVar("ConfigT", bound=SelectConfig)


def shrink_page_size(page_size: int, frame_height: int, terminal_height: int) -> int:
    """Return the next page size to try after a frame did not fit.

    Scales ``page_size`` by ``terminal_height / frame_height``. The result is
    always at least 1 and, when ``page_size`` is above 1, strictly smaller
    than ``page_size``.
    """
    new_size = page_size * max(terminal_height, 1) // max(frame_height, 1)
    if new_size >= page_size:
        new_size = page_size - 1
    return max(new_size, 1)


class ListPrompt(ABC, Generic[T, Output]):
    """Base class of prompts that pick from a list of options.

    Subclasses provide the key mapping, inner action handling, rendering,
    submission and answer formatting. A prompt is single-use: once
    :meth:`prompt` has run, calling it again raises PromptError.

    Args:
        message: Question shown to the user.
        options: Values to choose from; displayed with ``str()``.
        config: Runtime configuration; the prompt keeps its own copy.
        starting_cursor: Position of the cursor when the prompt opens.
        starting_filter_input: Initial filter text.
        help_message: Help line; None or "" hides it.
        scorer: Filter scorer; see :mod:`rich_select.scoring`.
        confirm_cancel: Called when the user cancels; returning False keeps
            the prompt open.

    Raises:
        InvalidConfigurationError: If options is empty, the page size is
            below 1 or starting_cursor is out of bounds.
    """

    def __init__(
        self,
        message: str,
        options: Sequence[T],
        config: ConfigT,
        starting_cursor: int = 0,
        starting_filter_input: str | None = None,
        help_message: str | None = None,
        scorer: Scorer | None = None,
        confirm_cancel: Callable[[], bool] | None = None,
    ):
        options = list(options)
        if not options:
            raise InvalidConfigurationError("Available options can not be empty")
        if config.page_size < 1:
            raise InvalidConfigurationError(
                f"Page size must be at least 1, got {config.page_size}"
            )
        if not 0 <= starting_cursor < len(options):
            raise InvalidConfigurationError(
                f"Starting cursor index {starting_cursor} is out-of-bounds "
                f"for length {len(options)} of options"
            )

        self.message = message
        self.config = dataclasses.replace(config)
        self.options: list[T] = options
        self.display_texts = [str(option) for option in options]
        self.scored = ScoredOrder(self.options, self.display_texts, scorer or default_scorer)
        self.cursor_index = starting_cursor
        self.input: Input | None = (
            Input(starting_filter_input or "") if self.config.filter_input_enabled else None
        )
        self.help_message = help_message or ""
        self._confirm_cancel = confirm_cancel
        self._consumed = False

    # ── Hooks for subclasses ──

    @abstractmethod
    def key_to_action(self, key: str) -> Action | None:
        """Translate a key into an action, or None to ignore it."""

    @abstractmethod
    def handle(self, action: InnerAction) -> ActionResult:
        """Apply an inner action to the prompt state."""

    @abstractmethod
    def submit(self) -> Output | None:
        """Try to produce the final answer; None keeps the prompt open."""

    @abstractmethod
    def render(self, backend: Backend) -> None:
        """Draw the current state into the pending frame."""

    @abstractmethod
    def format_answer(self, answer: Output) -> str:
        """Text shown next to the message once answered."""

    def setup(self) -> None:
        """Prepare state before the first frame."""
        self.run_scorer()

    def pre_cancel(self) -> bool:
        """Return whether a cancel request should end the prompt."""
        if self._confirm_cancel is None:
            return True
        return bool(self._confirm_cancel())

    # ── Scored order and cursor ──

    def run_scorer(self) -> None:
        """Rescore options against the filter text and reconcile the cursor."""
        if self.input is None:
            return
        if not self.scored.rescore(self.input.content):
            return

        if self.config.reset_cursor:
            self.update_cursor_position(0)
        elif len(self.scored) <= self.cursor_index:
            self.update_cursor_position(max(len(self.scored) - 1, 0))

    def update_cursor_position(self, new_position: int) -> ActionResult:
        if new_position != self.cursor_index:
            self.cursor_index = new_position
            return ActionResult.NEEDS_REDRAW
        return ActionResult.CLEAN

    def move_cursor_up(self, qty: int, wrap: bool) -> ActionResult:
        """Move the cursor up by ``qty``, wrapping or clamping at the top."""
        if qty <= self.cursor_index:
            new_position = self.cursor_index - qty
        elif wrap:
            new_position = max(len(self.scored) - (qty - self.cursor_index), 0)
        else:
            new_position = 0
        return self.update_cursor_position(new_position)

    def move_cursor_down(self, qty: int, wrap: bool) -> ActionResult:
        """Move the cursor down by ``qty``, wrapping or clamping at the bottom."""
        total = len(self.scored)
        new_position = self.cursor_index + qty
        if new_position >= total:
            if total == 0:
                new_position = 0
            elif wrap:
                new_position = new_position % total
            else:
                new_position = total - 1
        return self.update_cursor_position(new_position)

    def clamp_cursor(self) -> ActionResult:
        return self.update_cursor_position(min(self.cursor_index, max(len(self.scored) - 1, 0)))

    def has_answer_highlighted(self) -> bool:
        return self.scored.get(self.cursor_index) is not None

    def handle_navigation(self, action: NavigationAction) -> ActionResult:
        if action == NavigationAction.MOVE_UP:
            return self.move_cursor_up(1, wrap=self.config.wrap)
        if action == NavigationAction.MOVE_DOWN:
            return self.move_cursor_down(1, wrap=self.config.wrap)
        if action == NavigationAction.PAGE_UP:
            return self.move_cursor_up(self.config.page_size, wrap=False)
        if action == NavigationAction.PAGE_DOWN:
            return self.move_cursor_down(self.config.page_size, wrap=False)
        if action == NavigationAction.MOVE_TO_START:
            return self.move_cursor_up(sys.maxsize, wrap=False)
        if action == NavigationAction.MOVE_TO_END:
            return self.move_cursor_down(sys.maxsize, wrap=False)
        return ActionResult.CLEAN

    def handle_filter_input(self, action: InputAction) -> ActionResult:
        if self.input is None:
            return ActionResult.CLEAN
        result = self.input.handle(action)
        if result == InputActionResult.CONTENT_CHANGED:
            self.run_scorer()
        return result.to_action_result()

    def current_page(self) -> Page[T]:
        choices = [ListOption(index, self.options[index]) for index in self.scored]
        return paginate(self.config.page_size, choices, self.cursor_index)

    # ── Loop ──

    def prompt(self, backend: Backend | None = None) -> Output:
        """Run the prompt until it is answered.

        Args:
            backend: Terminal surface; a RichBackend on the current terminal
                if None.

        Raises:
            OperationCanceledError: The user canceled with Esc.
            OperationInterruptedError: The user pressed Ctrl+C.
            PromptError: The prompt was already used.
        """
        if self._consumed:
            raise PromptError("Prompt has already been run")
        self._consumed = True

        backend = backend or RichBackend()
        try:
            return self._run(backend)
        finally:
            backend.close()

    def prompt_skippable(self, backend: Backend | None = None) -> Output | None:
        """Like :meth:`prompt`, but return None when the user cancels."""
        try:
            return self.prompt(backend)
        except OperationCanceledError:
            return None

    def _run(self, backend: Backend) -> Output:
        self.setup()

        last_handle = ActionResult.NEEDS_REDRAW
        while True:
            if last_handle.needs_redraw:
                self.redraw_with_adaptive_page_size(backend)
                last_handle = ActionResult.CLEAN

            key = backend.read_key()
            action = self.key_to_action(key)
            if action is None:
                continue

            if action == PromptAction.SUBMIT:
                answer = self.submit()
                if answer is not None:
                    break
                last_handle = ActionResult.NEEDS_REDRAW

            elif action == PromptAction.CANCEL:
                if self.pre_cancel():
                    logger.debug("Prompt %r canceled", self.message)
                    backend.frame_setup()
                    backend.render_canceled_prompt(self.message)
                    backend.frame_finish(True)
                    raise OperationCanceledError()
                last_handle = ActionResult.NEEDS_REDRAW

            elif action == PromptAction.INTERRUPT:
                logger.debug("Prompt %r interrupted", self.message)
                raise OperationInterruptedError()

            else:
                last_handle = self.handle(action)

        formatted = self.format_answer(answer)
        backend.frame_setup()
        backend.render_prompt_with_answer(self.message, formatted)
        backend.frame_finish(True)
        return answer

    def redraw_with_adaptive_page_size(self, backend: Backend) -> None:
        """Render the current state, shrinking the page size until it fits.

        A page size of 1 is always shown, even when a single wrapped option
        is taller than the terminal.
        """
        page_size = max(self.config.page_size, 1)

        while True:
            backend.frame_setup()
            self.render(backend)

            frame_height = backend.current_flush_height() or 0
            terminal_height = backend.current_terminal_height()

            if terminal_height is None or frame_height <= terminal_height or page_size <= 1:
                backend.frame_finish(False)
                return

            backend.frame_abort()

            new_size = shrink_page_size(page_size, frame_height, terminal_height)
            logger.debug(
                "Frame of %d rows exceeds terminal height %d; page size %d -> %d",
                frame_height,
                terminal_height,
                page_size,
                new_size,
            )
            page_size = new_size
            self.config.page_size = page_size
            self.clamp_cursor()
