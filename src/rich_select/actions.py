"""Actions produced from key presses and the key-to-action mapping.

Every key read from the backend is turned into at most one action:

- a :class:`PromptAction` (submit, cancel, interrupt) handled by the
  prompt loop itself;
- an inner action handled by the concrete prompt: :class:`NavigationAction`,
  :class:`SelectionAction` (multi-select only) or an
  :class:`~rich_select.input.InputAction` for the filter input.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from .config import MultiSelectConfig, SelectConfig
from .input import InputAction, InputActionKind
from .keys import (
    is_backspace,
    is_clear_line,
    is_delete,
    is_delete_word,
    is_down,
    is_end,
    is_enter,
    is_escape,
    is_home,
    is_interrupt,
    is_left,
    is_page_down,
    is_page_up,
    is_printable,
    is_right,
    is_space,
    is_up,
)


class PromptAction(str, Enum):
    """Actions that end or may end the prompt loop."""

    SUBMIT = "submit"
    CANCEL = "cancel"
    INTERRUPT = "interrupt"

    def __str__(self) -> str:
        return self.value


class NavigationAction(str, Enum):
    """Cursor movements over the scored options."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    MOVE_TO_START = "move_to_start"
    MOVE_TO_END = "move_to_end"

    def __str__(self) -> str:
        return self.value


class SelectionAction(str, Enum):
    """Changes to the checked set of a multi-select prompt."""

    TOGGLE_CURRENT_OPTION = "toggle_current_option"
    SELECT_ALL = "select_all"
    CLEAR_SELECTIONS = "clear_selections"

    def __str__(self) -> str:
        return self.value


InnerAction = Union[NavigationAction, SelectionAction, InputAction]
Action = Union[PromptAction, InnerAction]


def prompt_action_from_key(key: str) -> PromptAction | None:
    """Map keys shared by every prompt."""
    if is_interrupt(key):
        return PromptAction.INTERRUPT
    if is_escape(key):
        return PromptAction.CANCEL
    if is_enter(key):
        return PromptAction.SUBMIT
    return None


def navigation_action_from_key(key: str, vim_mode: bool = False) -> NavigationAction | None:
    if is_up(key, vim_mode):
        return NavigationAction.MOVE_UP
    if is_down(key, vim_mode):
        return NavigationAction.MOVE_DOWN
    if is_page_up(key):
        return NavigationAction.PAGE_UP
    if is_page_down(key):
        return NavigationAction.PAGE_DOWN
    if is_home(key):
        return NavigationAction.MOVE_TO_START
    if is_end(key):
        return NavigationAction.MOVE_TO_END
    return None


def input_action_from_key(key: str, allow_cursor_moves: bool = True) -> InputAction | None:
    """Map editing keys to filter input actions.

    Args:
        key: Key string from readchar.
        allow_cursor_moves: Whether Left/Right move the input cursor. Multi-select
            prompts bind those keys to selection actions instead.
    """
    if is_backspace(key):
        return InputAction(InputActionKind.DELETE_PREVIOUS_CHAR)
    if is_delete(key):
        return InputAction(InputActionKind.DELETE_NEXT_CHAR)
    if is_delete_word(key):
        return InputAction(InputActionKind.DELETE_PREVIOUS_WORD)
    if is_clear_line(key):
        return InputAction(InputActionKind.CLEAR)
    if allow_cursor_moves and is_left(key):
        return InputAction(InputActionKind.MOVE_LEFT)
    if allow_cursor_moves and is_right(key):
        return InputAction(InputActionKind.MOVE_RIGHT)
    if is_printable(key):
        return InputAction.write(key)
    return None


def select_action_from_key(key: str, config: SelectConfig) -> Action | None:
    """Full key mapping of a single-select prompt."""
    action = prompt_action_from_key(key)
    if action is not None:
        return action

    nav = navigation_action_from_key(key, config.vim_mode)
    if nav is not None:
        return nav

    if config.filter_input_enabled:
        return input_action_from_key(key, allow_cursor_moves=True)
    return None


def multiselect_action_from_key(key: str, config: MultiSelectConfig) -> Action | None:
    """Full key mapping of a multi-select prompt."""
    action = prompt_action_from_key(key)
    if action is not None:
        return action

    nav = navigation_action_from_key(key, config.vim_mode)
    if nav is not None:
        return nav

    if is_space(key):
        return SelectionAction.TOGGLE_CURRENT_OPTION
    if is_right(key):
        return SelectionAction.SELECT_ALL
    if is_left(key):
        return SelectionAction.CLEAR_SELECTIONS

    if config.filter_input_enabled:
        return input_action_from_key(key, allow_cursor_moves=False)
    return None
