"""Multi-select prompt.

Example:
    from rich_select import MultiSelectPrompt, min_selections

    prompt = MultiSelectPrompt(
        "Toppings?",
        ["Cheese", "Ham", "Olives"],
        default=[0],
        validator=min_selections(1),
    )
    answer = prompt.prompt()  # [ListOption(index=0, value="Cheese"), ...]
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence, TypeVar

from .actions import (
    Action,
    InnerAction,
    NavigationAction,
    SelectionAction,
    multiselect_action_from_key,
)
from .backend import Backend
from .config import (
    DEFAULT_FILTER_INPUT_ENABLED,
    DEFAULT_KEEP_FILTER,
    DEFAULT_RESET_CURSOR,
    DEFAULT_VIM_MODE,
    DEFAULT_WRAP,
    MultiSelectConfig,
    get_default_page_size,
)
from .errors import InvalidConfigurationError
from .formatters import MultiOptionFormatter, default_multi_option_formatter
from .input import InputAction
from .prompt import ListPrompt
from .scoring import Scorer
from .types import ActionResult, ListOption
from .validators import MultiOptionValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")

MULTISELECT_HELP_MESSAGE = "↑↓ to move, space to select one, → to all, ← to none, type to filter"
MULTISELECT_HELP_MESSAGE_NO_FILTER = "↑↓ to move, space to select one, → to all, ← to none"


class MultiSelectPrompt(ListPrompt[T, list[ListOption[T]]]):
    """Prompt for any number of options out of a list.

    Space toggles the highlighted option, Right checks every option that
    passes the filter, Left clears all checks. Checked options stay checked
    while filtered out. Enter runs the validator and, when it accepts, returns
    the checked options in index order.

    Args:
        message: Question shown to the user.
        options: Values to choose from; displayed with ``str()``.
        default: Indices checked when the prompt opens.
        all_selected_by_default: Check every option when the prompt opens;
            takes precedence over ``default``.
        page_size: Options shown at once (defaults to RICH_SELECT_PAGE_SIZE or 7).
        vim_mode: Let j/k move the cursor.
        wrap: Let Up/Down wrap around the ends of the list.
        reset_cursor: Move the cursor to the top when the filter reorders the list.
        keep_filter: Keep the filter text after toggle, select-all and clear.
        filter_input_enabled: Let typing filter the options.
        starting_cursor: Index of the option highlighted first.
        starting_filter_input: Initial filter text.
        help_message: Help line; None for the default, "" to hide it.
        scorer: Filter scorer ``(filter, value, display, index) -> int | None``.
        formatter: Turns the answer into the text shown after submission.
        validator: Checks the checked options on submit.
        confirm_cancel: Called on Esc; returning False keeps the prompt open.

    Raises:
        InvalidConfigurationError: If options is empty, page_size is below 1,
            or starting_cursor or a default index is out of bounds.
    """

    def __init__(
        self,
        message: str,
        options: Sequence[T],
        default: Iterable[int] | None = None,
        all_selected_by_default: bool = False,
        page_size: int | None = None,
        vim_mode: bool = DEFAULT_VIM_MODE,
        wrap: bool = DEFAULT_WRAP,
        reset_cursor: bool = DEFAULT_RESET_CURSOR,
        keep_filter: bool = DEFAULT_KEEP_FILTER,
        filter_input_enabled: bool = DEFAULT_FILTER_INPUT_ENABLED,
        starting_cursor: int = 0,
        starting_filter_input: str | None = None,
        help_message: str | None = None,
        scorer: Scorer | None = None,
        formatter: MultiOptionFormatter | None = None,
        validator: MultiOptionValidator | None = None,
        confirm_cancel: Callable[[], bool] | None = None,
    ):
        config = MultiSelectConfig(
            page_size=get_default_page_size() if page_size is None else page_size,
            vim_mode=vim_mode,
            wrap=wrap,
            reset_cursor=reset_cursor,
            filter_input_enabled=filter_input_enabled,
            keep_filter=keep_filter,
        )
        if help_message is None:
            help_message = (
                MULTISELECT_HELP_MESSAGE
                if filter_input_enabled
                else MULTISELECT_HELP_MESSAGE_NO_FILTER
            )
        super().__init__(
            message,
            options,
            config,
            starting_cursor=starting_cursor,
            starting_filter_input=starting_filter_input,
            help_message=help_message,
            scorer=scorer,
            confirm_cancel=confirm_cancel,
        )

        default = list(default) if default is not None else []
        for index in default:
            if not 0 <= index < len(self.options):
                raise InvalidConfigurationError(
                    f"Index {index} is out-of-bounds for length {len(self.options)} of options"
                )

        if all_selected_by_default:
            self.checked: set[int] = set(range(len(self.options)))
        else:
            self.checked = set(default)

        self.formatter = formatter or default_multi_option_formatter
        self.validator = validator
        self.error: str | None = None

    def key_to_action(self, key: str) -> Action | None:
        return multiselect_action_from_key(key, self.config)

    # ── Checked set ──

    def toggle_cursor_selection(self) -> ActionResult:
        index = self.scored.get(self.cursor_index)
        if index is None:
            return ActionResult.CLEAN
        if index in self.checked:
            self.checked.discard(index)
        else:
            self.checked.add(index)
        return ActionResult.NEEDS_REDRAW

    def select_all(self) -> ActionResult:
        """Check every option that currently passes the filter, and only those."""
        self.checked = set(self.scored.indices)
        return ActionResult.NEEDS_REDRAW

    def clear_selections(self) -> ActionResult:
        self.checked.clear()
        return ActionResult.NEEDS_REDRAW

    def clear_input_if_needed(self, action: InnerAction) -> ActionResult:
        """Clear a non-empty filter after a selection action, unless keep_filter is set."""
        if self.config.keep_filter or self.input is None or self.input.is_empty():
            return ActionResult.CLEAN
        if not isinstance(action, SelectionAction):
            return ActionResult.CLEAN
        self.input.clear()
        self.run_scorer()
        return ActionResult.NEEDS_REDRAW

    def handle(self, action: InnerAction) -> ActionResult:
        if isinstance(action, NavigationAction):
            result = self.handle_navigation(action)
        elif action == SelectionAction.TOGGLE_CURRENT_OPTION:
            result = self.toggle_cursor_selection()
        elif action == SelectionAction.SELECT_ALL:
            result = self.select_all()
        elif action == SelectionAction.CLEAR_SELECTIONS:
            result = self.clear_selections()
        elif isinstance(action, InputAction):
            result = self.handle_filter_input(action)
        else:
            result = ActionResult.CLEAN

        return self.clear_input_if_needed(action).merge(result)

    # ── Submission ──

    def checked_options(self) -> list[ListOption[T]]:
        """Checked options in ascending index order."""
        return [ListOption(index, self.options[index]) for index in sorted(self.checked)]

    def submit(self) -> list[ListOption[T]] | None:
        selected = self.checked_options()
        if self.validator is not None:
            validation = self.validator(selected)
            if not validation.is_valid:
                logger.debug("Selection rejected by validator: %s", validation.message)
                self.error = validation.message or "Invalid selection"
                return None
        return selected

    def render(self, backend: Backend) -> None:
        if self.error:
            backend.render_error_message(self.error)
        backend.render_multiselect_prompt(self.message, self.input)
        backend.render_options(self.current_page(), self.checked)
        if self.help_message:
            backend.render_help_message(self.help_message)

    def format_answer(self, answer: list[ListOption[T]]) -> str:
        return self.formatter(answer)


def multiselect(
    message: str, options: Sequence[T], backend: Backend | None = None, **kwargs
) -> list[ListOption[T]]:
    """Ask for any number of options and return them with their indices.

    Keyword arguments are passed to :class:`MultiSelectPrompt`.
    """
    return MultiSelectPrompt(message, options, **kwargs).prompt(backend)
