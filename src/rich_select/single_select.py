"""Single-select prompt.

Example:
    from rich_select import SelectPrompt

    prompt = SelectPrompt("What's your favorite fruit?", ["Banana", "Apple", "Pear"])
    answer = prompt.prompt()  # ListOption(index=1, value="Apple")
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from .actions import Action, InnerAction, NavigationAction, select_action_from_key
from .backend import Backend
from .config import (
    DEFAULT_FILTER_INPUT_ENABLED,
    DEFAULT_RESET_CURSOR,
    DEFAULT_VIM_MODE,
    DEFAULT_WRAP,
    SelectConfig,
    get_default_page_size,
)
from .formatters import OptionFormatter, default_option_formatter
from .input import InputAction
from .prompt import ListPrompt
from .scoring import Scorer
from .types import ActionResult, ListOption

T = TypeVar("T")

SELECT_HELP_MESSAGE = "↑↓ to move, enter to select, type to filter"
SELECT_HELP_MESSAGE_NO_FILTER = "↑↓ to move, enter to select"


class SelectPrompt(ListPrompt[T, ListOption[T]]):
    """Prompt for exactly one option out of a list.

    Up/Down move with wrap-around, PageUp/PageDown/Home/End jump without
    wrapping, typing filters the list and Enter picks the highlighted option.

    Args:
        message: Question shown to the user.
        options: Values to choose from; displayed with ``str()``.
        page_size: Options shown at once (defaults to RICH_SELECT_PAGE_SIZE or 7).
        vim_mode: Let j/k move the cursor.
        wrap: Let Up/Down wrap around the ends of the list.
        reset_cursor: Move the cursor to the top when the filter reorders the list.
        filter_input_enabled: Let typing filter the options.
        starting_cursor: Index of the option highlighted first.
        starting_filter_input: Initial filter text.
        help_message: Help line; None for the default, "" to hide it.
        scorer: Filter scorer ``(filter, value, display, index) -> int | None``.
        formatter: Turns the answer into the text shown after submission.
        confirm_cancel: Called on Esc; returning False keeps the prompt open.

    Raises:
        InvalidConfigurationError: If options is empty, page_size is below 1
            or starting_cursor is out of bounds.
    """

    def __init__(
        self,
        message: str,
        options: Sequence[T],
        page_size: int | None = None,
        vim_mode: bool = DEFAULT_VIM_MODE,
        wrap: bool = DEFAULT_WRAP,
        reset_cursor: bool = DEFAULT_RESET_CURSOR,
        filter_input_enabled: bool = DEFAULT_FILTER_INPUT_ENABLED,
        starting_cursor: int = 0,
        starting_filter_input: str | None = None,
        help_message: str | None = None,
        scorer: Scorer | None = None,
        formatter: OptionFormatter | None = None,
        confirm_cancel: Callable[[], bool] | None = None,
    ):
        config = SelectConfig(
            page_size=get_default_page_size() if page_size is None else page_size,
            vim_mode=vim_mode,
            wrap=wrap,
            reset_cursor=reset_cursor,
            filter_input_enabled=filter_input_enabled,
        )
        if help_message is None:
            help_message = (
                SELECT_HELP_MESSAGE if filter_input_enabled else SELECT_HELP_MESSAGE_NO_FILTER
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
        self.formatter = formatter or default_option_formatter

    def key_to_action(self, key: str) -> Action | None:
        return select_action_from_key(key, self.config)

    def handle(self, action: InnerAction) -> ActionResult:
        if isinstance(action, NavigationAction):
            return self.handle_navigation(action)
        if isinstance(action, InputAction):
            return self.handle_filter_input(action)
        return ActionResult.CLEAN

    def submit(self) -> ListOption[T] | None:
        index = self.scored.get(self.cursor_index)
        if index is None:
            return None
        return ListOption(index, self.options[index])

    def render(self, backend: Backend) -> None:
        backend.render_select_prompt(self.message, self.input)
        backend.render_options(self.current_page())
        if self.help_message:
            backend.render_help_message(self.help_message)

    def format_answer(self, answer: ListOption[T]) -> str:
        return self.formatter(answer)


def select(
    message: str, options: Sequence[T], backend: Backend | None = None, **kwargs
) -> ListOption[T]:
    """Ask for one option and return it with its index.

    Keyword arguments are passed to :class:`SelectPrompt`.
    """
    return SelectPrompt(message, options, **kwargs).prompt(backend)
