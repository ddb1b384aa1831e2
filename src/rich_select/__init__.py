"""Interactive selection prompts for the terminal.

Single- and multi-choice list prompts with arrow-key navigation, fuzzy
filtering and pages that shrink to fit the terminal when options wrap.
Drawn with Rich, keys read with readchar.

Example:
    from rich_select import MultiSelectPrompt, SelectPrompt, min_selections

    fruit = SelectPrompt("Favorite fruit?", ["Banana", "Apple"]).prompt()
    print(fruit.index, fruit.value)

    toppings = MultiSelectPrompt(
        "Toppings?",
        ["Cheese", "Ham", "Olives"],
        validator=min_selections(1),
    ).prompt()
"""

from .actions import NavigationAction, PromptAction, SelectionAction
from .backend import Backend, RichBackend
from .config import MultiSelectConfig, SelectConfig, get_default_page_size
from .errors import (
    InvalidConfigurationError,
    OperationCanceledError,
    OperationInterruptedError,
    PromptError,
)
from .formatters import default_multi_option_formatter, default_option_formatter
from .input import Input, InputAction, InputActionKind
from .multi_select import MultiSelectPrompt, multiselect
from .paginator import paginate
from .prompt import ListPrompt, shrink_page_size
from .scoring import default_scorer, score_options
from .single_select import SelectPrompt, select
from .themes import DEFAULT_THEME, Theme
from .types import ActionResult, InputActionResult, ListOption, Page, Validation
from .validators import max_selections, min_selections

__all__ = [
    # Prompts
    "SelectPrompt",
    "MultiSelectPrompt",
    "ListPrompt",
    "select",
    "multiselect",
    # Results and state
    "ListOption",
    "Page",
    "Validation",
    "ActionResult",
    "InputActionResult",
    # Configuration
    "SelectConfig",
    "MultiSelectConfig",
    "get_default_page_size",
    # Errors
    "PromptError",
    "InvalidConfigurationError",
    "OperationCanceledError",
    "OperationInterruptedError",
    # Plugins
    "default_scorer",
    "score_options",
    "default_option_formatter",
    "default_multi_option_formatter",
    "min_selections",
    "max_selections",
    # Rendering
    "Backend",
    "RichBackend",
    "Theme",
    "DEFAULT_THEME",
    "paginate",
    "shrink_page_size",
    # Input
    "Input",
    "InputAction",
    "InputActionKind",
    "PromptAction",
    "NavigationAction",
    "SelectionAction",
]
