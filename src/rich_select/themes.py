"""Configurable themes for the Rich rendering backend.

The Theme dataclass holds every visual element of a prompt frame: colors,
icons and the prefixes used for the prompt and answer lines.
"""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for prompt frames.

    All colors use Rich style syntax (e.g., "green", "bold cyan", "dim").

    Attributes:
        prompt_prefix: Marker printed before the prompt message.
        answered_prefix: Marker printed before the message once answered.
        canceled_text: Text shown in place of the answer after cancellation.
        cursor_icon: Shown next to the highlighted option.
        checked_icon: Shown for checked options (multi-select).
        unchecked_icon: Shown for unchecked options (multi-select).
        scroll_up_icon: Marks a page that does not start at the first option.
        scroll_down_icon: Marks a page that does not end at the last option.
        empty_text: Shown when no option matches the filter.

        prompt_color: Style of the prompt prefix.
        highlighted_color: Style of the highlighted option.
        checked_color: Style of checked markers.
        answer_color: Style of the formatted answer.
        canceled_color: Style of the canceled text.
        help_color: Style of the help message.
        error_color: Style of validation messages.
        dim_color: Style of scroll indicators and empty state.
    """

    # Icons
    prompt_prefix: str = "?"
    answered_prefix: str = ">"
    canceled_text: str = "<canceled>"
    cursor_icon: str = "›"
    checked_icon: str = "[x]"
    unchecked_icon: str = "[ ]"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"
    empty_text: str = "No matching option"

    # Colors
    prompt_color: str = "bold green"
    highlighted_color: str = "cyan"
    checked_color: str = "green"
    answer_color: str = "cyan"
    canceled_color: str = "dim italic"
    help_color: str = "cyan"
    error_color: str = "red"
    dim_color: str = "dim"


# Default theme used when none is specified
DEFAULT_THEME = Theme()
