"""Runtime configuration for selection prompts.

Each prompt keeps its own copy of a config object. Adaptive page sizing
shrinks ``page_size`` on that copy only, so the caller's defaults and other
prompts are never affected.

The default page size can be overridden with the ``RICH_SELECT_PAGE_SIZE``
environment variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 7
DEFAULT_VIM_MODE = False
DEFAULT_WRAP = True
DEFAULT_RESET_CURSOR = True
DEFAULT_KEEP_FILTER = True
DEFAULT_FILTER_INPUT_ENABLED = True

PAGE_SIZE_ENV = "RICH_SELECT_PAGE_SIZE"


def get_default_page_size() -> int:
    """Return the default page size from env, falling back to DEFAULT_PAGE_SIZE.

    Non-numeric and non-positive values are ignored.
    """
    raw = (os.environ.get(PAGE_SIZE_ENV) or "").strip()
    if not raw:
        return DEFAULT_PAGE_SIZE
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_PAGE_SIZE
    return value if value > 0 else DEFAULT_PAGE_SIZE


@dataclass
class SelectConfig:
    """Options of a single-select prompt that the action loop reads.

    Attributes:
        page_size: Rows attempted per render; shrinks under adaptive sizing.
        vim_mode: Whether j/k move the cursor.
        wrap: Whether single-step Up/Down wrap around the ends of the list.
        reset_cursor: Move the cursor to the top whenever the filter changes
            the list of scored options.
        filter_input_enabled: Whether typing filters the options.
    """

    page_size: int = DEFAULT_PAGE_SIZE
    vim_mode: bool = DEFAULT_VIM_MODE
    wrap: bool = DEFAULT_WRAP
    reset_cursor: bool = DEFAULT_RESET_CURSOR
    filter_input_enabled: bool = DEFAULT_FILTER_INPUT_ENABLED


@dataclass
class MultiSelectConfig(SelectConfig):
    """Options of a multi-select prompt.

    Attributes:
        keep_filter: Keep the filter text after toggle, select-all and clear.
            When False the filter is cleared after each of those actions.
    """

    keep_filter: bool = DEFAULT_KEEP_FILTER
