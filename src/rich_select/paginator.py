"""Windowing of scored options into a fixed-size page around the cursor."""

from __future__ import annotations

from typing import Sequence, TypeVar

from .types import ListOption, Page

T = TypeVar("T")


def paginate(
    page_size: int, choices: Sequence[ListOption[T]], cursor: int | None = None
) -> Page[T]:
    """Cut a page of at most ``page_size`` rows that keeps ``cursor`` visible.

    The cursor stays in the middle of the page while scrolling and the page
    sticks to the start or end of the list near the edges, so pages are always
    full when the list is long enough.

    Args:
        page_size: Maximum number of rows; values below 1 are treated as 1.
        choices: Every currently scored option, in display order.
        cursor: Index of the highlighted option inside ``choices``.

    Returns:
        The visible Page. An empty ``choices`` yields an empty page.
    """
    total = len(choices)
    page_size = max(1, page_size)

    if total == 0:
        return Page(content=[], cursor=None, offset=0, total=0)

    if cursor is not None:
        cursor = max(0, min(cursor, total - 1))

    if total <= page_size:
        return Page(content=list(choices), cursor=cursor, offset=0, total=total)

    selected = cursor if cursor is not None else 0
    half = page_size // 2

    if selected < half:
        offset = 0
    elif selected >= total - (page_size - half):
        offset = total - page_size
    else:
        offset = selected - half

    content = list(choices[offset : offset + page_size])
    relative = selected - offset if cursor is not None else None
    return Page(content=content, cursor=relative, offset=offset, total=total)
