"""Scoring of options against the filter text.

A scorer is a callable ``(filter_text, value, display_text, index)`` that
returns an integer score, or None when the option does not match. Higher
scores sort first; equal scores keep the canonical index order.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from rapidfuzz import fuzz, utils

logger = logging.getLogger(__name__)

Scorer = Callable[[str, Any, str, int], "int | None"]


def _is_subsequence(needle: str, haystack: str) -> bool:
    it = iter(haystack)
    return all(ch in it for ch in needle)


def default_scorer(filter_text: str, value: Any, display: str, index: int) -> int | None:
    """Fuzzy-match ``filter_text`` against the option's display text.

    Every character of the filter must appear in the display text in order
    (case-insensitive). Matches are ranked with rapidfuzz's weighted ratio.
    An empty filter matches everything with score 0.
    """
    query = filter_text.strip().lower()
    if not query:
        return 0
    if not _is_subsequence(query, display.lower()):
        return None
    return int(round(fuzz.WRatio(query, display, processor=utils.default_process)))


def score_options(
    filter_text: str,
    options: Sequence[Any],
    display_texts: Sequence[str],
    scorer: Scorer,
) -> list[int]:
    """Return the canonical indices that pass the filter, best score first.

    Ties are broken by ascending canonical index through an explicit sort key,
    so the result does not depend on the stability of the sort.
    """
    scored: list[tuple[int, int]] = []
    for index, value in enumerate(options):
        score = scorer(filter_text, value, display_texts[index], index)
        if score is not None:
            scored.append((index, score))

    scored.sort(key=lambda pair: (-pair[1], pair[0]))
    return [index for index, _ in scored]


class ScoredOrder:
    """The filtered and sorted view over an option list.

    Holds the current order of canonical indices. With no filter input the
    order is the identity and is never recomputed.

    Args:
        options: The option values.
        display_texts: ``str()`` of each option, computed once.
        scorer: Callable used by :meth:`rescore`.
    """

    def __init__(self, options: Sequence[Any], display_texts: Sequence[str], scorer: Scorer):
        self._options = options
        self._display_texts = display_texts
        self._scorer = scorer
        self.indices: list[int] = list(range(len(options)))

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self):
        return iter(self.indices)

    def get(self, position: int) -> int | None:
        """Canonical index shown at ``position``, or None when out of range."""
        if 0 <= position < len(self.indices):
            return self.indices[position]
        return None

    def rescore(self, filter_text: str) -> bool:
        """Recompute the order for ``filter_text``.

        Returns:
            True when the order changed and was replaced, False otherwise.
        """
        new_order = score_options(filter_text, self._options, self._display_texts, self._scorer)
        if new_order == self.indices:
            return False
        logger.debug(
            "Filter %r changed scored options: %d -> %d",
            filter_text,
            len(self.indices),
            len(new_order),
        )
        self.indices = new_order
        return True
