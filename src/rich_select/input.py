"""Single-line text buffer backing the filter input of a prompt."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .types import InputActionResult


class InputActionKind(str, Enum):
    """Edits the filter input understands."""

    WRITE = "write"
    DELETE_PREVIOUS_CHAR = "delete_previous_char"
    DELETE_NEXT_CHAR = "delete_next_char"
    DELETE_PREVIOUS_WORD = "delete_previous_word"
    CLEAR = "clear"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InputAction:
    """An edit to apply to the filter input.

    Attributes:
        kind: What to do.
        text: Characters to insert, for WRITE only.
    """

    kind: InputActionKind
    text: str = ""

    @classmethod
    def write(cls, text: str) -> "InputAction":
        return cls(InputActionKind.WRITE, text)


class Input:
    """Editable text with a cursor, measured in characters."""

    def __init__(self, content: str = ""):
        self._content = content
        self._cursor = len(content)

    @property
    def content(self) -> str:
        return self._content

    @property
    def cursor(self) -> int:
        return self._cursor

    def is_empty(self) -> bool:
        return not self._content

    def clear(self) -> None:
        self._content = ""
        self._cursor = 0

    def pre_cursor(self) -> str:
        return self._content[: self._cursor]

    def post_cursor(self) -> str:
        return self._content[self._cursor :]

    def handle(self, action: InputAction) -> InputActionResult:
        """Apply an edit and report what changed."""
        kind = action.kind
        before = (self._content, self._cursor)

        if kind == InputActionKind.WRITE:
            if not action.text:
                return InputActionResult.UNCHANGED
            self._content = self.pre_cursor() + action.text + self.post_cursor()
            self._cursor += len(action.text)

        elif kind == InputActionKind.DELETE_PREVIOUS_CHAR:
            if self._cursor > 0:
                self._content = self._content[: self._cursor - 1] + self.post_cursor()
                self._cursor -= 1

        elif kind == InputActionKind.DELETE_NEXT_CHAR:
            if self._cursor < len(self._content):
                self._content = self.pre_cursor() + self._content[self._cursor + 1 :]

        elif kind == InputActionKind.DELETE_PREVIOUS_WORD:
            head = self.pre_cursor()
            stripped = head.rstrip()
            cut = len(stripped)
            while cut > 0 and not stripped[cut - 1].isspace():
                cut -= 1
            self._content = head[:cut] + self.post_cursor()
            self._cursor = cut

        elif kind == InputActionKind.CLEAR:
            self.clear()

        elif kind == InputActionKind.MOVE_LEFT:
            self._cursor = max(0, self._cursor - 1)

        elif kind == InputActionKind.MOVE_RIGHT:
            self._cursor = min(len(self._content), self._cursor + 1)

        if self._content != before[0]:
            return InputActionResult.CONTENT_CHANGED
        if self._cursor != before[1]:
            return InputActionResult.POSITION_CHANGED
        return InputActionResult.UNCHANGED
