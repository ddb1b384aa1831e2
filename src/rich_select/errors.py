"""Errors raised by selection prompts."""

from __future__ import annotations


class PromptError(RuntimeError):
    """Base error for prompt operations."""


class InvalidConfigurationError(PromptError):
    """Raised at construction when the prompt options cannot be used.

    The prompt object is never produced when this is raised.
    """


class OperationCanceledError(PromptError):
    """Raised when the user cancels the prompt (Esc) and the cancel is confirmed."""

    def __init__(self, message: str = "Operation was canceled by the user"):
        super().__init__(message)


class OperationInterruptedError(PromptError):
    """Raised when the user interrupts the prompt (Ctrl+C)."""

    def __init__(self, message: str = "Operation was interrupted by the user"):
        super().__init__(message)
