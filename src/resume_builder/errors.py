"""Exceptions raised by the text improvement pipeline."""

from __future__ import annotations


class InputValidationError(ValueError):
    """The request cannot be served as given. Never retried."""


class EmptyTextError(InputValidationError):
    def __init__(self) -> None:
        super().__init__("Text is required")


class InvalidActionError(InputValidationError):
    def __init__(self, action: object) -> None:
        super().__init__("Invalid action type")
        self.action = action

    @property
    def details(self) -> str:
        return f"Unsupported action: {self.action!r}"


class UpstreamError(RuntimeError):
    """The text-generation provider call failed."""

    def __init__(self, details: str) -> None:
        super().__init__("Failed to improve text")
        self.details = details
