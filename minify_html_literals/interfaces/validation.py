"""Validation interfaces and errors.

Validation guards the placeholder round trip: the placeholder must be usable
as a split token, and every expression hole must survive minification.
"""

from abc import ABC, abstractmethod
from typing import Any

from minify_html_literals.interfaces.literals import TemplatePart


class MinifyValidationError(Exception):
    """Base exception for failed minification checks."""

    pass


class InvalidPlaceholderError(MinifyValidationError):
    """Raised when a strategy returns a placeholder that is not a non-empty string."""

    def __init__(self, placeholder: Any) -> None:
        super().__init__(f"Placeholder must be a non-empty string, got {placeholder!r}")
        self.placeholder = placeholder


class PartCountMismatchError(MinifyValidationError):
    """Raised when minification adds, drops or merges an expression hole."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"HTML part count changed after minification: expected {expected}, got {actual}. "
            "An expression placeholder was removed or duplicated by the minifier."
        )
        self.expected = expected
        self.actual = actual


class BaseValidation(ABC):
    """Abstract base class for placeholder round-trip validation."""

    @abstractmethod
    def ensure_placeholder_valid(self, placeholder: Any) -> None:
        """Check that a placeholder can be embedded and searched for.

        Raises:
            InvalidPlaceholderError: If the placeholder is unusable.
        """
        ...

    @abstractmethod
    def ensure_html_parts_valid(
        self, parts: list[TemplatePart], html_parts: list[str]
    ) -> None:
        """Check that minification kept one part per original part.

        Raises:
            PartCountMismatchError: If the counts differ.
        """
        ...
