"""Abstract base classes for the literal minification pipeline."""

from minify_html_literals.interfaces.buffer import BaseMagicString, Edit
from minify_html_literals.interfaces.literals import (
    LiteralParseError,
    ParseLiterals,
    Template,
    TemplatePart,
)
from minify_html_literals.interfaces.strategy import BaseStrategy
from minify_html_literals.interfaces.validation import (
    BaseValidation,
    InvalidPlaceholderError,
    MinifyValidationError,
    PartCountMismatchError,
)

__all__ = [
    "BaseMagicString",
    "BaseStrategy",
    "BaseValidation",
    "Edit",
    "InvalidPlaceholderError",
    "LiteralParseError",
    "MinifyValidationError",
    "ParseLiterals",
    "PartCountMismatchError",
    "Template",
    "TemplatePart",
]
