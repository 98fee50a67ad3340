"""Concrete validation implementations."""

from minify_html_literals.strategies.validators.default import (
    DefaultValidation,
    default_validation,
)

__all__ = [
    "DefaultValidation",
    "default_validation",
]
