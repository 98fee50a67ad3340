"""Concrete placeholder strategies."""

from minify_html_literals.strategies.placeholders.default import (
    DEFAULT_MINIFY_OPTIONS,
    PlaceholderStrategy,
    default_strategy,
)

__all__ = [
    "DEFAULT_MINIFY_OPTIONS",
    "PlaceholderStrategy",
    "default_strategy",
]
