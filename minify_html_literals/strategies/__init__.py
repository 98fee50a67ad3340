"""Concrete strategy implementations."""

from minify_html_literals.strategies.buffers import (
    MagicString,
    default_generate_source_map,
)
from minify_html_literals.strategies.filters import default_should_minify
from minify_html_literals.strategies.minifiers import (
    HTMLMinifier,
    minify_html,
)
from minify_html_literals.strategies.placeholders import (
    DEFAULT_MINIFY_OPTIONS,
    PlaceholderStrategy,
    default_strategy,
)
from minify_html_literals.strategies.scanners import (
    JavaScriptLiteralScanner,
    parse_literals,
)
from minify_html_literals.strategies.validators import (
    DefaultValidation,
    default_validation,
)

__all__ = [
    "DEFAULT_MINIFY_OPTIONS",
    "DefaultValidation",
    "HTMLMinifier",
    "JavaScriptLiteralScanner",
    "MagicString",
    "PlaceholderStrategy",
    "default_generate_source_map",
    "default_should_minify",
    "default_strategy",
    "default_validation",
    "minify_html",
    "parse_literals",
]
