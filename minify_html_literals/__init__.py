"""Minify HTML markup inside JavaScript template literals."""

from minify_html_literals.core import ComponentFactory, MinifyOptions, Settings, get_settings
from minify_html_literals.interfaces import (
    BaseMagicString,
    BaseStrategy,
    BaseValidation,
    InvalidPlaceholderError,
    LiteralParseError,
    MinifyValidationError,
    PartCountMismatchError,
    Template,
    TemplatePart,
)
from minify_html_literals.minifier import minify_html_literals
from minify_html_literals.models import MinifyResult, SourceMap
from minify_html_literals.strategies import (
    DEFAULT_MINIFY_OPTIONS,
    MagicString,
    default_generate_source_map,
    default_should_minify,
    default_strategy,
    default_validation,
    parse_literals,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MINIFY_OPTIONS",
    "BaseMagicString",
    "BaseStrategy",
    "BaseValidation",
    "ComponentFactory",
    "InvalidPlaceholderError",
    "LiteralParseError",
    "MagicString",
    "MinifyOptions",
    "MinifyResult",
    "MinifyValidationError",
    "PartCountMismatchError",
    "Settings",
    "SourceMap",
    "Template",
    "TemplatePart",
    "default_generate_source_map",
    "default_should_minify",
    "default_strategy",
    "default_validation",
    "get_settings",
    "minify_html_literals",
    "parse_literals",
]
