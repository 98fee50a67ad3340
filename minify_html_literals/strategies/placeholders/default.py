"""Default placeholder strategy.

Stands in a unique token for every expression of a template, minifies the
fused markup with ``HTMLMinifier`` and splits the result on the token.
"""

import logging
from typing import Any

from minify_html_literals.interfaces.literals import TemplatePart
from minify_html_literals.interfaces.strategy import BaseStrategy
from minify_html_literals.strategies.minifiers import minify_html

logger = logging.getLogger(__name__)

# "@" occurs once, at the start, so occurrences of the token never overlap.
# The "();" suffix keeps it intact inside inline styles.
PLACEHOLDER_PREFIX = "@TEMPLATE_EXPRESSION"
PLACEHOLDER_SUFFIX = "();"

DEFAULT_MINIFY_OPTIONS: dict[str, Any] = {
    "collapse_whitespace": True,
    "conservative_collapse": False,
    "remove_comments": True,
    "keep_conditional_comments": True,
    "remove_attribute_quotes": True,
}


class PlaceholderStrategy(BaseStrategy):
    """Placeholder strategy backed by the htmlmin-based HTML minifier."""

    def get_placeholder(self, parts: list[TemplatePart]) -> str:
        placeholder = PLACEHOLDER_PREFIX
        while any(placeholder + PLACEHOLDER_SUFFIX in part.text for part in parts):
            placeholder += "_"
        return placeholder + PLACEHOLDER_SUFFIX

    def combine_html_strings(self, parts: list[TemplatePart], placeholder: str) -> str:
        return placeholder.join(part.text for part in parts)

    def minify_html(self, html: str, options: dict[str, Any] | None = None) -> str:
        # An unquoted placeholder could merge with the expression's value
        options = {"keep_quotes_for": (PLACEHOLDER_PREFIX,), **(options or {})}
        minified = minify_html(html, **options)
        logger.debug(f"Minified template markup: {len(html)} -> {len(minified)} characters")
        return minified

    def split_html_by_placeholder(self, html: str, placeholder: str) -> list[str]:
        if not placeholder:
            # Only reachable with validation disabled
            return list(html)
        return html.split(placeholder)


default_strategy = PlaceholderStrategy()
