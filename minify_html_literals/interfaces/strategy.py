"""Abstract base class for placeholder minification strategies.

A strategy fuses the literal parts of one template into a single markup
document, minifies it, and splits the result back into parts. Any object
exposing the same four methods can be used in place of a subclass.
"""

from abc import ABC, abstractmethod
from typing import Any

from minify_html_literals.interfaces.literals import TemplatePart


class BaseStrategy(ABC):
    """Abstract base class for placeholder strategies.

    Example:
        ```python
        strategy = PlaceholderStrategy()
        placeholder = strategy.get_placeholder(template.parts)
        html = strategy.combine_html_strings(template.parts, placeholder)
        minified = strategy.minify_html(html, DEFAULT_MINIFY_OPTIONS)
        parts = strategy.split_html_by_placeholder(minified, placeholder)
        ```
    """

    @abstractmethod
    def get_placeholder(self, parts: list[TemplatePart]) -> str:
        """Return a token that does not occur in any part's text.

        Args:
            parts: The literal parts of a template.

        Returns:
            A non-empty placeholder string.
        """
        ...

    @abstractmethod
    def combine_html_strings(self, parts: list[TemplatePart], placeholder: str) -> str:
        """Join the part texts with the placeholder between consecutive parts.

        Args:
            parts: The literal parts of a template.
            placeholder: The token standing in for each expression.

        Returns:
            A single markup document.
        """
        ...

    @abstractmethod
    def minify_html(self, html: str, options: dict[str, Any] | None = None) -> str:
        """Minify a markup document.

        Args:
            html: The markup to minify.
            options: Options forwarded to the minifier.

        Returns:
            The minified markup.
        """
        ...

    @abstractmethod
    def split_html_by_placeholder(self, html: str, placeholder: str) -> list[str]:
        """Split minified markup wherever the placeholder occurs.

        Args:
            html: The minified markup.
            placeholder: The same token passed to ``combine_html_strings``.

        Returns:
            The minified text of each part, in order.
        """
        ...
