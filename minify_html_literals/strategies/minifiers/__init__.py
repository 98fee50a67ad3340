"""Concrete markup minifier implementations."""

from minify_html_literals.strategies.minifiers.html import HTMLMinifier, minify_html

__all__ = [
    "HTMLMinifier",
    "minify_html",
]
