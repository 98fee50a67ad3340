"""Concrete literal scanner implementations."""

from minify_html_literals.strategies.scanners.javascript import (
    JavaScriptLiteralScanner,
    parse_literals,
)

__all__ = [
    "JavaScriptLiteralScanner",
    "parse_literals",
]
