"""Concrete text buffer implementations."""

from minify_html_literals.strategies.buffers.magic_string import MagicString
from minify_html_literals.strategies.buffers.source_map import (
    default_generate_source_map,
    encode_vlq,
)

__all__ = [
    "MagicString",
    "default_generate_source_map",
    "encode_vlq",
]
