"""Per-call options for ``minify_html_literals``.

Every field left as None falls back to the project default, which for
``validate`` and ``generate_source_map`` comes from ``Settings``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from minify_html_literals.interfaces.buffer import BaseMagicString
from minify_html_literals.interfaces.literals import ParseLiterals, Template
from minify_html_literals.interfaces.strategy import BaseStrategy
from minify_html_literals.interfaces.validation import BaseValidation
from minify_html_literals.models import SourceMap

ShouldMinify = Callable[[Template], bool]
SourceMapGenerator = Callable[[BaseMagicString, str], SourceMap | None]
MagicStringFactory = Callable[[str], BaseMagicString]


@dataclass
class MinifyOptions:
    """Options for one minification run.

    Attributes:
        file_name: Logical file name recorded in the source map.
        minify_options: Keyword options forwarded verbatim to the minifier.
        parse_literals: Replacement for the literal scanner.
        should_minify: Replacement for the template filter.
        strategy: Replacement for the placeholder strategy.
        validate: True for the default checks, False to skip them, or a
            custom validation object.
        generate_source_map: True for the default map, False for no map, or
            a custom ``(buffer, file_name) -> SourceMap`` callable.
        magic_string: Replacement buffer class or factory, called with the
            source text.
    """

    file_name: str = ""
    minify_options: dict[str, Any] | None = None
    parse_literals: ParseLiterals | None = None
    should_minify: ShouldMinify | None = None
    strategy: BaseStrategy | None = None
    validate: bool | BaseValidation | None = None
    generate_source_map: bool | SourceMapGenerator | None = None
    magic_string: MagicStringFactory | None = None
