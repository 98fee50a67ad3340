"""Template literal data structures and the scanner contract.

A scanner turns raw source text into an ordered list of templates. Each
template keeps the literal text segments between its expressions together
with their offsets in the original source.
"""

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TemplatePart:
    """A literal text segment of a template.

    Attributes:
        text: The raw text of the segment exactly as written in the source.
        start: Offset of the first character of the segment.
        end: Offset just past the last character of the segment.
    """

    text: str
    start: int = 0
    end: int = 0


@dataclass(frozen=True)
class Template:
    """One template literal occurrence.

    Consecutive parts are separated by exactly one expression, so a template
    with ``n`` parts has ``n - 1`` expression holes.

    Attributes:
        parts: The literal text segments in source order.
        tag: Source text of the tag expression, or None for untagged literals.
        start: Offset of the opening backtick.
        end: Offset just past the closing backtick.
    """

    parts: list[TemplatePart] = field(default_factory=list)
    tag: str | None = None
    start: int = 0
    end: int = 0

    @property
    def expression_count(self) -> int:
        """Return the number of expression holes in the template."""
        return max(0, len(self.parts) - 1)


ParseLiterals = Callable[[str], list[Template]]


class LiteralParseError(ValueError):
    """Exception raised when source text cannot be scanned for literals."""

    def __init__(self, message: str, offset: int, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.offset = offset
        self.line = line
        self.column = column
