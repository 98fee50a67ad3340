"""Abstract base class for the mutable text buffer.

The buffer records range overwrites against an immutable copy of the
original text and materializes them in one pass, optionally together with a
v3 source map.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minify_html_literals.models import SourceMap


@dataclass(frozen=True)
class Edit:
    """A staged overwrite of ``original[start:end]``.

    Attributes:
        start: Offset in the original text where the range begins.
        end: Offset in the original text where the range ends (exclusive).
        replacement: The text written in place of the range.
    """

    start: int
    end: int
    replacement: str


class BaseMagicString(ABC):
    """Abstract base class for scoped text buffers.

    Implementations are constructed from the original source text. Offsets
    passed to ``overwrite`` always refer to that original text, no matter how
    many edits were recorded before.
    """

    @abstractmethod
    def overwrite(self, start: int, end: int, content: str) -> BaseMagicString:
        """Replace ``original[start:end]`` with ``content``.

        Returns:
            The buffer itself, to allow chaining.

        Raises:
            ValueError: If the range is invalid or overlaps a previous edit.
        """
        ...

    @abstractmethod
    def to_string(self) -> str:
        """Return the original text with every edit applied."""
        ...

    @abstractmethod
    def generate_map(
        self,
        file: str | None = None,
        source: str | None = None,
        hires: bool = False,
        include_content: bool = False,
    ) -> SourceMap:
        """Generate a v3 source map from the edited text back to the original.

        Args:
            file: Name of the generated file recorded in the map.
            source: Name of the original source file.
            hires: Map every character instead of only line starts.
            include_content: Embed the original text in ``sourcesContent``.
        """
        ...

    def __str__(self) -> str:
        return self.to_string()
