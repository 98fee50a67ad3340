"""Text buffer with deferred range overwrites.

Every overwrite is addressed by offsets in the pristine original text and
staged as an ``Edit``. Nothing is applied until the buffer is materialized,
so edits never shift each other's offsets.
"""

import logging
from bisect import bisect_left

from minify_html_literals.interfaces.buffer import BaseMagicString, Edit
from minify_html_literals.models import SourceMap
from minify_html_literals.strategies.buffers.source_map import MappingsBuilder

logger = logging.getLogger(__name__)


class MagicString(BaseMagicString):
    """Buffer of non-overlapping edits over an immutable original text.

    Example:
        ```python
        ms = MagicString("let a = html`  <p> x </p>  `;")
        ms.overwrite(13, 27, "<p>x</p>")
        ms.to_string()  # "let a = html`<p>x</p>`;"
        ```
    """

    def __init__(self, original: str) -> None:
        self.original = original
        self._edits: list[Edit] = []
        self._starts: list[int] = []

    @property
    def edits(self) -> list[Edit]:
        """Return the staged edits ordered by start offset."""
        return list(self._edits)

    def overwrite(self, start: int, end: int, content: str) -> "MagicString":
        if not 0 <= start < end <= len(self.original):
            raise ValueError(
                f"Cannot overwrite range [{start}, {end}) of a {len(self.original)} character text"
            )

        index = bisect_left(self._starts, start)
        if index < len(self._edits):
            existing = self._edits[index]
            if existing.start == start and existing.end == end:
                self._edits[index] = Edit(start, end, content)
                return self
            if existing.start < end:
                raise ValueError(
                    f"Range [{start}, {end}) overlaps edit [{existing.start}, {existing.end})"
                )
        if index > 0 and self._edits[index - 1].end > start:
            previous = self._edits[index - 1]
            raise ValueError(
                f"Range [{start}, {end}) overlaps edit [{previous.start}, {previous.end})"
            )

        self._edits.insert(index, Edit(start, end, content))
        self._starts.insert(index, start)
        return self

    def to_string(self) -> str:
        pieces = []
        position = 0
        for edit in self._edits:
            pieces.append(self.original[position:edit.start])
            pieces.append(edit.replacement)
            position = edit.end
        pieces.append(self.original[position:])
        return "".join(pieces)

    def generate_map(
        self,
        file: str | None = None,
        source: str | None = None,
        hires: bool = False,
        include_content: bool = False,
    ) -> SourceMap:
        builder = MappingsBuilder(self.original)
        position = 0
        for edit in self._edits:
            self._map_original(builder, position, edit.start, hires)
            if edit.replacement:
                builder.add_segment(edit.start)
                builder.advance(edit.replacement)
            position = edit.end
        self._map_original(builder, position, len(self.original), hires)

        logger.debug(f"Generated source map for {source or '<anonymous>'} with {len(self._edits)} edits")
        return SourceMap(
            version=3,
            file=file,
            sources=[source],
            sources_content=[self.original if include_content else None],
            names=[],
            mappings=builder.encode(),
        )

    def _map_original(self, builder: MappingsBuilder, start: int, end: int, hires: bool) -> None:
        first = True
        for offset in range(start, end):
            if hires or first:
                builder.add_segment(offset)
            if self.original[offset] == "\n":
                builder.new_line()
                first = True
            else:
                builder.next_column()
                first = False
