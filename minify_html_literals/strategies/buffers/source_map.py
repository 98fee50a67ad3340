"""Version 3 source map encoding.

Segments are Base64 VLQ encoded with fields relative to the previous
segment: generated column (reset on every generated line), source index,
original line and original column.
"""

from bisect import bisect_right

from minify_html_literals.interfaces.buffer import BaseMagicString
from minify_html_literals.models import SourceMap

BASE64_DIGITS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

VLQ_SHIFT = 5
VLQ_CONTINUATION_BIT = 1 << VLQ_SHIFT
VLQ_MASK = VLQ_CONTINUATION_BIT - 1


def encode_vlq(value: int) -> str:
    """Encode one signed integer as Base64 VLQ."""
    vlq = ((-value) << 1) | 1 if value < 0 else value << 1
    digits = []
    while True:
        digit = vlq & VLQ_MASK
        vlq >>= VLQ_SHIFT
        if vlq:
            digit |= VLQ_CONTINUATION_BIT
        digits.append(BASE64_DIGITS[digit])
        if not vlq:
            return "".join(digits)


def line_starts(text: str) -> list[int]:
    """Return the offset at which every line of ``text`` starts."""
    starts = [0]
    index = text.find("\n")
    while index != -1:
        starts.append(index + 1)
        index = text.find("\n", index + 1)
    return starts


class MappingsBuilder:
    """Accumulates segments while the generated text is walked in order."""

    def __init__(self, original: str) -> None:
        self._line_starts = line_starts(original)
        self._lines: list[list[str]] = [[]]
        self._column = 0
        self._previous_column = 0
        self._previous_line = 0
        self._previous_source_column = 0

    def add_segment(self, original_offset: int) -> None:
        """Map the current generated position to an offset in the original text."""
        line = bisect_right(self._line_starts, original_offset) - 1
        column = original_offset - self._line_starts[line]
        self._lines[-1].append(
            encode_vlq(self._column - self._previous_column)
            + encode_vlq(0)
            + encode_vlq(line - self._previous_line)
            + encode_vlq(column - self._previous_source_column)
        )
        self._previous_column = self._column
        self._previous_line = line
        self._previous_source_column = column

    def advance(self, text: str) -> None:
        """Move the generated position past ``text`` without adding segments."""
        lines = text.split("\n")
        for _ in lines[1:]:
            self.new_line()
        self._column += len(lines[-1])

    def new_line(self) -> None:
        self._lines.append([])
        self._column = 0
        self._previous_column = 0

    def next_column(self) -> None:
        self._column += 1

    def encode(self) -> str:
        return ";".join(",".join(segments) for segments in self._lines)


def default_generate_source_map(
    ms: BaseMagicString,
    file_name: str,
    hires: bool = True,
    include_content: bool = False,
) -> SourceMap:
    """Generate a high resolution source map for a minified file.

    Args:
        ms: The buffer holding every staged edit.
        file_name: Logical name of the source file.
        hires: Map every character rather than only line starts.
        include_content: Embed the original text in the map.

    Returns:
        A map whose ``file`` is ``<file_name>.map`` and whose only source is
        ``file_name``.
    """
    return ms.generate_map(
        file=f"{file_name}.map",
        source=file_name,
        hires=hires,
        include_content=include_content,
    )
