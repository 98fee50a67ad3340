"""JavaScript and TypeScript template literal scanner.

Parses the source with tree-sitter and collects every ``template_string``
node, including templates nested inside the substitutions of other
templates. Part ranges are derived from the backticks and the
``template_substitution`` nodes, so escapes stay exactly as written.
"""

import logging
from functools import lru_cache

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_language

from minify_html_literals.interfaces.literals import LiteralParseError, Template, TemplatePart

logger = logging.getLogger(__name__)

# Tried in order until one grammar parses the source without errors.
DEFAULT_LANGUAGES = ("typescript", "tsx", "javascript")


@lru_cache(maxsize=None)
def get_parser(language: str) -> Parser:
    """Get a cached parser for a tree-sitter-language-pack grammar.

    Args:
        language: Grammar name (typescript, tsx, javascript)
    """
    logger.debug(f"Loaded {language} parser")
    return Parser(get_language(language))


def _char_offsets(source: str) -> list[int]:
    """Map every UTF-8 byte offset of ``source`` to its character offset."""
    offsets = []
    for index, char in enumerate(source):
        offsets.extend([index] * len(char.encode("utf-8", "surrogatepass")))
    offsets.append(len(source))
    return offsets


class JavaScriptLiteralScanner:
    """Finds template literals in JavaScript or TypeScript source.

    Example:
        ```python
        templates = JavaScriptLiteralScanner(source).scan()
        ```
    """

    def __init__(self, source: str, languages: tuple[str, ...] = DEFAULT_LANGUAGES) -> None:
        self._source = source
        self._data = source.encode("utf-8", "surrogatepass")
        self._languages = languages
        # tree-sitter reports byte offsets, templates use character offsets.
        self._offsets = None if source.isascii() else _char_offsets(source)

    def scan(self) -> list[Template]:
        """Parse the whole source.

        Returns:
            Templates ordered by the offset of their opening backtick.

        Raises:
            LiteralParseError: If no grammar parses the source without errors.
        """
        root = self._parse()

        templates = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "template_string":
                templates.append(self._build_template(node))
            stack.extend(reversed(node.children))

        templates.sort(key=lambda template: template.start)
        logger.debug(f"Scanned {len(templates)} template literals")
        return templates

    def _parse(self) -> Node:
        first_error: Node | None = None
        for language in self._languages:
            root = get_parser(language).parse(self._data).root_node
            if not root.has_error:
                return root
            logger.debug(f"Source does not parse as {language}")
            if first_error is None:
                first_error = self._find_error(root)

        if first_error.is_missing:
            message = f"Missing {first_error.type!r}"
        else:
            message = "Unexpected syntax"
        raise self._error(message, first_error.start_byte)

    @staticmethod
    def _find_error(root: Node) -> Node:
        """Return the first ERROR or MISSING node in source order."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_error or node.is_missing:
                return node
            stack.extend(reversed([child for child in node.children if child.has_error]))
        return root

    def _build_template(self, node: Node) -> Template:
        boundaries = [self._offset(node.start_byte) + 1]
        for child in node.named_children:
            if child.type == "template_substitution":
                boundaries.append(self._offset(child.start_byte))
                boundaries.append(self._offset(child.end_byte))
        end = self._offset(node.end_byte)
        boundaries.append(end - 1)

        parts = [
            TemplatePart(text=self._source[start:stop], start=start, end=stop)
            for start, stop in zip(boundaries[::2], boundaries[1::2])
        ]
        return Template(parts=parts, tag=self._tag(node), start=boundaries[0] - 1, end=end)

    def _tag(self, node: Node) -> str | None:
        """Return the source text of the tag function, if the template is tagged."""
        parent = node.parent
        if parent is None or parent.type != "call_expression":
            return None
        arguments = parent.child_by_field_name("arguments")
        function = parent.child_by_field_name("function")
        if arguments is None or function is None or arguments.start_byte != node.start_byte:
            return None
        return self._source[self._offset(function.start_byte):self._offset(function.end_byte)]

    def _offset(self, byte_offset: int) -> int:
        if self._offsets is None:
            return byte_offset
        return self._offsets[byte_offset]

    def _error(self, message: str, byte_offset: int) -> LiteralParseError:
        offset = self._offset(byte_offset)
        line = self._source.count("\n", 0, offset) + 1
        column = offset - (self._source.rfind("\n", 0, offset) + 1) + 1
        return LiteralParseError(message, offset=offset, line=line, column=column)


def parse_literals(source: str) -> list[Template]:
    """Scan source text for template literals.

    Args:
        source: JavaScript or TypeScript source text.

    Returns:
        Every template literal in the source, outer templates before the
        templates nested in their expressions.

    Raises:
        LiteralParseError: If the source is malformed.
    """
    return JavaScriptLiteralScanner(source).scan()
