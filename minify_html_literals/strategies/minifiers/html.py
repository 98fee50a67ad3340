"""Template-safe HTML minifier built on htmlmin's parser.

Removes:
- Comments (``<!--! ... -->`` and conditional comments are kept)
- Whitespace next to block-level tags and at document edges
- Redundant whitespace inside start tags
- Optional attribute quotes

Preserves:
- Tag and attribute names exactly as written (binding syntaxes such as
  ``.prop=``, ``?attr=`` and ``@event=`` keep their case)
- Content of <pre>, <textarea>, <script>, <style> and of elements carrying
  the ``pre`` attribute
- Entity and character references, and bare ampersands, as written
"""

import re
from dataclasses import dataclass

from htmlmin.parser import HTMLMinParser

# Whitespace around these tags can be significant, everything else is block level.
INLINE_TAGS = frozenset(
    [
        "a", "abbr", "acronym", "audio", "b", "bdi", "bdo", "big", "br", "button",
        "canvas", "cite", "code", "data", "del", "dfn", "em", "font", "i", "img",
        "input", "ins", "kbd", "label", "map", "mark", "math", "meter", "nobr",
        "object", "output", "picture", "progress", "q", "rp", "rt", "ruby", "s",
        "samp", "select", "slot", "small", "span", "strike", "strong", "sub",
        "sup", "svg", "textarea", "time", "tt", "u", "var", "video", "wbr",
    ]
)

PRESERVE_WHITESPACE_TAGS = ("pre", "textarea", "script", "style")

VOID_TAGS = frozenset(
    [
        "area", "base", "br", "col", "embed", "hr", "img", "input", "link",
        "meta", "param", "source", "track", "wbr",
    ]
)

# HTML whitespace only, so non-breaking spaces survive.
_WHITESPACE_RE = re.compile(r"[ \t\n\r\f]+")
_TAG_NAME_RE = re.compile(r"<\s*([^\s/>]+)")
_ATTRIBUTE_RE = re.compile(r"""([^\s/>"'=][^\s/>=]*)(?:\s*=\s*("[^"]*"|'[^']*'|[^\s>]*))?""")
_UNQUOTED_VALUE_RE = re.compile(r"""[^\s"'`=<>]+""")
_CONDITIONAL_COMMENT_RE = re.compile(r"^\[if\s|\[endif\]$")

# Private use code points, one of which stands in for "&" while parsing.
_AMPERSAND_STANDINS = range(0xE000, 0xF900)


@dataclass
class _Token:
    kind: str  # "text", "tag" or "raw"
    text: str
    block: bool = False


class HTMLMinifier(HTMLMinParser):
    """HTML minifier that never reorders or drops text content.

    Attributes:
        collapse_whitespace: Collapse whitespace runs and trim around block tags.
        conservative_collapse: Collapse to a single space but never trim.
        remove_comments: Drop comments.
        keep_conditional_comments: Keep ``<!--[if ...]>`` comments when dropping.
        remove_attribute_quotes: Unquote attribute values that need no quotes.
        keep_quotes_for: Values containing any of these strings stay quoted.
    """

    def __init__(
        self,
        collapse_whitespace: bool = True,
        conservative_collapse: bool = False,
        remove_comments: bool = True,
        keep_conditional_comments: bool = True,
        remove_attribute_quotes: bool = True,
        keep_quotes_for: tuple[str, ...] = (),
    ) -> None:
        super().__init__(
            remove_comments=remove_comments,
            remove_empty_space=False,
            remove_all_empty_space=False,
            reduce_empty_attributes=False,
            reduce_boolean_attributes=False,
            remove_optional_attribute_quotes=remove_attribute_quotes,
            convert_charrefs=False,
            keep_pre=False,
            pre_tags=PRESERVE_WHITESPACE_TAGS,
            pre_attr="pre",
        )
        self.collapse_whitespace = collapse_whitespace
        self.conservative_collapse = conservative_collapse
        self.remove_comments = remove_comments
        self.keep_conditional_comments = keep_conditional_comments
        self.remove_optional_attribute_quotes = remove_attribute_quotes
        self.keep_quotes_for = tuple(keep_quotes_for)
        self.pre_tags = PRESERVE_WHITESPACE_TAGS
        self.pre_attr = "pre"

    def reset(self) -> None:
        super().reset()
        self._tokens: list[_Token] = []
        self._open_tags: list[tuple[str, bool]] = []

    def minify(self, html: str) -> str:
        """Minify a markup document.

        Args:
            html: Raw markup, possibly a fragment.

        Returns:
            The minified markup.
        """
        ampersand = next(chr(code) for code in _AMPERSAND_STANDINS if chr(code) not in html)

        self.reset()
        self.feed(html.replace("&", ampersand))
        self.close()
        return self._render().replace(ampersand, "&")

    def build_tag(self, tag: str, attrs: list[tuple[str, str | None]], close_tag: bool) -> tuple[str, bool]:
        """Render the current start tag from its source text.

        Args:
            tag: Lowercased tag name.
            attrs: Parsed attributes, unused since names keep their case.
            close_tag: Render the tag as self-closing.

        Returns:
            The rendered tag and whether it carried the ``pre`` attribute.
        """
        raw = self.get_starttag_text() or f"<{tag}>"
        name_match = _TAG_NAME_RE.match(raw)
        body = raw[name_match.end():].rstrip(">").rstrip()
        if body.endswith("/"):
            body = body[:-1]

        has_pre = False
        rendered = [f"<{name_match.group(1)}"]
        unquoted_last = False
        for match in _ATTRIBUTE_RE.finditer(body):
            name, value = match.group(1), match.group(2)
            if name.lower() == self.pre_attr:
                has_pre = True
            elif value is None:
                rendered.append(f" {name}")
                unquoted_last = False
            else:
                value = self._render_value(value)
                rendered.append(f" {name}={value}")
                unquoted_last = not value.startswith(("'", '"'))

        if close_tag:
            # "a=b/>" would read the slash as part of the value
            rendered.append(" />" if unquoted_last else "/>")
        else:
            rendered.append(">")
        return "".join(rendered), has_pre

    # -------------------------------------------------------------------------
    # Parser callbacks
    # -------------------------------------------------------------------------

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        text, has_pre = self.build_tag(tag, attrs, False)
        self._tokens.append(_Token("tag", text, tag not in INLINE_TAGS))
        if tag not in VOID_TAGS:
            name = _TAG_NAME_RE.match(self.get_starttag_text() or f"<{tag}>").group(1)
            self._open_tags.append((name, has_pre or tag in self.pre_tags))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        text, _ = self.build_tag(tag, attrs, True)
        self._tokens.append(_Token("tag", text, tag not in INLINE_TAGS))

    def handle_endtag(self, tag: str) -> None:
        name = tag
        for index in range(len(self._open_tags) - 1, -1, -1):
            if self._open_tags[index][0].lower() == tag:
                name = self._open_tags[index][0]
                del self._open_tags[index:]
                break
        self._tokens.append(_Token("tag", f"</{name}>", tag not in INLINE_TAGS))

    def handle_data(self, data: str) -> None:
        if self._preserving:
            self._tokens.append(_Token("raw", data))
        elif self._tokens and self._tokens[-1].kind == "text":
            self._tokens[-1].text += data
        else:
            self._tokens.append(_Token("text", data))

    def handle_comment(self, data: str) -> None:
        if data.startswith("!"):
            data = data[1:]
        elif self.remove_comments and not (
            self.keep_conditional_comments and _CONDITIONAL_COMMENT_RE.search(data)
        ):
            return
        self._tokens.append(_Token("raw", f"<!--{data}-->"))

    def handle_decl(self, decl: str) -> None:
        self._tokens.append(_Token("raw", f"<!{decl}>", block=True))

    def handle_pi(self, data: str) -> None:
        self._tokens.append(_Token("raw", f"<?{data}>", block=True))

    def unknown_decl(self, data: str) -> None:
        self._tokens.append(_Token("raw", f"<![{data}]>"))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    @property
    def _preserving(self) -> bool:
        return any(preserve for _, preserve in self._open_tags)

    def _render_value(self, value: str) -> str:
        if self.remove_optional_attribute_quotes and value.startswith(("'", '"')):
            inner = value[1:-1]
            if _UNQUOTED_VALUE_RE.fullmatch(inner) and not any(
                keep in inner for keep in self.keep_quotes_for
            ):
                return inner
        return value

    def _render(self) -> str:
        tokens = self._tokens
        output = []
        for index, token in enumerate(tokens):
            text = token.text
            if token.kind == "text" and self.collapse_whitespace:
                previous = tokens[index - 1] if index > 0 else None
                following = tokens[index + 1] if index + 1 < len(tokens) else None
                text = self._collapse(text, previous, following)
            output.append(text)
        return "".join(output)

    def _collapse(self, text: str, previous: _Token | None, following: _Token | None) -> str:
        text = _WHITESPACE_RE.sub(" ", text)
        if self.conservative_collapse:
            return text
        if previous is None or previous.block:
            text = text.lstrip(" ")
        if following is None or following.block:
            text = text.rstrip(" ")
        return text


def minify_html(html: str, **options: bool) -> str:
    """Minify markup with the given minifier options.

    Args:
        html: Raw markup.
        **options: Keyword options accepted by ``HTMLMinifier``.

    Returns:
        The minified markup.

    Raises:
        TypeError: If an option name is not recognized.
    """
    return HTMLMinifier(**options).minify(html)
