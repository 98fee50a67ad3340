"""Unit tests for the JavaScript literal scanner."""

import pytest

from minify_html_literals.interfaces.literals import LiteralParseError
from minify_html_literals.strategies.scanners import JavaScriptLiteralScanner, parse_literals


class TestJavaScriptLiteralScanner:
    """Test suite for parse_literals()."""

    # =========================================================================
    # Template Structure Tests
    # =========================================================================

    def test_untagged_template(self):
        """Test a template without tag or expressions."""
        templates = parse_literals("const a = `hello`;")

        assert len(templates) == 1
        template = templates[0]
        assert template.tag is None
        assert [part.text for part in template.parts] == ["hello"]
        assert (template.start, template.end) == (10, 17)

    def test_part_offsets(self):
        """Test that part offsets address the literal text in the source."""
        source = "html`<p>${name}</p>`"
        template = parse_literals(source)[0]

        assert [part.text for part in template.parts] == ["<p>", "</p>"]
        for part in template.parts:
            assert source[part.start:part.end] == part.text
        assert template.expression_count == 1

    def test_empty_parts_around_expressions(self):
        """Test that adjacent expressions yield empty parts."""
        template = parse_literals("html`${a}${b}`")[0]

        assert [part.text for part in template.parts] == ["", "", ""]
        assert template.parts[1].start == template.parts[1].end

    def test_nested_templates_follow_outer_template(self, source):
        """Test that nested templates are found and ordered after their parent."""
        templates = parse_literals(source)

        assert [template.tag for template in templates] == ["html", "getHTML()", None, "css"]
        outer, inner = templates[0], templates[1]
        assert outer.start < inner.start < inner.end < outer.end
        assert len(outer.parts) == 3
        assert len(inner.parts) == 2

    def test_expression_with_object_literal(self):
        """Test that braces inside an expression do not end it early."""
        template = parse_literals("html`<p>${ {a: 1}.a }</p>`")[0]

        assert [part.text for part in template.parts] == ["<p>", "</p>"]

    def test_escaped_characters_stay_raw(self):
        """Test that escapes are kept as written and do not open expressions."""
        template = parse_literals(r"html`a \` b \${c} d`")[0]

        assert [part.text for part in template.parts] == [r"a \` b \${c} d"]

    # =========================================================================
    # Tag Detection Tests
    # =========================================================================

    @pytest.mark.parametrize(
        ("source", "tag"),
        [
            ("html`x`", "html"),
            ("return html `x`", "html"),
            ("this.html`x`", "this.html"),
            ("getHTML()`x`", "getHTML()"),
            ("templateHtml(a, b)`x`", "templateHtml(a, b)"),
            ("return `x`", None),
            ("const a = `x`", None),
            ("fn(`x`)", None),
        ],
    )
    def test_tag(self, source, tag):
        """Test detection of the tag expression before a backtick."""
        assert parse_literals(source)[0].tag == tag

    # =========================================================================
    # Skipped Token Tests
    # =========================================================================

    def test_backticks_in_strings_are_ignored(self):
        """Test that backticks inside quoted strings are not templates."""
        assert parse_literals("const a = 'x`y'; const b = \"`\";") == []

    def test_backticks_in_comments_are_ignored(self):
        """Test that backticks inside comments are not templates."""
        source = "// html`no`\n/* css`no` */\nconst a = html`yes`;"

        templates = parse_literals(source)

        assert [part.text for part in templates[0].parts] == ["yes"]
        assert len(templates) == 1

    def test_regex_literals_are_skipped(self):
        """Test that a backtick inside a regular expression is not a template."""
        source = "const re = /[`/]+/g; const t = html`<b>${x}</b>`;"

        templates = parse_literals(source)

        assert len(templates) == 1
        assert templates[0].tag == "html"

    def test_division_is_not_a_regex(self):
        """Test that division after an operand keeps scanning normally."""
        source = "const half = total / 2; const t = html`<i>${half / 2}</i>`;"

        templates = parse_literals(source)

        assert [part.text for part in templates[0].parts] == ["<i>", "</i>"]

    @pytest.mark.parametrize(
        "source",
        [
            "let n = i++ / 2;\nconst t = html`<p> x </p>`;",
            "let n = (a + b) / 2 / c; const t = html`<p> x </p>`;",
            "const r = obj.total / 2; const t = html`<p> x </p>`;",
        ],
    )
    def test_division_after_operands(self, source):
        """Test that a slash after postfix, parenthesized and member operands divides."""
        templates = parse_literals(source)

        assert len(templates) == 1
        assert templates[0].tag == "html"
        assert [part.text for part in templates[0].parts] == ["<p> x </p>"]

    def test_typescript_syntax(self):
        """Test that type annotations and generics parse."""
        source = "const t: TemplateResult = html<Props>`<p>${(x as number)}</p>`;"

        templates = parse_literals(source)

        assert [part.text for part in templates[0].parts] == ["<p>", "</p>"]

    def test_offsets_are_character_offsets(self):
        """Test that offsets count characters when the source has multi-byte text."""
        source = "const s = 'héllo ✓';\nconst t = html`<p>${x} ✓</p>`;"

        template = parse_literals(source)[0]

        assert [part.text for part in template.parts] == ["<p>", " ✓</p>"]
        for part in template.parts:
            assert source[part.start:part.end] == part.text
        assert source[template.start] == "`"
        assert source[template.end - 1] == "`"

    def test_template_inside_string_inside_expression(self):
        """Test strings inside expressions containing braces and backticks."""
        template = parse_literals("html`<p>${'}`'}</p>`")[0]

        assert [part.text for part in template.parts] == ["<p>", "</p>"]

    # =========================================================================
    # Error Tests
    # =========================================================================

    @pytest.mark.parametrize(
        "source",
        [
            "html`<p>",
            "html`<p>${x</p>`",
            "const a = 'oops\n';",
            "/* open",
            "const re = /abc",
        ],
    )
    def test_unterminated_tokens_raise(self, source):
        """Test that unterminated tokens raise LiteralParseError."""
        with pytest.raises(LiteralParseError):
            parse_literals(source)

    def test_error_position(self):
        """Test that errors report a 1-based line and column on the failing line."""
        source = "const a = 1;\n  html`open"

        with pytest.raises(LiteralParseError) as exc_info:
            JavaScriptLiteralScanner(source).scan()

        error = exc_info.value
        assert error.line == 2
        assert error.offset > source.index("\n")
        assert error.column == error.offset - source.index("\n")
