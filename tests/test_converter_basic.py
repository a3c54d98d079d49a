"""
Basic converter tests - front matter, summary, intro and comment/code pairs

Tests the transitions of the line scanner on well-formed documents and
pins the exact Markdown produced for a minimal post.
"""

import pytest

from hugodown.lib.converter import Converter, convert, shortcode_open, shortcode_close
from hugodown.models.markers import ConversionState


def document(*lines: str) -> str:
    return "\n".join(lines)


HEADER = (
    "//go:build ignore",
    "/*",
    "Internal notes are dropped.",
    "+++",
    'title = "Demo"',
    "+++",
    "",
    "Summary text.",
    "",
    "<!--more-->",
    "",
    "Intro text.",
    "*/",
    "",
)


class TestMinimalDocument:
    """Test the complete output of a minimal post"""

    def test_minimal_document_exact_output(self):
        """Front matter, divider, one comment/code pair, input ends in code"""
        source = document(*HEADER, "// Package comment", "package main")

        expected = (
            "+++\n"
            'title = "Demo"\n'
            "+++\n"
            "{{< div gotohugo >}}\n"
            "{{< div summary doc >}}\n"
            "\n"
            "Summary text.\n"
            "\n"
            "{{< divend >}} <!--summary doc-->\n"
            "\n"
            "<!--more-->\n"
            "\n"
            "{{< announcement >}}\n"
            "{{< div intro doc >}}\n"
            "\n"
            "Intro text.\n"
            "{{< divend >}} <!--intro doc-->\n"
            "\n"
            "{{< div source >}}\n"
            "{{< div ccpair >}}\n"
            "{{< div comment >}}\n"
            "Package comment\n"
            "{{< divend >}} <!--comment-->\n"
            "{{< div code >}}\n"
            "\n"
            "```go\n"
            "package main\n"
            "\n"
            "```\n"
            "{{< divend >}} <!--code-->\n"
            "{{< divend >}} <!--ccpair-->\n"
            "{{< divend >}} <!--source-->\n"
            "{{< divend >}} <!--gotohugo-->\n"
        )
        assert convert(source, "demo") == expected

    def test_content_before_front_matter_dropped(self):
        md = convert(document(*HEADER, "// c", "x"), "demo")
        assert "go:build" not in md
        assert "Internal notes" not in md
        assert md.startswith("+++\n")

    def test_yaml_front_matter(self):
        md = convert(document("---", "title: Demo", "---", "Summary"), "demo")
        assert md.startswith("---\ntitle: Demo\n---\n{{< div gotohugo >}}\n")

    def test_crlf_input(self):
        source = document(*HEADER, "// c", "x").replace("\n", "\r\n")
        assert "\r" not in convert(source, "demo")
        assert convert(source, "demo") == convert(source.replace("\r", ""), "demo")


class TestCommentCodePairs:
    """Test comment and code sections"""

    def test_comment_delimiters_stripped(self):
        md = convert(document(*HEADER, "// First line", "//Second line", "func f() {}"), "demo")
        assert "First line\nSecond line\n" in md
        assert "// First" not in md

    def test_code_verbatim_in_fence(self):
        md = convert(document(*HEADER, "// c", "func f() {", "\treturn", "}"), "demo")
        assert "```go\nfunc f() {\n\treturn\n}\n\n```\n" in md

    def test_comment_after_code_starts_new_pair(self):
        md = convert(document(*HEADER, "// one", "a()", "// two", "b()"), "demo")
        assert (
            "a()\n"
            "```\n"
            "\n"
            "{{< divend >}} <!--code-->\n"
            "{{< divend >}} <!--ccpair-->\n"
            "{{< div ccpair >}}\n"
            "{{< div comment >}}\n"
            "two\n"
        ) in md
        assert md.count(shortcode_open("source")) == 1
        assert md.count(shortcode_open("ccpair")) == 2

    def test_fence_language(self):
        source = document(*HEADER, "# not a comment", "// c", "x = 1")
        md = Converter("demo", language="python").convert(source)
        assert "```python\nx = 1\n" in md

    def test_block_comment_after_code_is_doc(self):
        source = document(*HEADER, "// c", "x()", "/* Heading", "", "Prose.", "*/", "")
        md = convert(source, "demo")
        assert (
            "x()\n"
            "```\n"
            "\n"
            "{{< divend >}} <!--code-->\n"
            "{{< divend >}} <!--ccpair-->\n"
            "{{< divend >}} <!--source-->\n"
            "{{< div doc >}}\n"
            "Heading\n"
            "\n"
            "Prose.\n"
            "{{< divend >}} <!--doc-->\n"
        ) in md

    def test_comment_after_doc_opens_new_source(self):
        source = document(*HEADER, "// a", "x()", "/*", "Prose", "*/", "// b", "y()")
        md = convert(source, "demo")
        assert md.count(shortcode_open("source")) == 2
        assert md.count(shortcode_close("source")) == 2
        doc_end = md.index(shortcode_close("doc"))
        assert md.index(shortcode_open("source"), doc_end) > doc_end


class TestStates:
    """Test the scanner state after typical inputs"""

    @pytest.mark.parametrize("lines, state", [
        ((), ConversionState.BEFORE_METADATA),
        (("+++",), ConversionState.METADATA),
        (("+++", "+++"), ConversionState.SUMMARY),
        (("+++", "+++", "<!--more-->"), ConversionState.INTRO),
        (("+++", "+++", "<!--more-->", "*/"), ConversionState.NEUTRAL),
        (("+++", "+++", "<!--more-->", "*/", "// c"), ConversionState.COMMENT),
        (("+++", "+++", "<!--more-->", "*/", "// c", "x"), ConversionState.CODE),
        (("+++", "+++", "<!--more-->", "*/", "// c", "x", "/*"), ConversionState.PROSE),
        (("+++", "+++", "<!--more-->", "*/", "// c", "x", "/*", "*/"), ConversionState.NEUTRAL),
    ])
    def test_final_state(self, lines, state):
        converter = Converter("demo")
        converter.convert(document("text", *lines))
        assert converter.state == state

    def test_converter_reusable(self):
        """Converting twice yields the same result"""
        converter = Converter("demo")
        source = document(*HEADER, "// c", "x")
        assert converter.convert(source) == converter.convert(source)
        assert converter.markers == []
