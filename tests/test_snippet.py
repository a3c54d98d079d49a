"""
Hype snippet loader tests

Tests extraction of the marked region from exported animation HTML and
the visible warning for missing exports.
"""

from hugodown.lib.snippet import snippet_load, snippetLines_extract, SNIPPET_START, SNIPPET_END


EXPORT_HTML = "\n".join([
    "<!DOCTYPE html>",
    "<html>",
    "<!-- end copy -->",
    "<body>",
    "\t<!-- copy these lines to your document: -->",
    '\t<div id="demo_hype_container" style="margin:auto">',
    '\t\t<script type="text/javascript" charset="utf-8" '
    'src="demo.hyperesources/demo_hype_generated_script.js?71837"></script>',
    "\t</div>",
    "\t<!-- end copy -->",
    "<!-- copy these lines to your document: -->",
    "<p>second region</p>",
    "<!-- end copy -->",
    "</body>",
    "</html>",
])


class TestSnippetExtraction:
    """Test marker handling"""

    def test_first_region_only(self):
        lines = snippetLines_extract(EXPORT_HTML)
        assert len(lines) == 3
        assert "second region" not in "".join(lines)

    def test_end_marker_before_start_ignored(self):
        html = "\n".join([SNIPPET_END, SNIPPET_START, "kept", SNIPPET_END])
        assert snippetLines_extract(html) == ["kept"]

    def test_no_markers(self):
        assert snippetLines_extract("<html></html>") == []

    def test_missing_end_marker_keeps_rest(self):
        html = "\n".join([SNIPPET_START, "a", "b"])
        assert snippetLines_extract(html) == ["a", "b"]


class TestSnippetLoad:
    """Test loading snippets from disk"""

    def test_snippet_rewritten_and_trimmed(self, tmp_path):
        export = tmp_path / "demo.html"
        export.write_text(EXPORT_HTML, encoding="utf-8")

        snippet = snippet_load(export, "post", "media")

        assert snippet == (
            '<div id="demo_hype_container" style="margin:auto">\n'
            '<script type="text/javascript" charset="utf-8" '
            'src="/media/post/demo.hyperesources/demo_hype_generated_script.js?71837"></script>\n'
            "</div>\n"
            "\n"
        )

    def test_crlf_line_endings(self, tmp_path):
        export = tmp_path / "demo.html"
        export.write_bytes(EXPORT_HTML.replace("\n", "\r\n").encode("utf-8"))

        snippet = snippet_load(export, "post")
        assert "\r" not in snippet
        assert 'src="/post/demo.hyperesources/' in snippet

    def test_empty_region(self, tmp_path):
        export = tmp_path / "empty.html"
        export.write_text("<html></html>", encoding="utf-8")
        assert snippet_load(export, "post") == "\n"

    def test_missing_file_returns_warning(self, tmp_path):
        missing = tmp_path / "post" / "nope.html"

        snippet = snippet_load(missing, "post", "media")

        assert "No Hype file found at" in snippet
        assert str(missing) in snippet
        assert snippet.endswith("\n")
