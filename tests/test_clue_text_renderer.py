"""Tests for clue text rendering."""

import pytest

from jeopardy_app.core.clue_text_renderer import ClueTextRenderer, renderer


class TestClueTextRenderer:
    def test_plain_text_has_no_paragraph_wrapper(self):
        assert renderer.render_fragment("Hamlet author") == "Hamlet author"

    def test_inline_html_is_kept(self):
        assert renderer.render_fragment("<i>Moby-Dick</i>") == "<i>Moby-Dick</i>"

    def test_escaped_quotes_are_unescaped(self):
        assert renderer.render_fragment("Rock \\'n\\' roll") == "Rock 'n' roll"

    def test_numbers_are_not_turned_into_lists(self):
        assert renderer.render_fragment("1. Cooper") == "1. Cooper"

    def test_blank_text_renders_empty(self):
        assert renderer.render_fragment("   ") == ""

    def test_html_can_be_escaped(self):
        escaping = ClueTextRenderer(enable_html=False)
        assert escaping.render_fragment("<b>bold</b>") == "&lt;b&gt;bold&lt;/b&gt;"

    @pytest.mark.parametrize(
        "text",
        ["M*A*S*H", "__init__", "# of moons", "_The Raven_", "Q*bert & friends"],
    )
    def test_markdown_syntax_is_shown_literally(self, text):
        assert renderer.render_fragment(text) == text.replace("&", "&amp;")

    def test_angle_bracket_is_escaped_not_quoted(self):
        assert renderer.render_fragment("> than 5") == "&gt; than 5"

    def test_italic_tag_inside_literal_text(self):
        assert renderer.render_fragment("*<i>Jaws</i>* star") == "*<i>Jaws</i>* star"
