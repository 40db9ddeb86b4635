"""Unit tests for HTML to text conversion."""

import pytest

from postal_extract.fetch import html_to_text


class TestHtmlToText:
    """Tests for html_to_text()."""

    def test_strips_tags(self):
        """Test inline and block tags are removed."""
        markup = "<div><p>Visit <b>our</b> office</p></div>"

        assert html_to_text(markup) == "Visit our office"

    def test_inline_tags_do_not_split_words(self):
        """Test a word broken up by inline markup stays whole."""
        assert html_to_text("Spring<span>field</span>") == "Springfield"

    def test_converts_entities(self):
        """Test HTML entities are decoded."""
        markup = "<p>Smith &amp; Sons&nbsp;Hardware &lt;since 1901&gt;</p>"

        assert html_to_text(markup) == "Smith & Sons\xa0Hardware <since 1901>"

    def test_br_tags_become_spaces(self):
        """Test line breaks separate address lines with one space."""
        markup = "123 Main Street<br>Springfield, Illinois<br/>62704<BR />USA"

        assert html_to_text(markup) == "123 Main Street Springfield, Illinois 62704 USA"

    def test_newline_runs_collapse(self):
        """Test raw CR/LF runs are replaced by a single space."""
        markup = "first line\r\n\r\n\nsecond line\n\tthird"

        assert html_to_text(markup) == "first line second line third"

    def test_block_elements_separate_words(self):
        """Test adjacent block elements never glue words together."""
        markup = "<ul><li>Street</li><li>Avenue</li></ul><h2>Contact</h2>"

        assert html_to_text(markup) == "Street Avenue Contact"

    @pytest.mark.parametrize("tag", ["script", "style", "noscript", "template"])
    def test_invisible_blocks_removed(self, tag):
        """Test non-rendered element bodies are dropped entirely."""
        markup = f"<p>before</p><{tag} type='x'>1 Hidden Street, Illinois 62704</{tag}><p>after</p>"

        assert html_to_text(markup) == "before after"

    def test_comments_removed(self):
        """Test comment contents never reach the text."""
        markup = "<p>Hello</p><!-- 1 Old Street,\nSpringfield, Illinois 62704 --><p>world</p>"

        assert html_to_text(markup) == "Hello world"

    @pytest.mark.parametrize("markup", ["", "   ", "<div></div>", "<br><br>"])
    def test_empty_input(self, markup):
        """Test markup without text yields an empty string."""
        assert html_to_text(markup) == ""
