"""Conversion of HTML markup to normalized plain text for extraction."""

import html
import re

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_INVISIBLE_RE = re.compile(
    r"<(script|style|noscript|template)\b[^>]*>.*?</\1\s*>", re.DOTALL | re.IGNORECASE
)
_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_BLOCK_TAG_RE = re.compile(
    r"</?(p|div|li|ul|ol|tr|td|th|table|h[1-6]|section|article|header|footer|"
    r"address|blockquote|nav|aside|main|pre|dd|dt|dl|form|hr)\b[^>]*>",
    re.IGNORECASE,
)
_TAG_RE = re.compile(r"<[^>]+>")
_LINE_BREAKS_RE = re.compile(r"(\r?\n)+")
_HORIZONTAL_SPACE_RE = re.compile(r"[ \t]+")


def html_to_text(markup: str) -> str:
    """Strip HTML and collapse line breaks into single spaces.

    Performs the following transformations:
    1. Drop comments and the bodies of script/style/noscript/template elements
    2. Convert <br> and block-level tags to line breaks
    3. Strip remaining (inline) tags
    4. Decode HTML entities (&amp; → &, etc.)
    5. Replace every run of line breaks with one space and collapse spaces

    Args:
        markup: Raw HTML page source

    Returns:
        Single-line plain text
    """
    if not markup:
        return ""

    text = _COMMENT_RE.sub(" ", markup)
    text = _INVISIBLE_RE.sub(" ", text)

    text = _BREAK_RE.sub("\n", text)
    text = _BLOCK_TAG_RE.sub("\n", text)

    # Inline tags vanish so that words split by <b>, <span>, ... stay whole
    text = _TAG_RE.sub("", text)

    text = html.unescape(text)

    text = _LINE_BREAKS_RE.sub(" ", text)
    text = _HORIZONTAL_SPACE_RE.sub(" ", text)

    return text.strip()
