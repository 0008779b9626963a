"""
Reduce raw HTML markup to clean, flat text ready for a search index.

The passes in clean_content() are order-sensitive: control characters go
first, script/style blocks are removed while their tags are still intact, and
tag boundaries are padded with spaces before the tags themselves are dropped
so that words separated only by markup do not run together.
"""

import html
import re
from functools import lru_cache
from typing import Iterable, Optional, Sequence

from indexable_content.config import STRIP_UNICODE_RANGES, UnicodeRange
from indexable_content.utils.logger import get_logger

logger = get_logger(__name__)

# Printable text never contains these below \x7F (tab, LF and CR are kept)
_RE_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")
_RE_SCRIPT = re.compile(r"<script[^>]*>.*?</script>", flags=re.IGNORECASE | re.DOTALL)
_RE_STYLE = re.compile(r"<style[^>]*>.*?</style>", flags=re.IGNORECASE | re.DOTALL)
_RE_COMMENT = re.compile(r"<!--.*?(?:-->|\Z)", flags=re.DOTALL)
# A tag opens with "<" directly followed by a letter, "/", "!" or "?"; a tag
# still open at the end of the input swallows the rest of it.
_RE_TAG = re.compile(r"<(?=[a-zA-Z/!?])/?([a-zA-Z][\w:-]*)?[^>]*(?:>|\Z)")
_RE_SPECIAL_WHITESPACE = re.compile(r"[\t\n\r]|&nbsp;")
_RE_ANGLE_BRACKETS = re.compile(r"[<>]")


def strip_control_characters(content: Optional[str]) -> str:
    """Replace each control character that breaks indexing with a single space."""
    if not content:
        return ""
    return _RE_CONTROL_CHARS.sub(" ", content)


@lru_cache(maxsize=32)
def _unicode_range_pattern(start: int, end: int) -> "re.Pattern[str]":
    return re.compile("[%s-%s]" % (re.escape(chr(start)), re.escape(chr(end))))


def strip_unicode_range(content: Optional[str], start: int, end: int) -> str:
    """
    Delete every code point from start to end (inclusive).
    Works on str code points, so multi-byte characters are never split.
    An empty range (start > end) leaves the content unchanged.
    """
    if not content:
        return ""
    if start > end:
        return content
    return _unicode_range_pattern(start, end).sub("", content)


def strip_unicode_ranges(
    content: Optional[str],
    ranges: Iterable[UnicodeRange] = STRIP_UNICODE_RANGES,
) -> str:
    """Apply strip_unicode_range for every configured range, in order."""
    if not content:
        return ""
    for start, end in ranges:
        content = strip_unicode_range(content, start, end)
    return content


def remove_scripts_and_styles(content: str) -> str:
    """Drop <script> and <style> blocks; the first closing tag ends a block."""
    content = _RE_SCRIPT.sub("", content)
    return _RE_STYLE.sub("", content)


def space_tag_boundaries(content: str) -> str:
    """Pad every '<' and '>' with a space so stripping tags keeps words apart."""
    return content.replace("<", " <").replace(">", "> ")


def strip_tags(content: Optional[str], allowed_tags: Sequence[str] = ()) -> str:
    """
    Remove HTML comments and every tag whose name is not in allowed_tags.
    Inner text is left in place. Tag names are compared case-insensitively.
    """
    if not content:
        return ""
    allowed = {t.lower() for t in allowed_tags}
    content = _RE_COMMENT.sub("", content)
    if not allowed:
        return _RE_TAG.sub("", content)

    def _keep_allowed(m: "re.Match[str]") -> str:
        name = m.group(1)
        if name and name.lower() in allowed:
            return m.group(0)
        return ""

    return _RE_TAG.sub(_keep_allowed, content)


def clean_content(content: Optional[str]) -> str:
    """
    Strip HTML tags, scripts, styles, control characters, unusable unicode
    ranges and tab, new-line, carriage-return, &nbsp; whitespace characters.
    """
    if not content:
        return ""

    text = strip_control_characters(content)
    text = remove_scripts_and_styles(text)
    # Prevents concatenated words when stripping tags afterwards
    text = space_tag_boundaries(text)
    text = strip_tags(text)
    text = _RE_SPECIAL_WHITESPACE.sub(" ", text)
    text = strip_unicode_ranges(text)
    return text.strip()


def get_indexable_content(content: Optional[str]) -> str:
    """
    Return cleaned, indexable text from HTML markup.

    Runs clean_content(), decodes HTML entities and strips whatever markup the
    decoding exposed. Entities may also decode to control characters or
    private-use code points, so those passes run again at the end.
    The result holds no '<' or '>' and no leading/trailing whitespace.
    """
    if not content:
        return ""

    text = clean_content(content)
    text = html.unescape(text)
    # After entity decoding we might have tags again
    text = strip_tags(text)
    text = _RE_ANGLE_BRACKETS.sub(" ", text)
    text = strip_control_characters(text)
    text = strip_unicode_ranges(text)
    text = text.strip()

    logger.debug("Indexable content: %d -> %d chars", len(content), len(text))
    return text
