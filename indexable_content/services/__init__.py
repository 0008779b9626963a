"""Service exports."""

from .content_extractor import HtmlContentExtractor
from .sanitizer import (
    clean_content,
    get_indexable_content,
    strip_control_characters,
    strip_tags,
    strip_unicode_range,
    strip_unicode_ranges,
)
from .tag_extractor import TagFieldExtractor, get_tag_content, is_auto_link

__all__ = [
    "HtmlContentExtractor",
    "TagFieldExtractor",
    "get_indexable_content",
    "clean_content",
    "strip_control_characters",
    "strip_unicode_ranges",
    "strip_unicode_range",
    "strip_tags",
    "get_tag_content",
    "is_auto_link",
]
