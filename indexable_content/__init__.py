"""Turn raw HTML into clean indexable text and per-field tag content for a search index."""

from .schemas import IndexableDocument
from .services import (
    HtmlContentExtractor,
    TagFieldExtractor,
    clean_content,
    get_indexable_content,
    get_tag_content,
)

__all__ = [
    "HtmlContentExtractor",
    "IndexableDocument",
    "TagFieldExtractor",
    "clean_content",
    "get_indexable_content",
    "get_tag_content",
]
