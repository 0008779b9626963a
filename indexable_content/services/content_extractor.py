"""Per-document facade: clean, indexable content and tag fields from one page's HTML."""

from typing import Dict, Optional

from indexable_content.schemas.indexable_document import IndexableDocument
from indexable_content.services.sanitizer import get_indexable_content
from indexable_content.services.tag_extractor import TagFieldExtractor, get_tag_content
from indexable_content.utils.logger import get_logger

logger = get_logger(__name__)


class HtmlContentExtractor:
    """
    Holds the raw markup of a single page. The markup is never modified;
    each call derives a fresh result from it.
    """

    def __init__(self, content: Optional[str], tag_extractor: Optional[TagFieldExtractor] = None) -> None:
        self._content = content or ""
        self._tag_extractor = tag_extractor

    @property
    def content(self) -> str:
        return self._content

    def get_indexable_content(self) -> str:
        """Cleaned text, free of markup and control characters, ready for indexing."""
        return get_indexable_content(self._content)

    def get_tag_content(self) -> Dict[str, str]:
        """Field name -> text found in headings, inline emphasis and links."""
        if self._tag_extractor is not None:
            return self._tag_extractor.get_tag_content(self._content)
        return get_tag_content(self._content)

    def to_document(self) -> IndexableDocument:
        """Both artifacts assembled into one search document record."""
        fields = self.get_tag_content()
        doc = IndexableDocument(content=self.get_indexable_content(), **fields)
        logger.debug(
            "Built document: content=%d chars, fields=%s",
            len(doc.content),
            sorted(fields),
        )
        return doc
