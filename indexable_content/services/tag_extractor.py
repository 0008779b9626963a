"""Extract text of headings, inline emphasis and links, grouped by search field."""

import re
from typing import Dict, Iterable, Mapping, Optional

from indexable_content.config import AUTO_LINK_PREFIXES, TAG_FIELD_MAPPING
from indexable_content.services.sanitizer import (
    remove_scripts_and_styles,
    space_tag_boundaries,
    strip_control_characters,
    strip_tags,
)
from indexable_content.utils.logger import get_logger

logger = get_logger(__name__)


class TagFieldExtractor:
    """
    Scans markup for the tags in tag_field_mapping and accumulates their inner
    text per field. Patterns are compiled once; instances hold no per-call
    state and can be shared.
    """

    def __init__(
        self,
        tag_field_mapping: Mapping[str, str] = TAG_FIELD_MAPPING,
        auto_link_prefixes: Iterable[str] = AUTO_LINK_PREFIXES,
    ) -> None:
        self._mapping = {tag.lower(): field for tag, field in tag_field_mapping.items()}
        self._tags = tuple(self._mapping)
        # Longest names first so "strong" is tried before "b" and friends
        names = "|".join(re.escape(t) for t in sorted(self._tags, key=len, reverse=True))
        self._tag_pattern = (
            re.compile(rf"<({names})\b[^>]*>(.*?)</\1\s*>", flags=re.IGNORECASE | re.DOTALL)
            if names
            else None
        )
        prefixes = "|".join(re.escape(p) for p in auto_link_prefixes)
        self._auto_link_pattern = (
            re.compile(rf"(?:{prefixes})[a-zA-Z0-9]+", flags=re.IGNORECASE)
            if prefixes
            else None
        )

    @property
    def tag_field_mapping(self) -> Dict[str, str]:
        return dict(self._mapping)

    def is_auto_link(self, text: str) -> bool:
        """True if the link text looks generated from a bare URL (scheme or www. prefix)."""
        if not text or self._auto_link_pattern is None:
            return False
        return bool(self._auto_link_pattern.search(text))

    def partially_clean(self, content: Optional[str]) -> str:
        """
        Same first passes as the full clean, but only tags outside the
        mapping are stripped so the mapped ones can still be matched.
        """
        if not content:
            return ""
        text = strip_control_characters(content)
        text = remove_scripts_and_styles(text)
        text = space_tag_boundaries(text)
        return strip_tags(text, allowed_tags=self._tags)

    def get_tag_content(self, content: Optional[str]) -> Dict[str, str]:
        """
        Return a mapping of field name -> text found in the mapped tags.
        Fields without a contributing match are absent. Auto-generated link
        text is never added to the link field.
        """
        result: Dict[str, str] = {}
        text = self.partially_clean(content)
        if not text or self._tag_pattern is None:
            return result

        for m in self._tag_pattern.finditer(text):
            tag = m.group(1).lower()
            # Nested mapped tags stay inside the capture; index only their text
            inner = " ".join(strip_tags(m.group(2)).split())
            if not inner:
                continue
            # We don't want to index links auto-generated by the url filter
            if tag == "a" and self.is_auto_link(inner):
                continue
            field = self._mapping[tag]
            result[field] = result.get(field, "") + " " + inner

        logger.debug("Tag content fields: %s", sorted(result))
        return result


_default_extractor = TagFieldExtractor()


def get_tag_content(content: Optional[str]) -> Dict[str, str]:
    """Extract tag content with the default tag mapping and auto-link prefixes."""
    return _default_extractor.get_tag_content(content)


def is_auto_link(text: str) -> bool:
    return _default_extractor.is_auto_link(text)
