"""Schema exports."""

from .indexable_document import IndexableDocument

__all__ = ["IndexableDocument"]
