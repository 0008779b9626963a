"""Search document record built from one page's markup."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class IndexableDocument(BaseModel):
    """Cleaned body text plus the per-field tag text used for relevance boosting."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    content: str = Field(default="", description="Flat, whitespace-normalized body text")
    tags_h1: Optional[str] = Field(default=None, alias="tagsH1", description="Text of <h1> tags")
    tags_h2h3: Optional[str] = Field(default=None, alias="tagsH2H3", description="Text of <h2>/<h3> tags")
    tags_h4h5h6: Optional[str] = Field(
        default=None, alias="tagsH4H5H6", description="Text of <h4>/<h5>/<h6> tags"
    )
    tags_inline: Optional[str] = Field(
        default=None, alias="tagsInline", description="Text of <u>, <b>, <strong>, <i>, <em> tags"
    )
    tags_a: Optional[str] = Field(
        default=None, alias="tagsA", description="Human-authored link text (auto-links excluded)"
    )

    def to_fields(self) -> dict:
        """Backend field names -> values, omitting tag fields with no text."""
        return self.model_dump(by_alias=True, exclude_none=True)
