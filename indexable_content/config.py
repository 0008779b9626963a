"""Configuration loaded from environment variables, plus the fixed cleaning tables."""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

LOG_LEVEL: str = os.getenv("INDEXABLE_CONTENT_LOG_LEVEL", "INFO").strip().upper()
if LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
    LOG_LEVEL = "INFO"


class UnicodeRange(NamedTuple):
    """Inclusive code point range deleted wholesale from indexed text."""

    start: int
    end: int


# Code points that render as stray glyphs (PDF bullets etc.) when the
# displaying font lacks them. Applied in this order.
STRIP_UNICODE_RANGES: Tuple[UnicodeRange, ...] = (
    UnicodeRange(0xFFFD, 0xFFFD),  # Replacement Character
    UnicodeRange(0xE000, 0xF8FF),  # Private Use Area (Plane 0)
    UnicodeRange(0xF0000, 0xFFFFF),  # Supplementary Private Use Area (Plane 15)
    UnicodeRange(0x100000, 0x10FFFF),  # Supplementary Private Use Area (Plane 16)
)

# HTML tag -> search document field. Several tags may share a field.
TAG_FIELD_MAPPING: Mapping[str, str] = MappingProxyType({
    "h1": "tagsH1",
    "h2": "tagsH2H3",
    "h3": "tagsH2H3",
    "h4": "tagsH4H5H6",
    "h5": "tagsH4H5H6",
    "h6": "tagsH4H5H6",
    "u": "tagsInline",
    "b": "tagsInline",
    "strong": "tagsInline",
    "i": "tagsInline",
    "em": "tagsInline",
    "a": "tagsA",
})

# Link text starting with one of these (followed by an alphanumeric) was most
# likely generated from a bare URL and is not indexed into tagsA.
DEFAULT_AUTO_LINK_PREFIXES: Tuple[str, ...] = (
    "http://",
    "https://",
    "ftp://",
    "mailto:",
    "smb://",
    "afp://",
    "file://",
    "gopher://",
    "news://",
    "ssl://",
    "sslv2://",
    "sslv3://",
    "tls://",
    "tcp://",
    "udp://",
    "www.",
)


def _parse_prefix_list(raw: str) -> Tuple[str, ...]:
    """Split a comma-separated env value, dropping blanks and duplicates."""
    parts = [p.strip() for p in (raw or "").split(",")]
    return tuple(dict.fromkeys(p for p in parts if p))


AUTO_LINK_EXTRA_PREFIXES: Tuple[str, ...] = _parse_prefix_list(
    os.getenv("INDEXABLE_CONTENT_AUTO_LINK_PREFIXES", "")
)

AUTO_LINK_PREFIXES: Tuple[str, ...] = DEFAULT_AUTO_LINK_PREFIXES + tuple(
    p for p in AUTO_LINK_EXTRA_PREFIXES if p not in DEFAULT_AUTO_LINK_PREFIXES
)
