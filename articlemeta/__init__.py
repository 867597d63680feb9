"""
articlemeta

Resolves canonical article metadata (title, byline, excerpt, charset) from
parsed HTML documents.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from articlemeta.config import Settings, TitleHeuristics, load_settings
from articlemeta.extractor import (
    MetaTagScan,
    acquire_raw_title,
    extract_article_metadata,
    extract_metadata_from_html,
    resolve_title,
    scan_meta_tags,
    word_count,
)
from articlemeta.log import configure_logging
from articlemeta.models import ArticleMetadata
from articlemeta.parser import HTMLDocument, HTMLElement, parse_html

__all__ = [
    "ArticleMetadata",
    "HTMLDocument",
    "HTMLElement",
    "MetaTagScan",
    "Settings",
    "TitleHeuristics",
    "acquire_raw_title",
    "configure_logging",
    "extract_article_metadata",
    "extract_metadata_from_html",
    "load_settings",
    "parse_html",
    "resolve_title",
    "scan_meta_tags",
    "word_count",
]
