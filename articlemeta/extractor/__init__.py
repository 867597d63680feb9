"""
Extractor package for articlemeta.

The main components are:
- Meta tag scanner for descriptions, titles and the author byline
- Title resolver for stripping site names and breadcrumbs from page titles
- Metadata extractor combining both into an ArticleMetadata record
"""
from articlemeta.extractor.meta_tags import (
    MetaTagScan,
    scan_meta_tags,
)
from articlemeta.extractor.metadata import (
    extract_article_metadata,
    extract_metadata_from_html,
)
from articlemeta.extractor.title import (
    acquire_raw_title,
    resolve_title,
    word_count,
)

__all__ = [
    "MetaTagScan",
    "scan_meta_tags",
    "extract_article_metadata",
    "extract_metadata_from_html",
    "acquire_raw_title",
    "resolve_title",
    "word_count",
]
