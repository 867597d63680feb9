"""
Metadata extraction module for articlemeta.

This module combines the meta tag scanner and the title resolver into a
single ArticleMetadata record, falling back between the plain, Open Graph
and Twitter Cards conventions where the preferred source is missing.
"""
from typing import Optional, Union

import structlog

from articlemeta.config import Settings
from articlemeta.extractor.meta_tags import MetaTagScan, scan_meta_tags
from articlemeta.extractor.title import resolve_title
from articlemeta.models.metadata import ArticleMetadata
from articlemeta.parser.html_parser import HTMLDocument, parse_html

# Set up structured logger
logger = structlog.get_logger()

# Meta keys in order of preference
EXCERPT_KEYS = ("description", "og:description", "twitter:description")
TITLE_KEYS = ("og:title", "twitter:title")


def _first_value(scan: MetaTagScan, keys) -> Optional[str]:
    for key in keys:
        value = scan.get(key)
        if value is not None:
            return value
    return None


def extract_article_metadata(
    document: HTMLDocument,
    settings: Optional[Settings] = None,
) -> ArticleMetadata:
    """
    Extract article metadata from a parsed document.

    Args:
        document: Parsed HTML document; it is not modified
        settings: Optional settings carrying the title heuristics

    Returns:
        ArticleMetadata: Title, byline, excerpt and charset of the document
    """
    heuristics = settings.title if settings else None

    scan = scan_meta_tags(document)

    title = resolve_title(document, heuristics)
    if not title.strip():
        title = _first_value(scan, TITLE_KEYS) or ""

    metadata = ArticleMetadata(
        title=title,
        byline=scan.byline,
        excerpt=_first_value(scan, EXCERPT_KEYS),
        charset=document.charset,
    )

    logger.debug(
        "Extracted article metadata",
        title=metadata.title,
        has_byline=metadata.byline is not None,
        has_excerpt=metadata.excerpt is not None,
        charset=metadata.charset,
    )
    return metadata


def extract_metadata_from_html(
    content: Union[str, bytes],
    encoding: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> ArticleMetadata:
    """
    Parse HTML content and extract its article metadata.

    Args:
        content: HTML content as string or bytes
        encoding: Optional encoding for byte content
        settings: Optional settings carrying the title heuristics

    Returns:
        ArticleMetadata: Extracted metadata
    """
    return extract_article_metadata(parse_html(content, encoding=encoding), settings)
