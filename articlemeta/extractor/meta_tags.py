"""
Meta tag scanning for article metadata.

Walks every <meta> element of a document once and classifies it under the
three naming conventions article pages use for titles and descriptions:

- plain ``name`` attributes (``description``, ``title``)
- Twitter Cards ``name`` attributes (``twitter:description``, ``twitter:title``)
- Open Graph ``property`` attributes (``og:description``, ``og:title``)

Author tags (``name="author"`` or ``property="author"``) are captured
separately as the byline.
"""
import re
from functools import reduce
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

import structlog

from articlemeta.parser.html_parser import HTMLDocument, HTMLElement

# Set up structured logger
logger = structlog.get_logger()

# "description"/"title", optionally prefixed with "twitter:", in the name attribute
NAME_PATTERN = re.compile(
    r"^\s*((twitter)\s*:\s*)?(description|title)\s*$",
    re.IGNORECASE | re.ASCII,
)

# Open Graph description/title in the property attribute
PROPERTY_PATTERN = re.compile(
    r"^\s*og\s*:\s*(description|title)\s*$",
    re.IGNORECASE | re.ASCII,
)

WHITESPACE = re.compile(r"\s", re.ASCII)


class MetaTagScan(NamedTuple):
    """Result of scanning a document's meta tags."""
    byline: Optional[str] = None
    values: Mapping[str, str] = MappingProxyType({})

    def get(self, key: str) -> Optional[str]:
        """Get the value stored under a normalized key."""
        return self.values.get(key)


def normalize_key(name: str) -> str:
    """Lowercase a meta name/property and strip all whitespace from it."""
    return WHITESPACE.sub("", name.lower())


def clean_content(content: str) -> str:
    """Trim meta content and collapse double spaces."""
    return content.strip().replace("  ", " ")


def classify_meta(element: HTMLElement) -> Optional[str]:
    """
    Get the attribute value a meta element is keyed under.

    Args:
        element: A <meta> element

    Returns:
        Optional[str]: The matching name or property attribute, or None if
            the element carries no title/description metadata
    """
    name = element.get("name")
    if NAME_PATTERN.search(name):
        return name

    prop = element.get("property")
    if PROPERTY_PATTERN.search(prop):
        return prop

    return None


def _fold_meta(scan: MetaTagScan, element: HTMLElement) -> MetaTagScan:
    """Fold one meta element into the scan; later writes replace earlier ones."""
    if element.get("name") == "author" or element.get("property") == "author":
        return scan._replace(byline=element.get("content"))

    matched = classify_meta(element)
    if matched is None:
        return scan

    content = element.get("content")
    if not content.strip():
        return scan

    values = dict(scan.values)
    values[normalize_key(matched)] = clean_content(content)
    return scan._replace(values=MappingProxyType(values))


def scan_meta_tags(document: HTMLDocument) -> MetaTagScan:
    """
    Scan all meta tags of a document in document order.

    Args:
        document: Parsed HTML document

    Returns:
        MetaTagScan: The byline (if any author tag was found) and the
            normalized key to content mapping
    """
    scan = reduce(_fold_meta, document.find_all("meta"), MetaTagScan())
    logger.debug(
        "Scanned meta tags",
        keys=sorted(scan.values),
        has_byline=scan.byline is not None,
    )
    return scan
