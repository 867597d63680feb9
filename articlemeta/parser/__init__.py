"""
HTML parsing package.

Wraps BeautifulSoup behind a read-only document interface used by the
metadata extractors.
"""
from articlemeta.parser.html_parser import (
    HTMLDocument,
    HTMLElement,
    normalize_text,
    parse_html,
)

__all__ = [
    "HTMLDocument",
    "HTMLElement",
    "normalize_text",
    "parse_html",
]
