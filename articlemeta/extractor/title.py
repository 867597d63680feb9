"""
Title resolution for article metadata.

Page titles usually carry more than the article title: site names,
section breadcrumbs and taglines joined by separators or colons. The
resolver strips those in a fixed order of heuristics:

1. Split on " | ", " - ", " / ", " > " or " » " and drop the trailing
   segment, or the leading one if that leaves too little.
2. Otherwise split on a colon, unless a heading repeats the full title.
3. Otherwise replace titles that are far too short or too long with the
   page's only <h1>.

If the cleaned title ends up with only a handful of words it is treated as
over-truncated and the original title is returned, except when exactly one
segment was removed from a breadcrumb-style title.
"""
import re
from typing import Optional

import structlog

from articlemeta.config import TitleHeuristics
from articlemeta.parser.html_parser import HTMLDocument

# Set up structured logger
logger = structlog.get_logger()

DEFAULT_HEURISTICS = TitleHeuristics()

# A separator surrounded by single spaces
SEPARATOR_RUN = re.compile(r" [\|\-\/>»] ")

# Separators implying a breadcrumb/hierarchy rather than a site-name suffix
HIERARCHICAL_SEPARATOR_RUN = re.compile(r" [\/>»] ")

# Everything before the last "separator + space"
TRAILING_SEGMENT = re.compile(r"(.*)[\|\-\/>»] .*", re.IGNORECASE)

# Everything after the first separator character
LEADING_SEGMENT = re.compile(r"[^\|\-\/>»]*[\|\-\/>»](.*)", re.IGNORECASE)

SEPARATOR_CHARS = re.compile(r"[\|\-\/>»]+")

WORD_SEPARATOR = re.compile(r"\s+", re.ASCII)


def word_count(text: str) -> int:
    """
    Count the segments of text split on whitespace runs.

    Leading or trailing whitespace yields an empty segment that is counted,
    and an empty string counts as one segment.
    """
    return len(WORD_SEPARATOR.split(text))


def acquire_raw_title(document: HTMLDocument) -> Optional[str]:
    """
    Get the raw title of a document.

    Uses the declared <title>, falling back to the text of the first element
    with id "title".

    Returns:
        Optional[str]: The raw title, or None if the document has neither
    """
    title = document.title()
    if title and title.strip():
        return title

    element = document.get_element_by_id("title")
    if element is not None:
        return element.text()

    return title


def heading_matches(document: HTMLDocument, text: str) -> bool:
    """Check whether any <h1>/<h2> contains a text node exactly equal to text."""
    return any(
        node == text
        for heading in document.find_all("h1", "h2")
        for node in heading.text_nodes()
    )


def resolve_title(
    document: HTMLDocument,
    heuristics: Optional[TitleHeuristics] = None,
) -> str:
    """
    Resolve the best guess at a document's article title.

    Args:
        document: Parsed HTML document
        heuristics: Thresholds for the cleanup steps

    Returns:
        str: Cleaned title, the original title if cleanup removed too much,
            or an empty string if the document has no title at all
    """
    heuristics = heuristics or DEFAULT_HEURISTICS

    original = acquire_raw_title(document) or ""
    current = original
    hierarchical = False

    if SEPARATOR_RUN.search(current):
        hierarchical = bool(HIERARCHICAL_SEPARATOR_RUN.search(current))
        current = TRAILING_SEGMENT.sub(r"\1", original)

        if word_count(current) < heuristics.min_segment_words:
            current = LEADING_SEGMENT.sub(r"\1", original)
            logger.debug("Removed leading title segment", title=current)
        else:
            logger.debug("Removed trailing title segment", title=current)

    elif ": " in current:
        if heading_matches(document, original):
            logger.debug("Heading confirms colon title", title=current)
        else:
            current = original[original.rfind(":") + 1:]

            if word_count(current) < heuristics.min_segment_words:
                current = original[original.find(":") + 1:]
            elif word_count(original[:original.find(":")]) > heuristics.max_prefix_words:
                current = original
            logger.debug("Split title on colon", title=current)

    elif len(current) > heuristics.long_title_chars or len(current) < heuristics.short_title_chars:
        headings = document.find_all("h1")
        if len(headings) == 1:
            current = headings[0].text()
            logger.debug("Using only <h1> as title", title=current)

    current = current.strip()

    # Short results are over-truncated unless exactly one breadcrumb level went
    current_words = word_count(current)
    if current_words <= heuristics.max_rollback_words and (
        not hierarchical
        or current_words != word_count(SEPARATOR_CHARS.sub("", original)) - 1
    ):
        logger.debug("Cleaned title too short, using original", title=current, original=original)
        current = original

    return current
