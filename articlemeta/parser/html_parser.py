"""
HTML parsing abstraction layer using BeautifulSoup.

This module provides a small, read-only view over a parsed HTML document
exposing exactly the queries the metadata extractors rely on:

- selection of elements by tag name (in document order)
- selection of an element by its identifier
- attribute reads that never fail (absent attributes read as "")
- normalized inner-text extraction and literal text-node access
- lookup of the document's declared or detected character encoding

None of the wrappers modify the underlying tree.
"""
import codecs
import re
from typing import Iterator, List, Optional, Union

import structlog
from bs4 import BeautifulSoup, Tag

# Set up structured logger
logger = structlog.get_logger()

# Runs of whitespace collapsed when extracting element text
WHITESPACE_RUN = re.compile(r"\s+")

# charset=... inside a Content-Type value
CONTENT_TYPE_CHARSET = re.compile(r"charset\s*=\s*[\"']?([^\s;\"']+)", re.IGNORECASE)


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return WHITESPACE_RUN.sub(" ", text).strip()


def normalize_charset(name: Optional[str]) -> Optional[str]:
    """
    Normalize an encoding name to Python's canonical codec name.

    Args:
        name: Encoding name as declared or detected

    Returns:
        Optional[str]: Canonical codec name, or None if unknown
    """
    if not name or not name.strip():
        return None
    try:
        return codecs.lookup(name.strip()).name
    except LookupError:
        logger.debug("Unknown charset ignored", charset=name)
        return None


class HTMLElement:
    """
    Read-only wrapper around a BeautifulSoup tag.
    """

    def __init__(self, tag: Tag):
        """Initialize with a BeautifulSoup tag."""
        self._tag = tag

    @property
    def name(self) -> str:
        """Get the tag name."""
        return self._tag.name or ""

    def get(self, key: str) -> str:
        """
        Get an attribute value.

        Absent attributes read as an empty string. Multi-valued attributes
        (class, rel, ...) are joined with single spaces.
        """
        value = self._tag.get(key)
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    def __getitem__(self, key: str) -> str:
        """Get an attribute using bracket notation."""
        return self.get(key)

    def text(self) -> str:
        """Get the trimmed, whitespace-collapsed text of this element and its descendants."""
        return normalize_text(self._tag.get_text())

    def text_nodes(self) -> Iterator[str]:
        """
        Iterate over the literal text nodes below this element.

        Text is returned exactly as it appears in the tree (no trimming or
        whitespace collapsing). Comments are not text nodes.
        """
        for string in self._tag.strings:
            yield str(string)

    def __repr__(self) -> str:
        return f"HTMLElement(<{self.name}>)"


class HTMLDocument:
    """
    Read-only view of a parsed HTML document.

    Provides tag and identifier selection, the declared title and the
    document's character encoding.
    """

    def __init__(self, soup: BeautifulSoup, encoding: Optional[str] = None):
        """
        Initialize the document.

        Args:
            soup: Parsed BeautifulSoup tree
            encoding: Encoding the caller knows the document was decoded with
        """
        self._soup = soup
        self._encoding = encoding

    @property
    def soup(self) -> BeautifulSoup:
        """The underlying BeautifulSoup tree."""
        return self._soup

    def find_all(self, *names: str) -> List[HTMLElement]:
        """Find all elements with any of the given tag names, in document order."""
        if not names:
            return []
        return [HTMLElement(tag) for tag in self._soup.find_all(list(names))]

    def get_element_by_id(self, element_id: str) -> Optional[HTMLElement]:
        """Find the first element whose id attribute equals element_id."""
        tag = self._soup.find(id=element_id)
        if isinstance(tag, Tag):
            return HTMLElement(tag)
        return None

    def title(self) -> Optional[str]:
        """
        Get the document's declared title.

        Returns:
            Optional[str]: Normalized text of the first <title> element,
                or None if the document has none
        """
        tag = self._soup.find("title")
        if not isinstance(tag, Tag):
            return None
        return normalize_text(tag.get_text())

    @property
    def charset(self) -> Optional[str]:
        """
        Get the document's character encoding.

        Resolution order: the encoding supplied by the caller, the encoding
        detected while decoding bytes, then the encoding declared in a
        <meta charset> or <meta http-equiv="Content-Type"> tag.
        """
        for candidate in (
            self._encoding,
            getattr(self._soup, "original_encoding", None),
            self.declared_charset(),
        ):
            charset = normalize_charset(candidate)
            if charset:
                return charset
        return None

    def declared_charset(self) -> Optional[str]:
        """Get the encoding declared by the document's meta tags, if any."""
        for meta in self.find_all("meta"):
            charset = meta.get("charset").strip()
            if charset:
                return charset
            if meta.get("http-equiv").strip().lower() == "content-type":
                match = CONTENT_TYPE_CHARSET.search(meta.get("content"))
                if match:
                    return match.group(1)
        return None

    def __repr__(self) -> str:
        return f"HTMLDocument(title={self.title()!r})"


def parse_html(content: Union[str, bytes], encoding: Optional[str] = None) -> HTMLDocument:
    """
    Parse HTML content and return a document object.

    This is the main entry point for HTML parsing.

    Args:
        content: HTML content as string or bytes
        encoding: Optional encoding to decode bytes with; detected if omitted

    Returns:
        HTMLDocument: A read-only document that can be queried

    Raises:
        TypeError: If content is neither str nor bytes
    """
    if not isinstance(content, (str, bytes)):
        raise TypeError(f"HTML content must be str or bytes, not {type(content).__name__}")

    if isinstance(content, bytes):
        soup = BeautifulSoup(content, "html.parser", from_encoding=encoding)
    else:
        soup = BeautifulSoup(content, "html.parser")

    logger.debug(
        "Parsed HTML document",
        length=len(content),
        detected_encoding=getattr(soup, "original_encoding", None),
    )
    return HTMLDocument(soup, encoding=encoding)
