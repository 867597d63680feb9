import pytest

from articlemeta.parser import HTMLDocument, parse_html

SAMPLE_HTML = """
<html>
    <head>
        <title>
            Sample   Page Title
        </title>
        <meta charset="UTF-8">
    </head>
    <body>
        <h2 id="first">Second level</h2>
        <h1 class="main headline">Main <em>heading</em>  text</h1>
        <div id="title"> Element   with id title </div>
        <div id="title">Second element with id title</div>
        <p><!-- a comment -->Literal  text</p>
    </body>
</html>
"""


def test_find_all_keeps_document_order():
    doc = parse_html(SAMPLE_HTML)
    headings = doc.find_all("h1", "h2")
    assert [h.name for h in headings] == ["h2", "h1"]


def test_find_all_without_names_is_empty():
    doc = parse_html(SAMPLE_HTML)
    assert doc.find_all() == []


def test_get_reads_missing_attributes_as_empty():
    doc = parse_html(SAMPLE_HTML)
    h1 = doc.find_all("h1")[0]
    assert h1.get("property") == ""
    assert h1.get("class") == "main headline"
    assert h1["class"] == "main headline"


def test_text_is_collapsed_and_trimmed():
    doc = parse_html(SAMPLE_HTML)
    assert doc.find_all("h1")[0].text() == "Main heading text"


def test_text_nodes_are_literal_and_skip_comments():
    doc = parse_html(SAMPLE_HTML)
    p = doc.find_all("p")[0]
    assert list(p.text_nodes()) == ["Literal  text"]


def test_get_element_by_id_returns_first_match():
    doc = parse_html(SAMPLE_HTML)
    element = doc.get_element_by_id("title")
    assert element is not None
    assert element.text() == "Element with id title"
    assert doc.get_element_by_id("missing") is None


def test_title_is_normalized():
    doc = parse_html(SAMPLE_HTML)
    assert doc.title() == "Sample Page Title"


def test_title_absent():
    doc = parse_html("<html><body><p>No title</p></body></html>")
    assert doc.title() is None


def test_charset_from_meta_charset():
    doc = parse_html(SAMPLE_HTML)
    assert doc.charset == "utf-8"


def test_charset_from_http_equiv():
    html = '<html><head><meta http-equiv="Content-Type" content="text/html; charset=ISO-8859-1"></head></html>'
    assert parse_html(html).charset == "iso8859-1"


def test_charset_detected_from_bytes():
    html = b'<html><head><meta charset="windows-1252"><title>Caf\xe9</title></head></html>'
    doc = parse_html(html)
    assert doc.charset == "cp1252"
    assert doc.title() == "Café"


def test_charset_explicit_encoding_wins():
    html = '<html><head><meta charset="iso-8859-1"></head></html>'
    assert parse_html(html, encoding="utf-8").charset == "utf-8"


def test_unknown_charset_is_absent():
    html = '<html><head><meta charset="no-such-charset"></head></html>'
    assert parse_html(html).charset is None


def test_no_charset_declared():
    assert parse_html("<p>plain</p>").charset is None


def test_parse_rejects_other_types():
    with pytest.raises(TypeError):
        parse_html(42)


def test_queries_do_not_modify_tree():
    doc = parse_html(SAMPLE_HTML)
    before = str(doc.soup)
    doc.find_all("h1", "h2")
    doc.get_element_by_id("title")
    doc.title()
    list(doc.find_all("p")[0].text_nodes())
    _ = doc.charset
    assert isinstance(doc, HTMLDocument)
    assert str(doc.soup) == before
