import io
import sys
import xml.sax

import pytest

from chapterkit.xmlselect import contains_all, main, select


@pytest.mark.parametrize(
    "x, y, want",
    [
        (["html", "body", "div", "h2"], ["div", "h2"], True),
        (["html", "body", "div", "h2"], ["h2", "div"], False),
        (["a", "b"], [], True),
        ([], ["a"], False),
        (["a"], ["a", "a"], False),
        (["a", "x", "a"], ["a", "a"], True),
    ],
)
def test_contains_all(x, y, want):
    assert contains_all(x, y) is want


def test_select_nested_text():
    doc = "<a><b>hi</b><c>no</c></a>"
    assert list(select(doc, ["b"])) == [(("a", "b"), "hi")]


def test_select_respects_order_of_names():
    doc = "<div><h2>one</h2></div><!-- --><div><p>two</p></div>"
    doc = f"<root>{doc}</root>"
    assert list(select(doc, ["div", "h2"])) == [(("root", "div", "h2"), "one")]
    assert list(select(doc, ["h2", "div"])) == []


def test_select_merges_entities_into_one_run():
    assert list(select("<a>x &amp; y</a>", ["a"])) == [(("a",), "x & y")]


def test_select_uses_local_names():
    doc = '<p:a xmlns:p="urn:x"><p:b>t</p:b></p:a>'
    assert list(select(doc, ["a", "b"])) == [(("a", "b"), "t")]


def test_select_from_file_object():
    doc = b"<a><b>hi</b></a>"
    assert list(select(io.BytesIO(doc), ["b"])) == list(select(doc, ["b"]))


def test_select_malformed_raises():
    with pytest.raises(xml.sax.SAXParseException):
        list(select("<a><b></a>", []))


def _stdin(monkeypatch, data):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_main_prints_selected(monkeypatch, capsys):
    _stdin(monkeypatch, b"<a><b>hi</b><c>no</c></a>")
    assert main(["b"]) == 0
    assert capsys.readouterr().out == "a b: hi\n"


def test_main_reports_errors(monkeypatch, capsys):
    _stdin(monkeypatch, b"<a><b></a>")
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("xmlselect: ")