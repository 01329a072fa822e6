import io

import pytest
import responses

from chapterkit.htmldoc import parse_html
from chapterkit.outline import main, outline_paths, outline_tags, outline_url


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_outline_paths_follow_nesting():
    doc = parse_html("<div><span>t</span></div>")
    paths = outline_paths(doc)
    assert paths[-1][-2:] == ["div", "span"]
    for i, path in enumerate(paths):
        if len(path) > 1:
            assert path[:-1] in paths[:i]


def test_outline_paths_root_first():
    paths = outline_paths(parse_html("<p>x</p>"))
    assert len(paths[0]) == 1
    assert all(path[0] == paths[0][0] for path in paths)


def test_outline_tags_balanced_and_indented():
    lines = outline_tags(parse_html("<div><span>a</span><br></div>"))
    stack = []
    for line in lines:
        indent = len(line) - len(line.lstrip(" "))
        tag = line.strip()
        assert indent % 2 == 0
        if tag.startswith("</"):
            name, open_indent = stack.pop()
            assert name == tag[2:-1]
            assert open_indent == indent
        else:
            assert indent == 2 * len(stack)
            stack.append((tag[1:-1], indent))
    assert stack == []
    assert "    <div>" in lines


def test_outline_url(mocked):
    url = "http://example.com/"
    mocked.add(responses.GET, url, body="<p>x</p>", content_type="text/html")
    lines = outline_url(url)
    assert lines == outline_tags(parse_html("<p>x</p>"))


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("<p>x</p>"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "[html]"
    assert "[html body p]" in lines


def test_main_with_url(mocked, capsys):
    url = "http://example.com/page"
    mocked.add(responses.GET, url, body="<b>x</b>", content_type="text/html")
    assert main([url]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == outline_tags(parse_html("<b>x</b>"))