from chapterkit.urlvalues import Values, main


def _sample():
    m = Values({"lang": ["en"]})
    m.add("item", "1")
    m.add("item", "2")
    return m


def test_first_value():
    m = _sample()
    assert m.first("lang") == "en"
    assert m.first("item") == "1"


def test_missing_key_gives_empty_string():
    assert _sample().first("q") == ""
    assert Values().first("item") == ""


def test_add_appends():
    assert _sample()["item"] == ["1", "2"]


def test_empty_list_gives_empty_string():
    m = Values({"k": []})
    assert m.first("k") == ""


def test_add_creates_key():
    m = Values()
    m.add("item", "3")
    assert m == {"item": ["3"]}


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["en", "", "1", "[1 2]", ""]