import threading

import pytest

from chapterkit.du import dirents, disk_usage, format_disk_usage, main, walk_dir


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.bin").write_bytes(b"x" * 10)
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.bin").write_bytes(b"y" * 20)
    (sub / "deeper").mkdir()
    (sub / "deeper" / "c.bin").write_bytes(b"z" * 5)
    return tmp_path


def test_dirents_sorted_by_name(tree):
    names = [entry.name for entry in dirents(tree)]
    assert names == sorted(names)
    assert set(names) == {"a.bin", "sub"}


def test_dirents_reports_missing_directory(tmp_path, capsys):
    assert dirents(tmp_path / "missing") == []
    assert capsys.readouterr().err.startswith("du: ")


def test_walk_dir_yields_file_sizes(tree):
    assert sorted(walk_dir(tree)) == [5, 10, 20]


def test_walk_dir_cancelled(tree):
    cancel = threading.Event()
    cancel.set()
    assert list(walk_dir(tree, cancel)) == []


def test_disk_usage_matches_walk(tree):
    sizes = list(walk_dir(tree))
    assert disk_usage([tree]) == (len(sizes), sum(sizes))


def test_disk_usage_several_roots(tree):
    assert disk_usage([tree / "sub", tree / "sub" / "deeper"]) == (3, 30)


def test_disk_usage_missing_root(tmp_path, capsys):
    assert disk_usage([tmp_path / "missing"]) == (0, 0)
    assert "du: " in capsys.readouterr().err


def test_disk_usage_cancelled(tree):
    cancel = threading.Event()
    cancel.set()
    assert disk_usage([tree], cancel=cancel) == (0, 0)


def test_disk_usage_defaults_to_current_directory(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert disk_usage([]) == disk_usage([tree])


def test_disk_usage_progress_totals_are_bounded(tree):
    seen = []
    final = disk_usage([tree], progress=lambda n, b: seen.append((n, b)), interval=0.0)
    assert final == (3, 35)
    assert all(n <= final[0] and b <= final[1] for n, b in seen)


def test_format_disk_usage():
    assert format_disk_usage(3, 1_500_000_000) == "3 files  1.5 GB"
    assert format_disk_usage(0, 0) == "0 files  0.0 GB"


def test_main_prints_totals(tree, capsys):
    assert main([str(tree)]) == 0
    assert capsys.readouterr().out == format_disk_usage(3, 35) + "\n"