import logging
import os
import pytest
from pathlib import Path
from newest_files.core import SubtreeScanner
from newest_files.scanning.walker import EntryType, SubtreeWalker


def test_scan_orders_by_mtime(make_file, tmp_path, t0):
    make_file(tmp_path / "a.txt", mtime=t0, size=10)
    make_file(tmp_path / "b.txt", mtime=t0 + 60, size=20)

    records = SubtreeScanner().scan(tmp_path)

    assert [Path(r.path).name for r in records] == ["b.txt", "a.txt"]
    assert [r.size_bytes for r in records] == [20, 10]


def test_scan_includes_subdirectory_prefix(make_file, tmp_path, t0):
    make_file(tmp_path / "a.txt", mtime=t0)
    make_file(tmp_path / "sub" / "c.txt", mtime=t0 + 120)

    records = SubtreeScanner().scan(tmp_path)

    assert records[0].path == os.path.join(str(tmp_path), "sub", "c.txt")
    assert records[0].level == 2
    assert records[0].name == "c.txt"
    assert records[1].path == os.path.join(str(tmp_path), "a.txt")
    assert records[1].level == 1


def test_ties_follow_discovery_order(make_file, tmp_path, t0):
    for name in ["b.txt", "a.txt", "c.txt"]:
        make_file(tmp_path / name, mtime=t0)
    make_file(tmp_path / "d" / "e.txt", mtime=t0)

    walker_order = [v.path for v in SubtreeWalker().walk(tmp_path) if v.type is EntryType.FILE]
    records = SubtreeScanner().scan(tmp_path)

    assert [r.path for r in records] == walker_order


def test_rescan_is_idempotent(make_file, tmp_path, t0):
    make_file(tmp_path / "a.txt", mtime=t0, size=1)
    make_file(tmp_path / "x" / "b.txt", mtime=t0 + 5, size=2)

    scanner = SubtreeScanner()
    first = scanner.scan(tmp_path)
    second = scanner.scan(tmp_path)

    assert first == second
    assert len(scanner.collector) == 2


def test_every_file_once_and_nothing_else(make_file, tmp_path, t0):
    files = [
        make_file(tmp_path / "one.txt", mtime=t0),
        make_file(tmp_path / "d1" / "two.txt", mtime=t0 + 1),
        make_file(tmp_path / "d1" / "d2" / "three.txt", mtime=t0 + 2),
    ]
    (tmp_path / "empty_dir").mkdir()
    os.symlink(tmp_path / "one.txt", tmp_path / "link.txt")
    os.symlink(tmp_path / "missing", tmp_path / "dangling")
    os.symlink(tmp_path / "d1", tmp_path / "dirlink")

    records = SubtreeScanner().scan(tmp_path)

    assert sorted(r.path for r in records) == sorted(str(f) for f in files)


def test_empty_and_missing_roots(tmp_path):
    scanner = SubtreeScanner()
    assert scanner.scan(tmp_path) == []
    assert scanner.scan(tmp_path / "does-not-exist") == []


def test_symlinked_root_is_not_followed(make_file, tmp_path, caplog):
    make_file(tmp_path / "real" / "a.txt")
    os.symlink(tmp_path / "real", tmp_path / "link")
    os.symlink(tmp_path / "gone", tmp_path / "dangling")

    scanner = SubtreeScanner()
    with caplog.at_level(logging.WARNING):
        assert scanner.scan(tmp_path / "link") == []
        assert scanner.scan(tmp_path / "dangling") == []

    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert all("symbolic link" in w for w in warnings)


def test_walker_is_post_order(make_file, tmp_path):
    make_file(tmp_path / "sub" / "f.txt")

    visits = list(SubtreeWalker().walk(tmp_path))
    types = [(Path(v.path).name, v.type) for v in visits]

    assert types == [
        ("f.txt", EntryType.FILE),
        ("sub", EntryType.DIRECTORY_POST),
        (tmp_path.name, EntryType.DIRECTORY_POST),
    ]
    assert [v.level for v in visits] == [2, 1, 0]


def test_walker_classifies_links(make_file, tmp_path):
    make_file(tmp_path / "real.txt")
    os.symlink(tmp_path / "real.txt", tmp_path / "good")
    os.symlink(tmp_path / "nowhere", tmp_path / "bad")

    types = {Path(v.path).name: v.type for v in SubtreeWalker().walk(tmp_path)}

    assert types["good"] is EntryType.SYMLINK
    assert types["bad"] is EntryType.SYMLINK_DANGLING
    assert types["real.txt"] is EntryType.FILE


def test_walker_missing_root_is_unstatable(tmp_path):
    visits = list(SubtreeWalker().walk(tmp_path / "nope"))

    assert len(visits) == 1
    assert visits[0].type is EntryType.UNSTATABLE
    assert visits[0].status is None


def test_walker_base_offset(make_file, tmp_path):
    make_file(tmp_path / "sub" / "leaf.txt")

    for v in SubtreeWalker().walk(tmp_path):
        assert v.path[v.base:] == Path(v.path).name


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0,
                    reason="root can read any directory")
def test_unreadable_directory_is_skipped(make_file, tmp_path, t0):
    make_file(tmp_path / "ok.txt", mtime=t0)
    locked = tmp_path / "locked"
    make_file(locked / "hidden.txt", mtime=t0 + 10)
    locked.chmod(0)
    try:
        visits = {Path(v.path).name: v.type for v in SubtreeWalker().walk(tmp_path)}
        records = SubtreeScanner().scan(tmp_path)
    finally:
        locked.chmod(0o755)

    assert visits["locked"] is EntryType.DIRECTORY_UNREADABLE
    assert [Path(r.path).name for r in records] == ["ok.txt"]
