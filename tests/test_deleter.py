"""Tests for fdc.deleter."""

from __future__ import annotations

from pathlib import Path

import pytest

from fdc.deleter import delete_files
from fdc.models import FileKind, FileRecord


def _record(path: Path) -> FileRecord:
    path.write_text("", encoding="utf-8")
    return FileRecord(path=path, kind=FileKind.from_path(path))


def test_deletes_files_in_order(tmp_path: Path) -> None:
    records = [_record(tmp_path / "a.js"), _record(tmp_path / "b.css")]
    notified: list[Path] = []

    removed = delete_files(records, on_delete=notified.append)

    assert removed == [tmp_path / "a.js", tmp_path / "b.css"]
    assert notified == removed
    assert not any(path.exists() for path in removed)


def test_first_failure_stops_remaining_deletions(tmp_path: Path) -> None:
    missing = FileRecord(path=tmp_path / "gone.php", kind=FileKind.PHP)
    survivor = _record(tmp_path / "keep.js")

    with pytest.raises(FileNotFoundError):
        delete_files([missing, survivor])

    assert survivor.path.exists()
