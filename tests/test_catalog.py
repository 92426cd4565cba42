"""Tests for fdc.catalog."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from fdc.catalog import FileCatalog, build_ignore_rule
from fdc.models import FileKind, FileRecord
from fdc.resolver import PathResolver


@pytest.fixture
def root(tmp_path: Path) -> Path:
    return tmp_path.resolve()


def _write(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_discover_collects_recognised_extensions(root: Path) -> None:
    _write(root / "main.php")
    _write(root / "nested" / "deep" / "app.JS")
    _write(root / "assets" / "style.Css")
    _write(root / "notes.txt")
    _write(root / "Makefile")
    (root / "empty.dir.php").mkdir()

    catalog = FileCatalog().discover(root)

    kinds = {catalog.relative(record.path): record.kind for record in catalog}
    assert kinds == {
        "main.php": FileKind.PHP,
        "nested/deep/app.JS": FileKind.JAVASCRIPT,
        "assets/style.Css": FileKind.CSS,
    }
    assert catalog.php_files == [root / "main.php"]
    for record in catalog:
        assert record.referenced_by == []
        assert record.referenced_in_comments == []


def test_discover_notifies_once_per_file(root: Path) -> None:
    _write(root / "a.php")
    _write(root / "b.js")
    seen: list[FileRecord] = []

    catalog = FileCatalog().discover(root, on_discover=seen.append)

    assert sorted(record.name for record in seen) == ["a.php", "b.js"]
    assert len(catalog) == 2


def test_discover_applies_exclude_patterns(root: Path) -> None:
    _write(root / "main.php")
    _write(root / "vendor" / "lib.php")
    _write(root / "assets" / "app.min.js")
    _write(root / "assets" / "keep.min.js")

    catalog = FileCatalog(["vendor/", "*.min.js", "!keep.min.js"]).discover(root)

    names = sorted(catalog.relative(record.path) for record in catalog)
    assert names == ["assets/keep.min.js", "main.php"]


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="requires POSIX permissions as non-root")
def test_discover_skips_unreadable_directories(root: Path) -> None:
    _write(root / "main.php")
    locked = root / "locked"
    _write(locked / "hidden.php")
    locked.chmod(0)
    try:
        catalog = FileCatalog().discover(root)
    finally:
        locked.chmod(0o755)

    assert [record.name for record in catalog] == ["main.php"]


def test_build_ignore_rule_parses_flags() -> None:
    rule = build_ignore_rule("!/build/")
    assert rule is not None
    assert rule.pattern == "build"
    assert rule.negate and rule.anchored and rule.directory_only
    assert build_ignore_rule("   ") is None


@pytest.mark.skipif(os.name == "nt", reason="requires POSIX symlinks")
def test_discover_keys_symlinked_files_by_canonical_path(root: Path) -> None:
    project = root / "plugin"
    _write(project / "main.php", "<?php include 'real.js';")
    _write(root / "outside" / "real.js")
    (project / "alias.js").symlink_to(root / "outside" / "real.js")
    (project / "again.js").symlink_to(root / "outside" / "real.js")
    seen: list[FileRecord] = []

    catalog = FileCatalog().discover(project, on_discover=seen.append)

    assert sorted(catalog.files) == [root / "outside" / "real.js", project / "main.php"]
    assert len(seen) == 2
    resolved = PathResolver(catalog).resolve(project / "main.php", "alias.js")
    assert resolved == root / "outside" / "real.js"
    assert resolved in catalog
