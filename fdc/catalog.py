"""File discovery: builds the catalog of analysable PHP, JavaScript and CSS files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence

from .logging import get_logger
from .models import Catalog, FileKind, FileRecord

DiscoveryCallback = Callable[[FileRecord], None]

logger = get_logger("catalog")


@dataclass
class IgnoreRule:
    """Gitignore-style exclusion pattern from the ``exclude_paths`` setting."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            if self.directory_only and rel_path.startswith(f"{self.pattern}/"):
                return True
            return False

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    pattern = pattern.strip()
    negate = pattern.startswith("!")
    if negate:
        pattern = pattern[1:]
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
        has_slash="/" in pattern,
    )


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable entry %s: %s", error.filename, error)


class FileCatalog:
    """Walks a directory tree and collects every recognised source file."""

    def __init__(self, exclude_paths: Sequence[str] | None = None) -> None:
        self._rules: List[IgnoreRule] = []
        for pattern in exclude_paths or ():
            rule = build_ignore_rule(pattern)
            if rule is not None:
                self._rules.append(rule)

    def discover(self, root: Path, on_discover: Optional[DiscoveryCallback] = None) -> Catalog:
        """Return a catalog of every PHP/JS/CSS file under ``root``.

        Traversal errors (permission denied, vanished entries) are skipped so an
        unreadable subtree only yields fewer files.
        """
        catalog = Catalog(root=root)
        for path in self._iter_files(root):
            kind = FileKind.from_path(path)
            if kind is None:
                continue
            record = FileRecord(path=path, kind=kind)
            if not catalog.add(record):
                continue
            if on_discover is not None:
                on_discover(record)

        logger.debug("Discovered %d files (%d PHP) under %s", len(catalog), len(catalog.php_files), root)
        return catalog

    def _iter_files(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            if self._rules:
                dirnames[:] = [
                    name
                    for name in dirnames
                    if not _should_ignore(f"{rel_dir}/{name}" if rel_dir else name, True, self._rules)
                ]

            for filename in filenames:
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if self._rules and _should_ignore(rel_path, False, self._rules):
                    continue
                path = current_dir / filename
                try:
                    if not path.is_file():
                        continue
                    canonical = path.resolve(strict=True)
                except (OSError, RuntimeError) as exc:
                    logger.debug("Skipping %s: %s", path, exc)
                    continue
                yield canonical


__all__ = ["FileCatalog", "IgnoreRule", "build_ignore_rule"]
