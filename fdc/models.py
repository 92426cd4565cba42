"""Core data models shared across fdc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Set


class FileKind(Enum):
    """Recognised source file types."""

    PHP = "php"
    JAVASCRIPT = "js"
    CSS = "css"

    @classmethod
    def from_extension(cls, extension: str) -> Optional["FileKind"]:
        """Return the kind for a file extension (with or without the dot)."""
        normalised = extension.lower().lstrip(".")
        for kind in cls:
            if kind.value == normalised:
                return kind
        return None

    @classmethod
    def from_path(cls, path: Path) -> Optional["FileKind"]:
        if not path.suffix:
            return None
        return cls.from_extension(path.suffix)


@dataclass
class FileRecord:
    """A discovered file and the PHP files that mention it."""

    path: Path
    kind: FileKind
    referenced_by: List[Path] = field(default_factory=list)
    referenced_in_comments: List[Path] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_referenced(self) -> bool:
        return bool(self.referenced_by)

    @property
    def is_commented(self) -> bool:
        return bool(self.referenced_in_comments)


@dataclass
class Catalog:
    """Owns every file record of a scan, keyed by path."""

    root: Path
    files: Dict[Path, FileRecord] = field(default_factory=dict)
    php_files: List[Path] = field(default_factory=list)

    def add(self, record: FileRecord) -> bool:
        """Insert ``record`` unless its path is already catalogued."""
        if record.path in self.files:
            return False
        self.files[record.path] = record
        if record.kind is FileKind.PHP:
            self.php_files.append(record.path)
        return True

    def get(self, path: Path) -> Optional[FileRecord]:
        return self.files.get(path)

    def relative(self, path: Path) -> str:
        """Return ``path`` relative to the catalog root where possible."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self.files.values())

    def __contains__(self, path: object) -> bool:
        return path in self.files


@dataclass
class FinderResult:
    """Outcome of a full dead-code analysis run."""

    catalog: Catalog
    roots: Set[Path]
    alive: List[FileRecord]
    dead: List[FileRecord]
    comment_only_dead: List[FileRecord]

    @property
    def has_dead_files(self) -> bool:
        return bool(self.dead) or bool(self.comment_only_dead)
