"""Partition non-root files into alive, dead and comment-only-dead."""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet, List, Tuple

from .models import Catalog, FileRecord


def classify(
    catalog: Catalog, roots: AbstractSet[Path]
) -> Tuple[List[FileRecord], List[FileRecord]]:
    """Return ``(dead, comment_only_dead)`` records sorted by path."""
    dead: List[FileRecord] = []
    comment_only_dead: List[FileRecord] = []
    for record in _candidates(catalog, roots):
        if record.is_referenced:
            continue
        if record.is_commented:
            comment_only_dead.append(record)
        else:
            dead.append(record)
    return dead, comment_only_dead


def alive_files(catalog: Catalog, roots: AbstractSet[Path]) -> List[FileRecord]:
    return [record for record in _candidates(catalog, roots) if record.is_referenced]


def _candidates(catalog: Catalog, roots: AbstractSet[Path]) -> List[FileRecord]:
    return sorted(
        (record for record in catalog if record.path not in roots),
        key=lambda record: record.path,
    )


__all__ = ["alive_files", "classify"]
