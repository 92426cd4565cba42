"""Removal of files classified as dead."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Optional

from .logging import get_logger
from .models import FileRecord

logger = get_logger("deleter")


def delete_files(
    files: Iterable[FileRecord],
    on_delete: Optional[Callable[[Path], None]] = None,
) -> List[Path]:
    """Delete each file in order and return the removed paths.

    The first failure propagates and leaves the remaining files untouched.
    """
    removed: List[Path] = []
    for record in files:
        if on_delete is not None:
            on_delete(record.path)
        record.path.unlink()
        logger.info("Deleted %s", record.path)
        removed.append(record.path)
    return removed


__all__ = ["delete_files"]
