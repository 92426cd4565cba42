"""Root file detection based on the plugin header marker."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Pattern, Set

from .config import DEFAULT_ENCODING, DEFAULT_ROOT_MARKER
from .logging import get_logger
from .models import Catalog

PLUGIN_HEADER = re.compile(DEFAULT_ROOT_MARKER, re.MULTILINE)

logger = get_logger("roots")


def find_roots(
    catalog: Catalog,
    marker: Pattern[str] = PLUGIN_HEADER,
    encoding: str = DEFAULT_ENCODING,
) -> Set[Path]:
    """Return the first PHP file carrying the header marker, if any.

    A project has a single entry point, so scanning stops at the first hit.
    Unreadable files are skipped.
    """
    for path in catalog.php_files:
        try:
            content = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable root candidate %s: %s", path, exc)
            continue
        if marker.search(content):
            logger.debug("Root file: %s", catalog.relative(path))
            return {path}
    return set()


__all__ = ["PLUGIN_HEADER", "find_roots"]
