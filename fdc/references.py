"""Reference scanning: which PHP files mention which catalog files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from .comments import strip_comments
from .config import DEFAULT_ENCODING
from .logging import get_logger
from .models import Catalog

logger = get_logger("references")


class ReferenceScanError(RuntimeError):
    """Raised when a PHP file cannot be read during reference scanning."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path


class ReferenceScanner:
    """Records live and comment-only references between catalog files.

    A file counts as referenced when its base filename (extension included)
    occurs as a plain substring of a PHP file's text. There is no path or
    word-boundary check, so ``util.php`` also matches ``my_util.php``.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding

    def scan(self, catalog: Catalog) -> None:
        """Append referrers to every record of ``catalog`` in place."""
        targets: List[Tuple[Path, str]] = [(record.path, record.name) for record in catalog]

        for php_file in list(catalog.php_files):
            content = self._read(php_file)
            source = strip_comments(content)

            live = comment_only = 0
            for target_path, filename in targets:
                if target_path == php_file:
                    continue
                record = catalog.files[target_path]
                if filename in source.code:
                    record.referenced_by.append(php_file)
                    live += 1
                elif filename in source.comments:
                    record.referenced_in_comments.append(php_file)
                    comment_only += 1

            logger.debug(
                "%s references %d file(s) in code and %d only in comments",
                catalog.relative(php_file),
                live,
                comment_only,
            )

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReferenceScanError(path, str(exc)) from exc


__all__ = ["ReferenceScanError", "ReferenceScanner"]
