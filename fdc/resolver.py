"""Path resolution for path-like strings found inside a referrer."""

from __future__ import annotations

from pathlib import Path

from .logging import get_logger
from .models import Catalog

logger = get_logger("resolver")


class PathResolver:
    """Resolve a referenced path relative to a referrer, the root, or the catalog."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def resolve(self, base_file: Path, referenced_path: str) -> Path:
        """Return the best canonical match for ``referenced_path``.

        Tries the referrer's directory, then the project root, then any
        catalog entry sharing the basename (smallest path wins). Falls back to
        an unresolved join against the referrer's directory.
        """
        base_dir = base_file.parent

        for candidate in (base_dir / referenced_path, self.catalog.root / referenced_path):
            if candidate.exists():
                return _canonical(candidate)

        basename = Path(referenced_path).name or referenced_path
        for existing in sorted(self.catalog.files):
            if existing.name == basename:
                return existing

        logger.debug("Could not resolve %r from %s", referenced_path, base_file)
        return base_dir / referenced_path


def _canonical(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except OSError:
        return path


__all__ = ["PathResolver"]
