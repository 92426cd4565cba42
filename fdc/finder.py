"""Pipeline coordination for a dead-code analysis run."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .catalog import DiscoveryCallback, FileCatalog
from .classifier import alive_files, classify
from .config import FinderConfig
from .logging import get_logger
from .models import FinderResult
from .references import ReferenceScanner
from .roots import find_roots


class DeadCodeFinder:
    """Runs discovery, reference scanning, root location and classification in order."""

    def __init__(
        self,
        config: FinderConfig | None = None,
        catalog_builder: FileCatalog | None = None,
        scanner: ReferenceScanner | None = None,
    ) -> None:
        self.config = config or FinderConfig()
        self.catalog_builder = catalog_builder or FileCatalog(self.config.exclude_paths)
        self.scanner = scanner or ReferenceScanner(encoding=self.config.encoding)
        self.logger = get_logger("finder")

    def run(self, root: str | Path, on_discover: Optional[DiscoveryCallback] = None) -> FinderResult:
        """Analyse the project under ``root`` and return its classification."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Path '{root}' does not exist")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Path '{root}' is not a directory")

        self.logger.debug("Starting analysis of %s", root_path)
        catalog = self.catalog_builder.discover(root_path, on_discover=on_discover)

        self.scanner.scan(catalog)

        roots = find_roots(
            catalog,
            marker=self.config.compile_root_marker(),
            encoding=self.config.encoding,
        )
        if not roots:
            self.logger.debug("No root file found; every file is eligible for classification")

        dead, comment_only_dead = classify(catalog, roots)
        alive = alive_files(catalog, roots)
        self.logger.debug(
            "Classified %d alive, %d dead, %d comment-only files",
            len(alive),
            len(dead),
            len(comment_only_dead),
        )

        return FinderResult(
            catalog=catalog,
            roots=roots,
            alive=alive,
            dead=dead,
            comment_only_dead=comment_only_dead,
        )


__all__ = ["DeadCodeFinder"]
