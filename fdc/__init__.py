"""Find dead PHP, JavaScript and CSS files in single-entry-point projects."""

from .classifier import alive_files, classify
from .comments import strip_comments
from .finder import DeadCodeFinder
from .models import Catalog, FileKind, FileRecord, FinderResult
from .resolver import PathResolver

__all__ = [
    "Catalog",
    "DeadCodeFinder",
    "FileKind",
    "FileRecord",
    "FinderResult",
    "PathResolver",
    "alive_files",
    "classify",
    "strip_comments",
]
