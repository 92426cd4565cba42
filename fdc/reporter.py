"""Console rendering of analysis results."""

from __future__ import annotations

from pathlib import Path

import click

from .models import Catalog, FileKind, FileRecord, FinderResult

_ICONS = {
    FileKind.PHP: "🐘",
    FileKind.JAVASCRIPT: "📜",
    FileKind.CSS: "🎨",
}


class ConsoleReporter:
    """Writes the scan report to standard output."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self._root: Path | None = None

    def banner(self, root: Path, shown: str | None = None) -> None:
        """Print the scan banner; ``shown`` is the path as the user typed it."""
        self._root = root
        label = shown if shown is not None else str(root)
        click.echo(f"🔍 Scanning for dead code in: {click.style(label, fg='cyan')}")
        if self.verbose:
            click.echo()
            click.echo(click.style("Discovering files...", dim=True))

    def discovered(self, record: FileRecord) -> None:
        if not self.verbose:
            return
        rel = self._relative(record.path)
        click.echo(f"  {_ICONS[record.kind]} Found: {click.style(rel, dim=True)}")

    def discovered_count(self, count: int) -> None:
        click.echo()
        click.echo(f"📊 Found {count} files to analyze")

    def results(self, result: FinderResult) -> None:
        catalog = result.catalog
        if self.verbose:
            self._verbose_results(result)

        if result.dead:
            click.secho("Dead files (not referenced):", fg="red", bold=True)
            for record in result.dead:
                click.echo(f"  {_ICONS[record.kind]} {click.style(catalog.relative(record.path), fg='red')}")
            click.echo()

        if result.comment_only_dead:
            click.secho(
                "Files only referenced in comments (possibly temporarily dead):",
                fg="yellow",
                bold=True,
            )
            for record in result.comment_only_dead:
                rel = catalog.relative(record.path)
                click.echo(f"  {_ICONS[record.kind]} {click.style(rel, fg='yellow')}")
                if self.verbose:
                    for referrer in record.referenced_in_comments:
                        ref_rel = click.style(catalog.relative(referrer), dim=True)
                        click.echo(f"    💬 Referenced in: {ref_rel}")
            click.echo()

        if not result.has_dead_files:
            click.secho("✅ No dead files found!", fg="green", bold=True)
        else:
            dead_count = click.style(str(len(result.dead)), fg="red", bold=True)
            comment_count = click.style(str(len(result.comment_only_dead)), fg="yellow", bold=True)
            click.echo(f"Found {dead_count} dead files and {comment_count} files only in comments")

    def _verbose_results(self, result: FinderResult) -> None:
        catalog: Catalog = result.catalog
        click.echo()
        click.secho("=== Analysis Results ===", fg="cyan", bold=True)
        click.echo()
        click.secho("Root files (not considered dead):", fg="cyan", bold=True)
        for root in sorted(result.roots):
            click.echo(f"  📁 {click.style(catalog.relative(root), fg='blue')}")
        click.echo()

        if result.alive:
            click.secho("Alive files (referenced in code):", fg="green", bold=True)
            for record in result.alive:
                rel = click.style(catalog.relative(record.path), fg="green")
                click.echo(
                    f"  {_ICONS[record.kind]} {rel} "
                    f"(referenced by {len(record.referenced_by)} file(s))"
                )
            click.echo()

    def delete_warning(self) -> None:
        click.echo()
        click.secho("⚠️  DELETE MODE ENABLED", fg="red", bold=True)
        click.echo("This will permanently delete the identified dead files.")
        click.echo("Press Enter to continue or Ctrl+C to cancel...")

    def deleting(self, path: Path) -> None:
        click.echo(f"Deleting: {click.style(str(path), fg='red')}")

    def deleted(self, count: int, kept_commented: int) -> None:
        click.echo(f"🗑️  Deleted {count} dead files")
        if kept_commented:
            click.echo("Note: Files only referenced in comments were not deleted for safety.")

    def _relative(self, path: Path) -> str:
        if self._root is None:
            return str(path)
        try:
            return path.relative_to(self._root).as_posix()
        except ValueError:
            return str(path)


__all__ = ["ConsoleReporter"]
