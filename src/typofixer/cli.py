from pathlib import Path
from typing import List, Optional

import typer

from .config import DEFAULT_EXTENSIONS, Settings
from .errors import ConfigError, SourcePathError
from .fixer import process_paths
from .logging import get_logger
from .output.report import build_report, unified_diff, write_report_json
from .rule import describe as describe_rule
from .source.tokenizer import LANGUAGES
from .table.loader import default_table, load_table
from .table.model import LookupTable

app = typer.Typer(help="typofixer – fix misspelled variable names in source code", no_args_is_help=True)


def _load(config: Optional[Path]) -> LookupTable:
    logger = get_logger(__name__)
    try:
        return load_table(config) if config is not None else default_table()
    except ConfigError as exc:
        logger.error(f"Invalid typo configuration: {exc}")
        raise typer.Exit(code=2) from exc


@app.command()
def process(
    paths: List[Path] = typer.Argument(..., help="Files or directories to fix"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Typo table (.json or 'canonical: typo, ...' lines)"),
    dry_run: bool = typer.Option(False, "--dry-run/--no-dry-run", help="Show the diff without writing files"),
    variables_only: bool = typer.Option(False, "--variables-only", help="Only fix names prefixed with '$'"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Lexing rules: php, c or python (default: from file extension)"),
    ext: Optional[List[str]] = typer.Option(None, "--ext", help="File extension to include when walking directories (repeatable)"),
    report: Optional[Path] = typer.Option(None, "--report", help="Write a JSON change report to this file"),
) -> None:
    """
    Rewrite known typos in identifiers to their canonical names.

    Comments and literal string text are never touched; variables
    interpolated into strings are renamed along with the code. With
    --dry-run the unified diff is printed and files are left as they are.
    """
    logger = get_logger(__name__)

    if language is not None and language not in LANGUAGES:
        raise typer.BadParameter(f"expected one of {', '.join(LANGUAGES)}", param_hint="--language")

    table = _load(config)
    settings = Settings(
        extensions=tuple(ext) if ext else DEFAULT_EXTENSIONS,
        variables_only=variables_only,
        dry_run=dry_run,
        config_path=config,
        language=language,
    )

    try:
        results = process_paths(paths, table, settings)
    except SourcePathError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    if dry_run:
        for result in results:
            diff = unified_diff(result)
            if diff:
                typer.echo(diff, nl=False)

    if report is not None:
        try:
            write_report_json(build_report(results, dry_run=dry_run), report)
        except OSError as exc:
            raise typer.Exit(code=1) from exc

    changed = [r for r in results if r.changed]
    total = sum(len(r.changes) for r in changed)
    if dry_run:
        typer.echo(f"{len(results)} file(s) scanned, {len(changed)} would change, {total} typo(s) found")
    else:
        typer.echo(f"{len(results)} file(s) scanned, {len(changed)} changed, {total} typo(s) fixed")


@app.command()
def describe() -> None:
    """Show what the rule does, with a before/after sample."""
    typer.echo(describe_rule())


@app.command()
def table(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Typo table to load instead of the built-in one"),
) -> None:
    """Print the lookup table in use."""
    lookup = _load(config)
    for entry in lookup.entries:
        typer.echo(f"{entry.canonical_name}: {', '.join(sorted(entry.typos))}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
