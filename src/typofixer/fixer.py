"""
Apply a lookup table to source text and files.

This module is the thin layer around the rewrite engine: it tokenizes,
rewrites and renders text, and walks, reads and writes files.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import Settings
from .engine.rewrite import rewrite
from .engine.tokens import Change
from .errors import SourcePathError
from .logging import get_logger
from .source.tokenizer import language_for_path, render, tokenize
from .table.model import LookupTable

logger = get_logger(__name__)


@dataclass(frozen=True)
class FileResult:
    """Outcome of fixing one source text."""
    path: Optional[Path]
    original_text: str
    rewritten_text: str
    changes: Tuple[Change, ...]
    encoding: str = "utf-8"

    @property
    def changed(self) -> bool:
        return bool(self.changes)

    @property
    def display_path(self) -> str:
        return self.path.as_posix() if self.path is not None else "<string>"


def fix_source(
    text: str,
    table: LookupTable,
    variables_only: bool = False,
    path: Optional[Path] = None,
    encoding: str = "utf-8",
    language: Optional[str] = None,
) -> FileResult:
    """
    Tokenize text, rewrite known typos and render the result.

    The language defaults to the one implied by the path extension.
    """
    language = language or language_for_path(path)
    result = rewrite(tokenize(text, variables_only=variables_only, language=language), table)
    rewritten = render(list(result.tokens)) if result.changed else text
    return FileResult(path, text, rewritten, result.changes, encoding)


def iter_source_files(paths: Iterable[Path], settings: Settings) -> Iterator[Path]:
    """
    Yield files to process, in a stable order.

    Files named explicitly are always yielded. Directories are walked
    recursively, skipping hidden directories and keeping only files whose
    extension the settings accept.

    Raises:
        SourcePathError: if a path does not exist
    """
    for path in paths:
        path = Path(path)
        if not path.exists():
            raise SourcePathError(f"Path does not exist: {path}")

        if path.is_file():
            yield path
            continue

        for candidate in sorted(path.rglob("*")):
            relative_parts = candidate.relative_to(path).parts[:-1]
            if any(part.startswith(".") for part in relative_parts):
                continue
            if candidate.is_file() and settings.accepts(candidate):
                yield candidate


def read_source(path: Path, encoding: str = "utf-8") -> Tuple[str, str]:
    """Read a file, falling back to latin-1 when it is not valid in `encoding`."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SourcePathError(f"Cannot read {path}: {exc}") from exc

    try:
        return data.decode(encoding), encoding
    except UnicodeDecodeError:
        logger.debug(f"{path} is not valid {encoding}, decoding as latin-1")
        return data.decode("latin-1"), "latin-1"


def write_source(path: Path, text: str, encoding: str) -> None:
    try:
        path.write_bytes(text.encode(encoding, errors="strict"))
    except UnicodeError as exc:
        raise SourcePathError(f"Cannot encode fixed {path} as {encoding}: {exc}") from exc
    except OSError as exc:
        raise SourcePathError(f"Cannot write {path}: {exc}") from exc


def process_paths(
    paths: Iterable[Path],
    table: LookupTable,
    settings: Settings,
) -> List[FileResult]:
    """
    Fix every source file reachable from `paths`.

    Changed files are written back in the encoding they were read with,
    unless settings.dry_run is set.

    Returns:
        One FileResult per visited file, changed or not
    """
    results: List[FileResult] = []

    for path in iter_source_files(paths, settings):
        text, encoding = read_source(path, settings.encoding)
        result = fix_source(
            text,
            table,
            variables_only=settings.variables_only,
            path=path,
            encoding=encoding,
            language=settings.language,
        )
        results.append(result)

        if not result.changed:
            continue

        logger.info(f"{path}: {len(result.changes)} typo(s) fixed")
        if settings.dry_run:
            continue
        write_source(path, result.rewritten_text, encoding)

    changed_files = sum(1 for r in results if r.changed)
    logger.info(f"Processed {len(results)} files, {changed_files} changed")
    return results
