"""
Change reporting for typofixer runs.

Produces unified diffs for humans and a JSON report describing every
correction made, per file.
"""

import difflib
import json
from collections import Counter
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from ..fixer import FileResult
from ..logging import get_logger

logger = get_logger(__name__)

REPORT_VERSION = "1.0.0"


@dataclass(frozen=True)
class FileReport:
    """Corrections made in a single file."""
    path: str
    encoding: str
    changes: List[Dict[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Report:
    """Complete report for one run."""
    version: str
    timestamp: str
    dry_run: bool
    summary: Dict[str, Any]
    files: List[FileReport]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "timestamp": self.timestamp,
            "dry_run": self.dry_run,
            "summary": self.summary,
            "files": [f.to_dict() for f in self.files],
        }


def unified_diff(result: FileResult, context: int = 3) -> str:
    """Return a unified diff of one result, or an empty string if unchanged."""
    if not result.changed:
        return ""

    name = result.display_path
    lines = difflib.unified_diff(
        result.original_text.splitlines(keepends=True),
        result.rewritten_text.splitlines(keepends=True),
        fromfile=f"a/{name}",
        tofile=f"b/{name}",
        n=context,
    )
    diff = []
    for line in lines:
        diff.append(line if line.endswith("\n") else line + "\n\\ No newline at end of file\n")
    return "".join(diff)


def build_report(results: List[FileResult], dry_run: bool = False) -> Report:
    """Collect the changes of a run into a Report."""
    files = [
        FileReport(
            path=result.display_path,
            encoding=result.encoding,
            changes=[change.to_dict() for change in result.changes],
        )
        for result in results
        if result.changed
    ]

    return Report(
        version=REPORT_VERSION,
        timestamp=datetime.now().isoformat(),
        dry_run=dry_run,
        summary=_generate_summary(results),
        files=files,
    )


def write_report_json(report: Report, report_path: Path) -> Path:
    """
    Write a report as JSON.

    Args:
        report: Report to write
        report_path: Destination file; parent directories are created

    Returns:
        Path to the written report
    """
    report_path = Path(report_path)
    report_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
    except OSError as exc:
        logger.error(f"Failed to write report to {report_path}: {exc}")
        raise

    logger.info(f"Wrote report to {report_path}")
    return report_path


def _generate_summary(results: List[FileResult]) -> Dict[str, Any]:
    """Summary statistics for a run."""
    corrections: Counter = Counter()
    for result in results:
        for change in result.changes:
            corrections[change.corrected_text] += 1

    return {
        "files_scanned": len(results),
        "files_changed": sum(1 for r in results if r.changed),
        "total_changes": sum(len(r.changes) for r in results),
        "corrections": dict(sorted(corrections.items())),
    }
