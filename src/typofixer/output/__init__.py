"""Diffs and JSON reports of the corrections made in a run."""

from .report import Report, build_report, unified_diff, write_report_json

__all__ = ["Report", "build_report", "unified_diff", "write_report_json"]
