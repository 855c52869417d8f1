"""Scanner report parsing utilities."""

from .report_reader import load_reports, parse_report, read_source

__all__ = ["load_reports", "parse_report", "read_source"]
