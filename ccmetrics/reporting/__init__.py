"""
Report serialization.

The text report is the canonical artifact; JSON is offered for tooling.
"""

from ccmetrics.reporting.formatters import format_json, format_text, get_formatter
from ccmetrics.reporting.report import (
    ReportBuilder,
    format_record,
    format_report,
    parse_report,
    write_report,
)

__all__ = [
    "ReportBuilder",
    "format_record",
    "format_report",
    "parse_report",
    "write_report",
    "format_json",
    "format_text",
    "get_formatter",
]
