from __future__ import annotations

import json
from typing import Dict, Iterable

from ccmetrics.core.records import FunctionRecord
from ccmetrics.reporting.report import format_report


def format_text(records: Iterable[FunctionRecord]) -> str:
    return format_report(records)


def format_json(records: Iterable[FunctionRecord], source: str) -> str:
    records_list = list(records)
    max_by_strategy: Dict[str, int] = {}
    for record in records_list:
        key = record.strategy.value
        max_by_strategy[key] = max(max_by_strategy.get(key, 0), record.complexity)
    data = {
        "source": source,
        "summary": {
            "count": len(records_list),
            "max_complexity": max_by_strategy,
        },
        "functions": [record.to_dict() for record in records_list],
    }
    return json.dumps(data, indent=2) + "\n"


def get_formatter(format_name: str):
    """Get a formatter by name."""
    formatters = {
        "text": lambda records, source: format_text(records),
        "json": format_json,
    }
    formatter = formatters.get(format_name.lower())
    if formatter is None:
        raise ValueError(f"Unknown format: {format_name}")
    return formatter
