"""
Complexity report artifact.

One record per line::

    <line> <name> <complexity> <strategy>

Records keep discovery order. A translation unit's records are written in
a single call, appended to the artifact by default.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from ccmetrics.core.records import FunctionRecord, Strategy
from ccmetrics.errors import ReportWriteError

logger = logging.getLogger(__name__)


def format_record(record: FunctionRecord) -> str:
    return f"{record.line} {record.name} {record.complexity} {record.strategy.value}"


def format_report(records: Iterable[FunctionRecord]) -> str:
    return "".join(format_record(record) + "\n" for record in records)


def parse_report(text: str) -> List[FunctionRecord]:
    records = []
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        fields = line.split()
        if len(fields) != 4:
            raise ValueError(f"Malformed report line {number}: {raw!r}")
        decl_line, name, complexity, strategy = fields
        try:
            records.append(
                FunctionRecord(
                    line=int(decl_line),
                    name=name,
                    complexity=int(complexity),
                    strategy=Strategy(strategy),
                )
            )
        except ValueError as exc:
            raise ValueError(f"Malformed report line {number}: {raw!r}") from exc
    return records


def write_report(path: str, payload: str, append: bool = True) -> None:
    mode = "a" if append else "w"
    try:
        with open(path, mode, encoding="utf-8") as handle:
            handle.write(payload)
    except OSError as exc:
        raise ReportWriteError(f"Cannot write report {path}: {exc}") from exc
    logger.info("Wrote report to %s", path)


class ReportBuilder:
    """Collects one translation unit's records until they are flushed."""

    def __init__(self) -> None:
        self._records: List[FunctionRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def add(self, record: FunctionRecord) -> None:
        self._records.append(record)

    def extend(self, records: Iterable[FunctionRecord]) -> None:
        self._records.extend(records)

    def render(self) -> str:
        return format_report(self._records)

    def flush(self, path: str, append: bool = True) -> int:
        """Write all pending records and reset; returns the record count."""
        count = len(self._records)
        write_report(path, self.render(), append=append)
        self._records = []
        return count
