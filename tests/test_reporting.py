"""
Tests for report serialization.
"""

import pytest
import json
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ccmetrics.core.records import FunctionRecord, Strategy
from ccmetrics.errors import ReportWriteError
from ccmetrics.reporting import (
    ReportBuilder,
    format_json,
    format_record,
    format_report,
    parse_report,
    write_report,
)


RECORDS = [
    FunctionRecord(line=4, name="gcd", complexity=2, strategy=Strategy.DECISION),
    FunctionRecord(line=14, name="isPrime", complexity=8, strategy=Strategy.GRAPH),
    FunctionRecord(line=0, name="<anonymous>", complexity=1, strategy=Strategy.DECISION),
]


class TestFunctionRecord:
    """Tests for record construction."""

    def test_create_strips_whitespace(self):
        """Test that names never contain whitespace."""
        record = FunctionRecord.create("operator ==", 3, 1, Strategy.GRAPH)
        assert record.name == "operator=="

    def test_create_defaults(self):
        """Test defaults for unknown line and missing name."""
        record = FunctionRecord.create(None, None, 1, Strategy.DECISION)
        assert record.line == 0
        assert record.name == "<anonymous>"


class TestTextReport:
    """Tests for the unified text report."""

    def test_format_record(self):
        """Test the line schema."""
        assert format_record(RECORDS[0]) == "4 gcd 2 decision"

    def test_empty_report(self):
        """Test that no records give zero lines."""
        assert format_report([]) == ""
        assert parse_report("") == []

    def test_round_trip_preserves_order(self):
        """Test parse(serialize(records)) == records."""
        assert parse_report(format_report(RECORDS)) == RECORDS

    def test_parse_rejects_malformed_lines(self):
        """Test that malformed lines raise ValueError."""
        with pytest.raises(ValueError):
            parse_report("4 gcd 2\n")
        with pytest.raises(ValueError):
            parse_report("4 gcd two decision\n")
        with pytest.raises(ValueError):
            parse_report("4 gcd 2 cfg\n")


class TestReportOutput:
    """Tests for writing report artifacts."""

    def test_write_appends(self, tmp_path):
        """Test that successive translation units are appended."""
        path = str(tmp_path / "output.cy")
        write_report(path, format_report(RECORDS[:1]))
        write_report(path, format_report(RECORDS[1:]))

        with open(path, encoding="utf-8") as f:
            assert parse_report(f.read()) == RECORDS

    def test_write_overwrites(self, tmp_path):
        """Test append=False replaces earlier content."""
        path = str(tmp_path / "output.cy")
        write_report(path, format_report(RECORDS))
        write_report(path, format_report(RECORDS[:1]), append=False)

        with open(path, encoding="utf-8") as f:
            assert parse_report(f.read()) == RECORDS[:1]

    def test_write_failure(self, tmp_path):
        """Test that an unopenable path raises ReportWriteError."""
        path = str(tmp_path / "missing" / "output.cy")
        with pytest.raises(ReportWriteError):
            write_report(path, format_report(RECORDS))

    def test_builder_flushes_once(self, tmp_path):
        """Test that the builder writes its batch and resets."""
        path = str(tmp_path / "output.cy")
        builder = ReportBuilder()
        builder.extend(RECORDS[:2])
        builder.add(RECORDS[2])

        assert builder.flush(path) == 3
        assert len(builder) == 0
        with open(path, encoding="utf-8") as f:
            assert parse_report(f.read()) == RECORDS

    def test_failed_flush_keeps_existing_lines(self, tmp_path):
        """Test that a failed write leaves flushed lines intact."""
        path = tmp_path / "output.cy"
        write_report(str(path), format_report(RECORDS[:1]))
        before = path.read_text(encoding="utf-8")

        builder = ReportBuilder()
        builder.extend(RECORDS)
        with pytest.raises(ReportWriteError):
            builder.flush(str(tmp_path / "missing" / "output.cy"))

        assert path.read_text(encoding="utf-8") == before
        assert len(builder) == 3


class TestJSONFormatter:
    """Tests for the JSON rendering."""

    def test_json_summary(self):
        """Test counts and per-strategy maxima."""
        data = json.loads(format_json(RECORDS, "sample.c"))

        assert data["source"] == "sample.c"
        assert data["summary"]["count"] == 3
        assert data["summary"]["max_complexity"] == {"decision": 2, "graph": 8}
        assert data["functions"][1] == {
            "line": 14,
            "name": "isPrime",
            "complexity": 8,
            "strategy": "graph",
        }
