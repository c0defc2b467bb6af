"""Tests for event file ingestion."""
import pytest

from contacttrace.core.receipt import EventFormatError
from contacttrace.graph.events import EventLog
from contacttrace.graph.ingest import graph_from_file, ingest_file, parse_line, read_events

from conftest import read_receipts


class TestParseLine:
    """Tests for parse_line."""

    def test_whitespace_triple(self):
        """Three integers separated by whitespace."""
        assert parse_line("1 2 4") == (1, 2, 4)
        assert parse_line("  -3\t7   100 \n") == (-3, 7, 100)

    def test_json_event(self):
        """JSON object with a/b/timestamp keys."""
        assert parse_line('{"a": 1, "b": 2, "timestamp": 4}') == (1, 2, 4)

    def test_json_aliases(self):
        """c1/c2/t keys are accepted."""
        assert parse_line('{"c1": 5, "c2": 6, "t": 9}') == (5, 6, 9)

    def test_wrong_field_count(self):
        """Two fields is a format error."""
        with pytest.raises(EventFormatError) as exc_info:
            parse_line("1 2", line_no=3)
        assert exc_info.value.line_no == 3

    def test_non_integer(self):
        """Non-integer fields are rejected."""
        with pytest.raises(EventFormatError):
            parse_line("1 two 3")

    def test_json_missing_field(self):
        """JSON without a timestamp is rejected."""
        with pytest.raises(EventFormatError):
            parse_line('{"a": 1, "b": 2}')

    def test_json_non_integer_field(self):
        """JSON string or bool values are rejected."""
        with pytest.raises(EventFormatError):
            parse_line('{"a": "1", "b": 2, "t": 3}')
        with pytest.raises(EventFormatError):
            parse_line('{"a": true, "b": 2, "t": 3}')

    def test_bad_json(self):
        """Broken JSON is a format error, not a JSONDecodeError."""
        with pytest.raises(EventFormatError):
            parse_line('{"a": 1,')


class TestReadEvents:
    """Tests for reading whole files."""

    def test_skips_comments_and_blanks(self, tmp_path):
        """Comment and blank lines are ignored."""
        path = tmp_path / "events.txt"
        path.write_text("# header\n\n1 2 3\n  \n{\"a\": 2, \"b\": 3, \"t\": 5}\n")
        assert read_events(str(path)) == [(1, 2, 3), (2, 3, 5)]

    def test_reports_line_number(self, tmp_path):
        """Errors carry the 1-based file line number."""
        path = tmp_path / "events.txt"
        path.write_text("1 2 3\n# ok\n4 5\n")
        with pytest.raises(EventFormatError) as exc_info:
            read_events(str(path))
        assert exc_info.value.line_no == 3

    def test_utf8_comments(self, tmp_path):
        """Files are read as UTF-8 whatever the locale."""
        path = tmp_path / "events.txt"
        path.write_text("# K\u00f6ln \u2192 M\u00fcnchen\n1 2 3\n", encoding="utf-8")
        assert read_events(str(path)) == [(1, 2, 3)]

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_events(str(tmp_path / "nope.txt"))

    def test_ingest_file_summary(self, event_file, capsys):
        """ingest_file appends every event and emits events_loaded."""
        log = EventLog()
        summary = ingest_file(str(event_file), log)

        assert summary["total"] == 3
        assert summary["recorded"] == 3
        assert len(log) == 3
        receipts = read_receipts(capsys.readouterr().out)
        assert receipts[-1]["receipt_type"] == "events_loaded"

    def test_graph_from_file(self, event_file, capsys):
        """graph_from_file returns a frozen graph for the file."""
        graph = graph_from_file(str(event_file))
        assert graph.stats()["nodes"] == 5
        assert graph.event_count == 3
