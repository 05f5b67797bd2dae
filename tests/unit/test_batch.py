"""Tests for the batch parse entry point."""

from __future__ import annotations

import logging

import pytest

from usageparser import parse
from usageparser.models.usage_record import UsageRecord


class TestParseSingle:
    def test_single_string_gives_one_result(self):
        result = parse("7291,293451")
        assert isinstance(result, list)
        assert len(result) == 1
        assert result[0].to_dict() == {
            "id": 7291,
            "dmcc": None,
            "ip": None,
            "mnc": None,
            "bytes_used": 293451,
            "cellid": None,
        }

    def test_empty_string_gives_one_placeholder(self):
        result = parse("")
        assert len(result) == 1
        placeholder = result[0]
        assert placeholder.failed
        assert placeholder.id is None
        assert placeholder.bytes_used is None

    def test_none_gives_one_placeholder(self):
        result = parse(None)
        assert len(result) == 1
        assert result[0].failed


class TestParseBatch:
    def test_mixed_batch_keeps_order_and_length(self):
        lines = [
            "4,0d39f,0,495594,214",
            "16,be833279000000c063e5e63d",
            "9991,2935",
            "a,s",
        ]
        result = parse(lines)
        assert len(result) == len(lines)
        assert [r.failed for r in result] == [False, False, False, True]

        extended, hexed, basic, bad = result
        assert (extended.id, extended.dmcc, extended.mnc, extended.bytes_used, extended.cellid) == (
            4, "0d39f", 0, 495594, 214,
        )
        assert (hexed.id, hexed.mnc, hexed.bytes_used, hexed.cellid, hexed.ip) == (
            16, 48771, 12921, 192, "99.229.230.61",
        )
        assert (basic.id, basic.bytes_used) == (9991, 2935)
        assert bad.id is None
        assert "error" in bad.to_dict()

    def test_each_line_gets_its_own_record(self):
        result = parse(["1,10", "2,20"])
        assert result[0] is not result[1]
        assert [r.bytes_used for r in result] == [10, 20]

    def test_returned_records_are_independent_of_later_parses(self):
        first = parse("7291,293451")[0]
        first.merge({"bytes_used": 1, "note": "edited"})
        again = parse("7291,293451")[0]
        assert again.bytes_used == 293451
        assert again.extra_fields == {}

    def test_empty_sequence(self):
        assert parse([]) == []

    def test_tuple_input(self):
        assert [r.id for r in parse(("7291,1", "7194,x,1,2,3"))] == [7291, 7194]

    @pytest.mark.parametrize(
        "line",
        ["1," + "9" * 5000, "4,b," + "9" * 5000, "1" * 5000 + ",30"],
    )
    def test_digit_runs_past_conversion_limit_never_raise(self, line):
        result = parse([line, "3,30"])
        assert len(result) == 2
        assert result[1].to_dict()["bytes_used"] == 30

    def test_long_numeric_fields_degrade_to_null(self):
        basic, extended = parse(["1," + "9" * 5000, "4,b," + "9" * 5000])
        assert (basic.id, basic.bytes_used, basic.failed) == (1, None, False)
        assert (extended.dmcc, extended.mnc, extended.failed) == ("b", None, False)

    def test_long_id_becomes_placeholder(self):
        assert parse("1" * 5000 + ",30")[0].failed

    @pytest.mark.parametrize("bad", ["", "a,s", "7291", 42, None])
    def test_bad_line_never_aborts_batch(self, bad):
        result = parse(["1,10", bad, "3,30"])
        assert [r.failed for r in result] == [False, True, False]
        assert isinstance(result[1], UsageRecord)


class TestFailureLogging:
    def test_failed_line_logged_at_warning(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="usageparser.parsing.batch"):
            parse("a,s")
        assert [r.levelno for r in caplog.records] == [logging.WARNING]
        assert "a,s" in caplog.records[0].getMessage()

    def test_quiet_mode_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="usageparser.parsing.batch"):
            parse("a,s", log_failures=False)
        assert [r.levelno for r in caplog.records] == [logging.DEBUG]

    def test_valid_line_not_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="usageparser.parsing.batch"):
            parse("7291,293451")
        assert caplog.records == []
