"""Tests for reference-log normalization and comparison."""

from grading.baseline import MISDECODED_GE, MISDECODED_LE, compare_logs, normalize_line, normalize_log


class TestNormalize:

    def test_repairs_misdecoded_signs(self):
        line = f"Leg 3: Must be {MISDECODED_GE}35,000 ft, Mach {MISDECODED_LE} 0.9"
        assert normalize_line(line) == "Leg 3: Must be ≥35,000 ft, Mach ≤ 0.9"

    def test_strips_carriage_returns_and_trailing_space(self):
        assert normalize_line("Score: 9/10 \r") == "Score: 9/10"
        assert normalize_line(None) == ""

    def test_drops_blank_and_header_lines(self):
        log = "Team3.xlsm\n\nGE 3_Smith\nge 5_Jones\nScore: 9/10\r\n   \n"
        assert normalize_log(log) == ["Score: 9/10"]

    def test_drops_lines_naming_the_workbook(self):
        log = ["Results for team3 design", "Score: 9/10"]
        assert normalize_log(log, "Team3") == ["Score: 9/10"]


class TestCompare:

    def test_identical_logs_match(self):
        result = compare_logs(["a", "b", "c"], "a\nb\nc", "Team3.xlsm")
        assert result.mismatches == 0
        assert result.outcome == "Match: Team3.xlsm"
        assert [row.match for row in result.rows] == [True, True, True]
        assert [row.index for row in result.rows] == [1, 2, 3]

    def test_extra_actual_lines_are_realigned(self):
        result = compare_logs(["a", "b", "c"], ["a", "x", "y", "b", "c"], "t.xlsm")
        assert result.mismatches == 2
        assert result.outcome == "2 mismatched lines for t.xlsm"
        assert [(r.expected, r.actual, r.match) for r in result.rows] == [
            ("a", "a", True),
            ("b", "x", False),
            ("b", "y", False),
            ("b", "b", True),
            ("c", "c", True),
        ]

    def test_changed_line_advances_both(self):
        result = compare_logs(["a", "b", "c"], ["a", "B", "c"], "t.xlsm")
        assert result.mismatches == 1
        assert result.outcome == "1 mismatched line for t.xlsm"

    def test_realignment_is_bounded(self):
        actual = ["a"] + [f"extra {i}" for i in range(11)] + ["b"]
        result = compare_logs(["a", "b"], actual, "t.xlsm")
        # "b" sits 11 lines ahead, one past the lookahead window
        assert result.rows[1].expected == "b"
        assert result.rows[1].actual == "extra 0"
        assert result.mismatches == 12

    def test_missing_actual_lines(self):
        result = compare_logs(["a", "b", "c"], ["a"], "t.xlsm")
        assert result.mismatches == 2
        assert result.rows[-1].actual == ""

    def test_workbook_header_ignored_on_actual_side(self):
        result = compare_logs(["Score: 10/10"], ["Team3_Design.xlsm", "Score: 10/10"], "Team3_Design.xlsm")
        assert result.mismatches == 0
