"""
End-to-end grading tests: preflight, module ordering, score bounds and
determinism of the feedback log.
"""

import copy
import json

import pytest

from grading.engine import RULE_SEQUENCE, find_invalid_cells, grade_workbook
from grading.loader import load_workbook
from grading.messages import MessageCatalog
from models.workbook import Sheet, Workbook

CUTOUT = "---- Automated design check complete; instructor review of the design report follows ----"


# ── Passing design ────────────────────────────────────────────────────────


class TestPassingDesign:

    def test_full_marks(self, make_workbook):
        result = grade_workbook(make_workbook())
        assert result.score == 10
        assert result.max_score == 10
        assert result.lines() == ["Team3_Design.xlsm", "Score: 10/10", CUTOUT]
        assert result.score_line == "Score: 10/10"
        assert result.cutout_line == CUTOUT

    def test_unnamed_workbook_has_no_header_line(self, make_workbook):
        result = grade_workbook(make_workbook(file_name=None))
        assert result.lines() == ["Score: 10/10", CUTOUT]

    def test_deterministic(self, make_workbook):
        overrides = {"main": {"K33": 500, "C19": 3.5, "AB8": 120}, "gear": {"N19": 220}}
        first = grade_workbook(make_workbook(overrides))
        second = grade_workbook(make_workbook(overrides))
        assert first.feedback_log == second.feedback_log


# ── Accumulation ──────────────────────────────────────────────────────────


class TestAccumulation:

    def test_module_order_in_log(self, make_workbook):
        wb = make_workbook({
            "aero": {"C6": 1.8},
            "main": {"K33": 500, "K38": 3000, "Y37": 370, "G26": 7, "M10": 0.2, "O16": 11000, "AB8": 120},
            "gear": {"N19": 220},
        })
        result = grade_workbook(wb)
        lines = result.lines()
        order = [
            "Aero tab: takeoff CLmax",
            "Leg 1:",
            "Takeoff ground roll",
            "Mission radius",
            "Engine diameter",
            "Static margin",
            "Fuel required",
            "Recurring cost",
            "Rotation speed",
            "Score:",
        ]
        positions = [next(i for i, line in enumerate(lines) if line.startswith(p)) for p in order]
        assert positions == sorted(positions)
        # aero, thrust, constraints, attachments, stability, fuel, cost, gear
        assert result.score == 2

    def test_score_never_negative(self, make_workbook, rules):
        wb = make_workbook({
            "aero": {"C5": 0.2, "C6": 2.0, "C10": 0.001},
            "main": {"K38": 3000, "Y37": 300, "G26": 7, "M10": 0.5, "O16": 11000, "AB8": 150},
            "gear": {"N19": 250},
        })
        assert grade_workbook(wb).score == 0

        result = grade_workbook(wb, rules=rules.model_copy(update={"base_score": 5}))
        assert result.score == 0
        assert result.score_line == "Score: 0/10"

    def test_every_module_runs_once(self):
        names = [name for name, _ in RULE_SEQUENCE]
        assert names == [
            "aero", "mission", "thrust", "constraints", "attachments",
            "stability", "fuel", "cost", "landing_gear",
        ]

    def test_custom_message_catalog(self, make_workbook):
        catalog = MessageCatalog.model_validate({"summary": {"score": "Total %d"}})
        result = grade_workbook(make_workbook(), messages=catalog)
        assert result.score_line == "Total 10"
        assert result.cutout_line == CUTOUT


# ── Preflight ─────────────────────────────────────────────────────────────


class TestPreflight:

    def test_excel_errors_zero_the_score(self, make_workbook):
        wb = make_workbook({"main": {"B5": " #div/0! ", "D2": "#N/A", "C7": float("inf")}})
        result = grade_workbook(wb)
        expected = (
            "Invalid for analysis: Excel errors in Main sheet at D2, B5, C7. "
            "Correct the errors and resubmit."
        )
        assert result.score == 0
        assert result.feedback_log == expected
        assert result.score_line == expected
        assert result.cutout_line == ""

    @pytest.mark.parametrize(
        "marker", ["#DIV/0!", "#VALUE!", "#REF!", "#NAME?", "#NUM!", "#NULL!", "#N/A", "#value!"],
    )
    def test_every_marker_is_detected(self, marker):
        wb = Workbook(sheets={"main": Sheet(rows=[[None, marker]])})
        assert find_invalid_cells(wb) == ["B1"]

    def test_nan_is_invalid(self):
        wb = Workbook(sheets={"main": Sheet(rows=[[float("nan")]])})
        assert find_invalid_cells(wb) == ["A1"]

    def test_ordinary_text_is_not_an_error(self):
        wb = Workbook(sheets={"main": Sheet(rows=[["#1 design", "N/A", "#REF"]])})
        assert find_invalid_cells(wb) == []

    def test_other_sheets_are_not_scanned(self, make_workbook):
        result = grade_workbook(make_workbook({"geom": {"A1": "#REF!"}}))
        assert result.score == 10

    def test_infinity_off_the_main_sheet_is_graded(self, passing_data):
        data = copy.deepcopy(passing_data)
        data["sheets"]["main"]["D18"] = 20
        data["sheets"].setdefault("geom", {}).update({"K15": float("inf"), "M152": 2, "L155": 20, "L38": 18})
        wb = load_workbook(json.dumps(data))
        assert wb.sheet("geom").value_at(15, 11) == float("inf")

        result = grade_workbook(wb)
        assert result.score_line.startswith("Score:")
        assert "Strake does not blend into the wing leading edge." not in result.lines()

    def test_no_main_sheet(self):
        result = grade_workbook(Workbook(file_name="empty.xlsm"))
        assert 0 <= result.score <= 10
        assert result.lines()[0] == "empty.xlsm"
