"""
Constraint table and constraint-diagram tests.

Table mismatches share one deduction; curve failures are reported without a
deduction, and suppress that constraint's objective messages.
"""

import pytest
from pydantic import ValidationError

from grading.rules.constraints import run_constraint_checks
from models.rules import ConstraintSpec

SUMMARY = "Constraint table entries do not match the RFP requirements. -1"


def _curve(row: int, value: float) -> dict:
    return {f"{col}{row}": value for col in "KLM"}


# ── Passing design ────────────────────────────────────────────────────────


class TestPassing:

    def test_no_feedback(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook(), rules, messages)
        assert result.delta == 0
        assert result.feedback == ()


# ── Radius and payload ────────────────────────────────────────────────────


class TestRadiusAndPayload:

    def test_radius_below_threshold_is_scored(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"Y37": 370}}), rules, messages)
        assert result.delta == -1
        assert result.feedback == ("Mission radius 370.0 nm is below the 375 nm threshold.", SUMMARY)

    def test_radius_objective_is_a_message(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"Y37": 415}}), rules, messages)
        assert result.delta == 0
        assert result.feedback == ("Mission radius 415.0 nm meets the 410 nm objective.",)

    def test_fractional_payload(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"AB3": 7.5}}), rules, messages)
        assert result.delta == -1
        assert result.feedback[0] == "Payload counts for AIM-120 and AIM-9 must be integers."

    def test_near_integer_payload_is_accepted(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"AB3": 8.005}}), rules, messages)
        assert result.feedback == ()

    def test_payload_below_minimum(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"AB3": 7}}), rules, messages)
        assert result.feedback == ("Payload of 7 AIM-120 is below the 8 missile threshold.", SUMMARY)

    def test_blank_payload_counts_as_zero(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"AB3": None}}), rules, messages)
        assert result.feedback[0] == "Payload of 0 AIM-120 is below the 8 missile threshold."

    def test_payload_objective(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"AB4": 2}}), rules, messages)
        assert result.delta == 0
        assert result.feedback == ("Payload of 8 AIM-120 and 2 AIM-9 meets the objective.",)

    def test_messages_quote_configured_thresholds(self, make_workbook, rules, messages):
        limits = rules.constraints.model_copy(update={"radius_min": 400.0, "aim120_min": 10})
        revised = rules.model_copy(update={"constraints": limits})
        result = run_constraint_checks(make_workbook({"main": {"Y37": 390}}), revised, messages)
        assert result.delta == -1
        assert result.feedback == (
            "Mission radius 390.0 nm is below the 400 nm threshold.",
            "Payload of 8 AIM-120 is below the 10 missile threshold.",
            SUMMARY,
        )


# ── Table rows ────────────────────────────────────────────────────────────


class TestTableRows:

    def test_equality_mismatch(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"T6": 25000}}), rules, messages)
        assert result.delta == -1
        assert result.feedback == ("Combat Turn 1: altitude = 25000 ft, must be 30000 ft.", SUMMARY)

    def test_several_mismatches_single_deduction(self, make_workbook, rules, messages):
        wb = make_workbook({"main": {"U6": 1.0, "W9": 100, "X8": 300}})
        result = run_constraint_checks(wb, rules, messages)
        assert result.delta == -1
        assert result.feedback == (
            "Combat Turn 1: Mach = 1.00, must be 1.20.",
            "Ps1: Ps = 300 ft/s is below the 400 ft/s threshold.",
            "Ps2: AB = 100, must be 0.",
            SUMMARY,
        )

    def test_drag_index_allowed_list(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"Y12": 0.02}}), rules, messages)
        assert result.feedback == ("Takeoff: CDx = 0.0200, must be one of 0, 0.035.", SUMMARY)

    def test_drag_index_allowed_value_passes(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"Y13": 0.045}}), rules, messages)
        assert result.feedback == ()

    def test_default_beta_target(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"S6": 0.7}}), rules, messages)
        assert result.feedback == (
            "Combat Turn 1: weight fraction beta should be 0.583 (found 0.700).",
            SUMMARY,
        )

    def test_load_factor_objective(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"V7": 4.5}}), rules, messages)
        assert result.delta == 0
        assert result.feedback == ("Combat Turn 2: meets the n = 4.5 objective (n = 4.50).",)

    def test_distance_threshold_is_scored(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"X13": 5200}}), rules, messages)
        assert result.feedback == ("Landing distance 5200 ft exceeds the 5000 ft threshold.", SUMMARY)


# ── Curve gating ──────────────────────────────────────────────────────────


class TestCurveGating:

    def test_distance_objective_when_curve_passes(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"X12": 2400}}), rules, messages)
        assert result.feedback == ("Takeoff distance 2400 ft meets the 2500 ft objective.",)

    def test_distance_objective_suppressed_when_curve_fails(self, make_workbook, rules, messages):
        wb = make_workbook({"main": {"X12": 2400}, "consts": _curve(32, 1.5)})
        result = run_constraint_checks(wb, rules, messages)
        assert result.delta == 0
        assert not any("objective" in line for line in result.feedback)
        assert result.feedback == (
            "Takeoff: design T/W 1.200 is below the required T/W 1.500 at the design W/S.",
            "Design point falls below the constraint curve for: Takeoff. "
            "Move the design point into the feasible region of the constraint diagram.",
        )

    def test_mach_objective_gated_by_curve(self, make_workbook, rules, messages):
        passing = run_constraint_checks(make_workbook({"main": {"U3": 2.3}}), rules, messages)
        assert passing.feedback == ("MaxMach: meets the Mach 2.20 objective (Mach = 2.30).",)

        wb = make_workbook({"main": {"U3": 2.3}, "consts": _curve(23, 1.5)})
        failing = run_constraint_checks(wb, rules, messages)
        assert failing.feedback == (
            "Design point falls below the constraint curve for: MaxMach. "
            "Move the design point into the feasible region of the constraint diagram.",
        )

    def test_landing_wing_loading_limit(self, make_workbook, rules, messages):
        result = run_constraint_checks(make_workbook({"main": {"P13": 90}}), rules, messages)
        assert result.delta == 0
        assert result.feedback == (
            "Landing: design W/S 90.0 exceeds the landing W/S limit of 80.0.",
            "Design point falls below the constraint curve for: Landing. "
            "Move the design point into the feasible region of the constraint diagram.",
        )

    def test_many_curve_failures_use_long_suffix(self, make_workbook, rules, messages):
        consts = {}
        for row in (23, 24, 26, 27, 28, 29, 32):
            consts.update(_curve(row, 2.0))
        wb = make_workbook({"main": {"P13": 90}, "consts": consts})
        result = run_constraint_checks(wb, rules, messages)
        assert result.feedback[-1] == (
            "Design point falls below the constraint curves for: MaxMach, Supercruise, "
            "Combat Turn 1, Combat Turn 2, Ps1, Ps2, Takeoff, Landing. "
            "Most constraints are violated; revisit the design point on the constraint diagram."
        )

    def test_curve_skipped_without_design_point(self, make_workbook, rules, messages):
        wb = make_workbook({"main": {"Q13": None}, "consts": _curve(23, 1.5)})
        assert run_constraint_checks(wb, rules, messages).feedback == ()


# ── Configuration ─────────────────────────────────────────────────────────


class TestConstraintSpec:

    def test_equality_and_minimum_are_exclusive(self):
        with pytest.raises(ValidationError):
            ConstraintSpec(label="Bad", row=3, mach_eq=1.2, mach_min=1.0)

    def test_zero_equality_target_still_counts(self):
        with pytest.raises(ValidationError):
            ConstraintSpec(label="Bad", row=3, ps_eq=0, ps_min=400)

    def test_objective_requires_minimum(self):
        with pytest.raises(ValidationError):
            ConstraintSpec(label="Bad", row=3, n_obj=4.0)

    def test_beta_target_and_default_are_exclusive(self):
        with pytest.raises(ValidationError):
            ConstraintSpec(label="Bad", row=3, beta_eq=1, beta_default=True)
