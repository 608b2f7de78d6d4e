"""
Constraint table and constraint-diagram checks.

Covers the mission radius, payload, every named row of the constraint block
and the interpolated T/W requirement at the design W/S. Table mismatches
share a single one-point deduction; curve failures are reported but not
scored. An objective message for a constraint whose curve check failed is
dropped so a design never both "meets" and misses the same requirement.
"""

import math
from typing import Optional

from grading import layout
from grading.cells import CellReader, CellRef, is_finite
from grading.formatter import format_message
from grading.messages import ConstraintMessages, MessageCatalog
from grading.pchip import pchip
from models.result import RuleResult
from models.rules import ConstraintSpec, ConstraintTolerances, RuleConfig
from models.workbook import Workbook


def _nearest_int(value: float, tol: float) -> Optional[int]:
    rounded = math.floor(value + 0.5)
    return rounded if abs(value - rounded) <= tol else None


def _allowed_list(values: list[float]) -> str:
    return ", ".join(f"{v:.3f}".rstrip("0").rstrip(".") for v in values)


def _target_beta(cells: CellReader) -> float:
    # mid-mission weight fraction: half the available fuel burned
    available = cells.number(layout.FUEL_AVAILABLE)
    capacity = cells.number(layout.FUEL_CAPACITY)
    if available is None or capacity is None or capacity == 0:
        return math.nan
    return 1 - available / (2 * capacity)


class _SpecLog:
    """Feedback for one constraint row; objective lines can be withdrawn."""

    def __init__(self):
        self.entries: list[tuple[str, bool]] = []
        self.failures = 0

    def fail(self, line: str):
        self.entries.append((line, False))
        self.failures += 1

    def objective(self, line: str):
        self.entries.append((line, True))

    def lines(self, keep_objectives: bool) -> list[str]:
        return [line for line, is_objective in self.entries if keep_objectives or not is_objective]


def _check_table_row(
    spec: ConstraintSpec,
    values: dict[str, Optional[float]],
    target_beta: float,
    tol: ConstraintTolerances,
    text: ConstraintMessages,
) -> _SpecLog:
    log = _SpecLog()
    label = spec.label
    mach, alt, n = values["mach"], values["alt"], values["n"]
    ab, ps, cdx, beta = values["ab"], values["ps"], values["cdx"], values["beta"]

    if spec.mach_eq is not None:
        if not is_finite(mach) or abs(mach - spec.mach_eq) > tol.mach:
            log.fail(format_message(text.mach_eq, label, mach, spec.mach_eq))
    elif spec.mach_min is not None and mach is not None:
        if mach < spec.mach_min - tol.mach:
            log.fail(format_message(text.mach_min, label, mach, spec.mach_min))
        elif spec.mach_obj is not None and mach >= spec.mach_obj - tol.mach:
            log.objective(format_message(text.mach_objective, label, spec.mach_obj, mach))

    if spec.alt_eq is not None:
        if alt is not None and abs(alt - spec.alt_eq) > tol.altitude:
            log.fail(format_message(text.alt_eq, label, alt, spec.alt_eq))
    elif spec.alt_min is not None:
        if alt is not None and alt < spec.alt_min - tol.altitude:
            log.fail(format_message(text.alt_min, label, alt, spec.alt_min))

    if spec.n_eq is not None:
        if n is not None and abs(n - spec.n_eq) > tol.load_factor:
            log.fail(format_message(text.n_eq, label, n, spec.n_eq))
    elif spec.n_min is not None and n is not None:
        if n < spec.n_min - tol.load_factor:
            log.fail(format_message(text.n_min, label, n, spec.n_min))
        elif spec.n_obj is not None and n >= spec.n_obj - tol.load_factor:
            log.objective(format_message(text.n_objective, label, spec.n_obj, n))

    if spec.ab_eq is not None and ab is not None and abs(ab - spec.ab_eq) > tol.afterburner:
        log.fail(format_message(text.ab_eq, label, ab, spec.ab_eq))

    if spec.ps_eq is not None:
        if ps is not None and abs(ps - spec.ps_eq) > tol.specific_excess_power:
            log.fail(format_message(text.ps_eq, label, ps, spec.ps_eq))
    elif spec.ps_min is not None and ps is not None:
        if ps < spec.ps_min - tol.specific_excess_power:
            log.fail(format_message(text.ps_min, label, ps, spec.ps_min))
        elif spec.ps_obj is not None and ps >= spec.ps_obj - tol.specific_excess_power:
            log.objective(format_message(text.ps_objective, label, spec.ps_obj, ps))

    if spec.beta_eq is not None or spec.beta_default:
        target = spec.beta_eq if spec.beta_eq is not None else target_beta
        if not math.isfinite(target) or not is_finite(beta) or abs(beta - target) > tol.beta:
            log.fail(format_message(text.beta_eq, label, target, beta))

    if spec.cdx_eq is not None:
        if cdx is None or abs(cdx - spec.cdx_eq) > tol.drag_index:
            log.fail(format_message(text.cdx_eq, label, cdx, spec.cdx_eq))
    elif spec.cdx_allowed:
        matched = is_finite(cdx) and any(abs(cdx - v) < tol.drag_index for v in spec.cdx_allowed)
        if not matched:
            log.fail(format_message(text.cdx_allowed, label, cdx, _allowed_list(spec.cdx_allowed)))

    return log


def run_constraint_checks(workbook: Workbook, rules: RuleConfig, messages: MessageCatalog) -> RuleResult:
    cells = CellReader(workbook)
    config = rules.constraints
    tol = config.tolerances
    text = messages.constraint

    feedback: list[str] = []
    fail_count = 0

    # -- mission radius --
    radius = cells.number(layout.MISSION_RADIUS)
    if radius is not None and radius < config.radius_min - tol.distance:
        feedback.append(format_message(text.radius_low, radius, config.radius_min))
        fail_count += 1
    elif radius is not None and radius >= config.radius_objective - tol.distance:
        feedback.append(format_message(text.radius_objective, radius, config.radius_objective))

    # -- payload (blank counts as zero) --
    aim120_raw = cells.number(layout.AIM120_COUNT)
    aim9_raw = cells.number(layout.AIM9_COUNT)
    aim120 = _nearest_int(aim120_raw if is_finite(aim120_raw) else 0.0, tol.payload_integer)
    aim9 = _nearest_int(aim9_raw if is_finite(aim9_raw) else 0.0, tol.payload_integer)
    if aim120 is None or aim9 is None:
        feedback.append(text.payload_integer)
        fail_count += 1
    elif aim120 < config.aim120_min:
        feedback.append(format_message(text.payload_low, aim120, config.aim120_min))
        fail_count += 1
    elif aim9 >= config.aim9_objective:
        feedback.append(format_message(text.payload_objective, aim120, aim9))

    # -- design point and curve axis --
    ws_design = cells.number(layout.DESIGN_WING_LOADING)
    tw_design = cells.number(layout.DESIGN_THRUST_LOADING)
    consts = workbook.sheet(layout.CONSTS)
    ws_axis = [consts.value_at(layout.WING_LOADING_AXIS_ROW, col) for col in layout.CURVE_COLUMNS]
    target_beta = _target_beta(cells)

    curve_failures: list[str] = []
    curve_messages: list[str] = []
    distance_objectives: list[tuple[str, str]] = []

    for spec in config.specs:
        values = {
            name: cells.number_at(layout.MAIN, spec.row, col)
            for name, col in layout.CONSTRAINT_COLUMNS.items()
        }
        log = _check_table_row(spec, values, target_beta, tol, text)

        if spec.distance is not None:
            distance = cells.number(CellRef(layout.MAIN, spec.distance.cell))
            if distance is not None and distance > spec.distance.threshold + tol.distance:
                template = text.distance_high.get(spec.label)
                if template:
                    log.fail(format_message(template, distance, spec.distance.threshold))
                else:
                    log.failures += 1
            elif distance is not None and distance <= spec.distance.objective + tol.distance:
                template = text.distance_objective.get(spec.label)
                if template:
                    line = format_message(template, distance, spec.distance.objective)
                    distance_objectives.append((spec.label, line))

        curve_failed = False
        if spec.curve_row is not None and is_finite(ws_design) and is_finite(tw_design):
            tw_curve = [consts.value_at(spec.curve_row, col) for col in layout.CURVE_COLUMNS]
            required_tw = pchip(ws_axis, tw_curve, ws_design)
            if required_tw is not None and tw_design < required_tw:
                curve_failed = True
                if spec.label not in curve_failures:
                    curve_failures.append(spec.label)
                detail = text.curve_detail.get(spec.label)
                if detail:
                    curve_messages.append(format_message(detail, tw_design, required_tw))

        feedback.extend(log.lines(keep_objectives=not curve_failed))
        fail_count += log.failures

    # -- landing W/S limit, reported with the curve failures --
    if is_finite(ws_design):
        ws_limit = cells.number(layout.LANDING_WING_LOADING_LIMIT)
        if ws_limit is not None and ws_design > ws_limit:
            if config.landing_limit_label not in curve_failures:
                curve_failures.append(config.landing_limit_label)
            curve_messages.append(format_message(text.landing_curve, ws_design, ws_limit))

    if curve_failures:
        plural = "s" if len(curve_failures) > 1 else ""
        summary = format_message(text.curve_failure, plural, ", ".join(curve_failures))
        if len(curve_failures) > config.many_curve_failures:
            summary += text.curve_suffix_many
        else:
            summary += text.curve_suffix_few
        curve_messages.append(summary)

    feedback.extend(line for label, line in distance_objectives if label not in curve_failures)
    feedback.extend(curve_messages)

    if fail_count > 0:
        feedback.append(text.summary)
        return RuleResult(delta=-1, feedback=tuple(feedback))
    return RuleResult(feedback=tuple(feedback))
