"""
Mission profile checks. Advisory only, never changes the score.

Each of the nine legs is compared against its envelope in the mission-leg
table. A required value that is blank fails its leg (reported as NaN).
"""

from typing import Optional

from grading import layout
from grading.cells import CellReader
from grading.formatter import format_message
from grading.messages import MessageCatalog
from models.result import RuleResult
from models.rules import MissionLeg, MissionTolerances, RuleConfig
from models.workbook import Workbook


def _off_target(value: Optional[float], target: float, tol: float) -> bool:
    return value is None or abs(value - target) > tol


def _below(value: Optional[float], minimum: float, tol: float) -> bool:
    return value is None or value < minimum - tol


def _between(value, low, high, tol) -> bool:
    if value is None or low is None or high is None:
        return False
    return low - tol <= value <= high + tol


def _leg_envelope_failed(
    leg: MissionLeg,
    values: dict[str, Optional[float]],
    supercruise_mach: Optional[float],
    tol: MissionTolerances,
) -> bool:
    alt, mach, ab = values["alt"], values["mach"], values["ab"]
    checks = []
    if leg.alt_eq is not None:
        checks.append(_off_target(alt, leg.alt_eq, tol.altitude))
    if leg.alt_min is not None:
        checks.append(_below(alt, leg.alt_min, tol.altitude))
    if leg.mach_eq is not None:
        checks.append(_off_target(mach, leg.mach_eq, tol.mach))
    if leg.mach_min is not None:
        checks.append(_below(mach, leg.mach_min, tol.mach))
    if leg.mach_supercruise:
        checks.append(supercruise_mach is None or _off_target(mach, supercruise_mach, tol.mach))
    if leg.ab_eq is not None:
        checks.append(_off_target(ab, leg.ab_eq, tol.afterburner))
    if leg.dist_min is not None:
        checks.append(_below(values["dist"], leg.dist_min, tol.distance))
    if leg.time_eq is not None:
        checks.append(_off_target(values["time"], leg.time_eq, tol.time))
    if leg.time_min is not None:
        checks.append(_below(values["time"], leg.time_min, tol.time))
    return any(checks)


def run_mission_checks(workbook: Workbook, rules: RuleConfig, messages: MessageCatalog) -> RuleResult:
    cells = CellReader(workbook)
    tol = rules.mission.tolerances
    text = messages.mission
    feedback: list[str] = []

    supercruise_mach = cells.number(layout.SUPERCRUISE_MACH)
    columns = layout.MISSION_LEG_COLUMNS
    table = {
        name: cells.row_numbers(layout.MAIN, row, columns)
        for name, row in layout.MISSION_ROWS.items()
    }

    def leg_values(number: int) -> dict[str, Optional[float]]:
        idx = number - 1
        if idx < 0 or idx >= len(columns):
            return {name: None for name in table}
        return {name: values[idx] for name, values in table.items()}

    for leg in rules.mission.legs:
        values = leg_values(leg.number)

        if leg.between_neighbors:
            prev, nxt = leg_values(leg.number - 1), leg_values(leg.number + 1)
            if not _between(values["alt"], prev["alt"], nxt["alt"], tol.altitude):
                feedback.append(format_message(
                    text.between_altitude, leg.number, leg.number - 1, leg.number + 1,
                    leg.number, values["alt"], leg.number - 1, prev["alt"], leg.number + 1, nxt["alt"],
                ))
            if not _between(values["mach"], prev["mach"], nxt["mach"], tol.mach):
                feedback.append(format_message(
                    text.between_mach, leg.number, leg.number - 1, leg.number + 1,
                    leg.number, values["mach"], leg.number - 1, prev["mach"], leg.number + 1, nxt["mach"],
                ))
            if leg.ab_eq is not None and _off_target(values["ab"], leg.ab_eq, tol.afterburner):
                feedback.append(format_message(text.afterburner, leg.number, leg.ab_eq, values["ab"]))
            continue

        if _leg_envelope_failed(leg, values, supercruise_mach, tol):
            template = text.legs.get(leg.number)
            if template:
                feedback.append(format_message(template, *(values[name] for name in leg.report)))

    if feedback:
        feedback.append(text.summary)

    return RuleResult(delta=0, feedback=tuple(feedback))
