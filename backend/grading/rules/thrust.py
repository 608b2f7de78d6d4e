from grading import layout
from grading.cells import CellReader, is_finite
from grading.formatter import format_message
from grading.messages import MessageCatalog
from models.result import RuleResult
from models.rules import RuleConfig
from models.workbook import Workbook


def run_thrust_checks(workbook: Workbook, rules: RuleConfig, messages: MessageCatalog) -> RuleResult:
    """
    Thrust available vs. drag at each mission station, then takeoff ground roll.

    Any station shortfall costs one point and ends the module; the takeoff
    roll is only judged when every station has excess thrust.
    """
    cells = CellReader(workbook)
    text = messages.thrust

    shortfalls = 0
    for drag_ref, available_ref in layout.THRUST_STATIONS:
        drag = cells.number(drag_ref)
        available = cells.number(available_ref)
        if not is_finite(drag) or not is_finite(available):
            continue
        if available <= drag:
            shortfalls += 1

    if shortfalls > 0:
        return RuleResult(delta=-1, feedback=(format_message(text.shortfall, shortfalls),))

    takeoff_distance = cells.number(layout.TAKEOFF_DISTANCE)
    takeoff_required = cells.number(layout.TAKEOFF_REQUIRED)
    if (
        takeoff_distance is not None
        and takeoff_required is not None
        and takeoff_distance > takeoff_required
    ):
        return RuleResult(delta=-1, feedback=(text.takeoff_roll,))

    return RuleResult()
