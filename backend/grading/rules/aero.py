"""
Aero tab checks. Each violation costs a point on its own, so the delta here
ranges from 0 to -3.
"""

from grading import layout
from grading.cells import CellReader, cell_ref
from grading.formatter import format_message
from grading.messages import MessageCatalog
from models.result import RuleResult
from models.rules import RuleConfig
from models.workbook import Workbook


def run_aero_checks(workbook: Workbook, rules: RuleConfig, messages: MessageCatalog) -> RuleResult:
    cells = CellReader(workbook)
    limits = rules.aero
    text = messages.aero
    feedback: list[str] = []
    delta = 0

    tc = cells.number(layout.WING_THICKNESS_RATIO)
    if tc is not None and not (limits.tc_min <= tc <= limits.tc_max):
        feedback.append(format_message(text.thickness, tc, limits.tc_min, limits.tc_max))
        delta -= 1

    cl_max = cells.number(layout.TAKEOFF_CL_MAX)
    if cl_max is not None and not (cl_max <= limits.cl_max_limit):
        feedback.append(format_message(text.cl_max, cl_max, limits.cl_max_limit))
        delta -= 1

    # one deduction for the whole CD0 sweep, reported at the first offending column
    for col in layout.CD0_COLUMNS:
        cd0 = cells.number_at(layout.AERO, layout.CD0_ROW, col)
        if cd0 is not None and not (cd0 >= limits.cd0_min):
            feedback.append(format_message(text.cd0, cell_ref(layout.CD0_ROW - 1, col - 1), cd0, limits.cd0_min))
            delta -= 1
            break

    return RuleResult(delta=delta, feedback=tuple(feedback))
