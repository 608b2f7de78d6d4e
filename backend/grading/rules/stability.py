from grading import layout
from grading.cells import CellReader
from grading.formatter import format_message
from grading.messages import MessageCatalog
from models.result import RuleResult
from models.rules import RuleConfig
from models.workbook import Workbook


def run_stability_checks(workbook: Workbook, rules: RuleConfig, messages: MessageCatalog) -> RuleResult:
    """
    Static margin, roll/yaw derivative signs and the Cl_beta/Cn_beta ratio.

    A negative but in-range static margin only earns a warning. Any failure
    (including missing derivatives) costs a single point.
    """
    cells = CellReader(workbook)
    limits = rules.stability
    text = messages.stability
    feedback: list[str] = []

    sm = cells.number(layout.STATIC_MARGIN)
    clb = cells.number(layout.CL_BETA)
    cnb = cells.number(layout.CN_BETA)
    ratio = cells.number(layout.DERIVATIVE_RATIO)

    if None in (sm, clb, cnb, ratio):
        return RuleResult(delta=-1, feedback=(text.missing, text.deduction))

    passed = True

    if not (limits.static_margin_min <= sm <= limits.static_margin_max):
        feedback.append(format_message(text.static_margin, limits.static_margin_min, limits.static_margin_max))
        passed = False
    elif sm < 0:
        feedback.append(text.static_margin_warning)

    if not (clb < limits.clb_max):
        feedback.append(format_message(text.clb, limits.clb_max))
        passed = False

    if not (cnb > limits.cnb_min):
        feedback.append(format_message(text.cnb, limits.cnb_min))
        passed = False

    if not (limits.ratio_min <= ratio <= limits.ratio_max):
        feedback.append(format_message(text.ratio, limits.ratio_min, limits.ratio_max))
        passed = False

    if not passed:
        feedback.append(text.deduction)
        return RuleResult(delta=-1, feedback=tuple(feedback))

    return RuleResult(feedback=tuple(feedback))
