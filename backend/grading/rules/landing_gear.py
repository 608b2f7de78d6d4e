from grading import layout
from grading.cells import CellReader
from grading.formatter import format_message
from grading.messages import MessageCatalog
from models.result import RuleResult
from models.rules import RuleConfig
from models.workbook import Workbook


def run_landing_gear_checks(workbook: Workbook, rules: RuleConfig, messages: MessageCatalog) -> RuleResult:
    """Nose-gear load share, tip-back and roll-over angles, rotation speed."""
    cells = CellReader(workbook)
    limits = rules.gear
    text = messages.gear
    feedback: list[str] = []

    nose = cells.number(layout.NOSE_LOAD_PERCENT)
    if nose is not None and (nose < limits.nose_load_min or nose > limits.nose_load_max):
        feedback.append(format_message(text.nose, limits.nose_load_min, limits.nose_load_max))

    tipback = cells.number(layout.TIPBACK_ANGLE)
    tipback_limit = cells.number(layout.TIPBACK_LIMIT)
    if tipback is not None and tipback_limit is not None and not (tipback < tipback_limit):
        feedback.append(text.tipback)

    rollover = cells.number(layout.ROLLOVER_ANGLE)
    rollover_limit = cells.number(layout.ROLLOVER_LIMIT)
    if rollover is not None and rollover_limit is not None and not (rollover < rollover_limit):
        feedback.append(text.rollover)

    rotation = cells.number(layout.ROTATION_SPEED)
    if rotation is not None and not (rotation < limits.rotation_speed_max):
        feedback.append(format_message(text.rotation, limits.rotation_speed_max))

    if feedback:
        feedback.append(text.deduction)
        return RuleResult(delta=-1, feedback=tuple(feedback))
    return RuleResult()
