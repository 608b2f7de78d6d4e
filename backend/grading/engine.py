"""
Grading orchestrator.

Three phases, run once per workbook:
  1. Preflight   Excel error markers or non-finite numbers anywhere on the
                 main sheet reject the workbook with a score of 0.
  2. Rules       every rule module runs once, in RULE_SEQUENCE order, on
                 the same read-only workbook. Deltas are summed onto the
                 base score and feedback is concatenated in module order.
  3. Finalize    score clamped at 0, score line and cutout line appended,
                 everything joined into one newline-delimited log.
"""

import logging
import math
import re
from typing import Callable, Optional

from grading import layout
from grading.cells import cell_ref
from grading.formatter import format_message
from grading.messages import DEFAULT_MESSAGES, MessageCatalog
from grading.rules import (
    run_aero_checks,
    run_attachment_checks,
    run_constraint_checks,
    run_fuel_volume_checks,
    run_landing_gear_checks,
    run_mission_checks,
    run_recurring_cost_checks,
    run_stability_checks,
    run_thrust_checks,
)
from grading.specs import DEFAULT_RULES
from models.result import GradingResult, RuleResult
from models.rules import RuleConfig
from models.workbook import Workbook

logger = logging.getLogger(__name__)

RuleModule = Callable[[Workbook, RuleConfig, MessageCatalog], RuleResult]

RULE_SEQUENCE: list[tuple[str, RuleModule]] = [
    ("aero", run_aero_checks),
    ("mission", run_mission_checks),
    ("thrust", run_thrust_checks),
    ("constraints", run_constraint_checks),
    ("attachments", run_attachment_checks),
    ("stability", run_stability_checks),
    ("fuel", run_fuel_volume_checks),
    ("cost", run_recurring_cost_checks),
    ("landing_gear", run_landing_gear_checks),
]

EXCEL_ERROR = re.compile(r"^#(DIV/0!|VALUE!|REF!|NAME\?|NUM!|NULL!|N/A)$", re.IGNORECASE)


# ---------- Preflight ----------

def find_invalid_cells(workbook: Workbook) -> list[str]:
    """A1 addresses of main-sheet cells holding an Excel error or a non-finite number."""
    invalid = []
    for r_idx, row in enumerate(workbook.sheet(layout.MAIN).rows):
        for c_idx, value in enumerate(row or []):
            if isinstance(value, str) and EXCEL_ERROR.match(value.strip()):
                invalid.append(cell_ref(r_idx, c_idx))
            elif isinstance(value, float) and not math.isfinite(value):
                invalid.append(cell_ref(r_idx, c_idx))
    return invalid


# ---------- Orchestration ----------

def grade_workbook(
    workbook: Workbook,
    rules: Optional[RuleConfig] = None,
    messages: Optional[MessageCatalog] = None,
) -> GradingResult:
    rules = rules or DEFAULT_RULES
    messages = messages or DEFAULT_MESSAGES

    invalid = find_invalid_cells(workbook)
    if invalid:
        logger.warning("Preflight rejected %s: invalid cells %s", workbook.file_name, ", ".join(invalid))
        msg = format_message(messages.summary.invalid, ", ".join(invalid))
        return GradingResult(
            score=0,
            max_score=rules.base_score,
            score_line=msg,
            cutout_line="",
            feedback_log=msg,
        )

    feedback: list[str] = []
    score = rules.base_score

    if workbook.file_name:
        feedback.append(workbook.file_name)

    for name, run in RULE_SEQUENCE:
        result = run(workbook, rules, messages)
        logger.debug("%s: delta=%d, %d feedback line(s)", name, result.delta, len(result.feedback))
        score += result.delta
        feedback.extend(result.feedback)

    score = max(0, score)
    score_line = format_message(messages.summary.score, score)
    cutout_line = messages.summary.cutout
    feedback.append(score_line)
    feedback.append(cutout_line)

    logger.info("Graded %s: %d/%d", workbook.file_name or "<unnamed>", score, rules.base_score)
    return GradingResult(
        score=score,
        max_score=rules.base_score,
        score_line=score_line,
        cutout_line=cutout_line,
        feedback_log="\n".join(feedback),
    )
