from grading import layout
from grading.cells import CellReader
from grading.formatter import format_message
from grading.messages import MessageCatalog
from models.result import RuleResult
from models.rules import RuleConfig
from models.workbook import Workbook


def run_recurring_cost_checks(workbook: Workbook, rules: RuleConfig, messages: MessageCatalog) -> RuleResult:
    """Unit recurring cost against the ceiling (scored) and objective (message)."""
    limits = rules.cost
    cost = CellReader(workbook).number(layout.RECURRING_COST)
    if cost is None:
        return RuleResult()

    if cost > limits.ceiling:
        return RuleResult(delta=-1, feedback=(format_message(messages.cost.ceiling, cost, limits.ceiling),))
    if cost <= limits.objective:
        return RuleResult(feedback=(format_message(messages.cost.objective, cost, limits.objective),))
    return RuleResult()
