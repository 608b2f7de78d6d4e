"""Fuel capacity/availability and internal volume; one point for any shortfall."""

from grading import layout
from grading.cells import CellReader
from grading.formatter import format_message
from grading.messages import MessageCatalog
from models.result import RuleResult
from models.rules import RuleConfig
from models.workbook import Workbook


def run_fuel_volume_checks(workbook: Workbook, rules: RuleConfig, messages: MessageCatalog) -> RuleResult:
    cells = CellReader(workbook)
    text = messages.fuel
    feedback: list[str] = []

    capacity = cells.number(layout.FUEL_CAPACITY)
    available = cells.number(layout.FUEL_AVAILABLE)
    required = cells.number(layout.FUEL_REQUIRED)

    if capacity is not None and available is not None and available > capacity:
        feedback.append(format_message(text.capacity, available, capacity))

    if required is not None and available is not None and required > available:
        feedback.append(format_message(text.required, required, available))

    volume_available = cells.number(layout.VOLUME_AVAILABLE)
    volume_required = cells.number(layout.VOLUME_REQUIRED)
    if (
        volume_available is not None
        and volume_required is not None
        and volume_required > volume_available + rules.fuel.volume_margin
    ):
        feedback.append(format_message(text.volume, volume_required, volume_available))

    if feedback:
        feedback.append(text.deduction)
        return RuleResult(delta=-1, feedback=tuple(feedback))
    return RuleResult()
