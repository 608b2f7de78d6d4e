from models.result import ComparisonResult, ComparisonRow, GradingResult, RuleResult
from models.rules import ConstraintSpec, MissionLeg, RuleConfig
from models.workbook import Sheet, Workbook

__all__ = [
    "ComparisonResult", "ComparisonRow", "ConstraintSpec", "GradingResult",
    "MissionLeg", "RuleConfig", "RuleResult", "Sheet", "Workbook",
]
