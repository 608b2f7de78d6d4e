from pydantic import BaseModel, ConfigDict


class RuleResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    delta: int = 0
    feedback: tuple[str, ...] = ()


class GradingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    max_score: int = 10
    score_line: str
    cutout_line: str
    feedback_log: str

    def lines(self) -> list[str]:
        return self.feedback_log.split("\n")


class ComparisonRow(BaseModel):
    index: int
    expected: str
    actual: str
    match: bool


class ComparisonResult(BaseModel):
    file_name: str = ""
    mismatches: int
    outcome: str
    rows: list[ComparisonRow]
