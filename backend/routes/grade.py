from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from grading.config import load_messages, load_rules
from grading.engine import grade_workbook
from grading.loader import WorkbookLoadError, load_workbook
from models.result import GradingResult
from models.workbook import Workbook

router = APIRouter(tags=["grade"])


# ---------- Request schema ----------

class WorkbookPayload(BaseModel):
    file_name: Optional[str] = None
    sheets: dict[str, Any] = Field(default_factory=dict)   # list of rows or {"A1": value}


def to_workbook(payload: WorkbookPayload) -> Workbook:
    try:
        return load_workbook(payload.model_dump())
    except WorkbookLoadError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


# ---------- Endpoint ----------

@router.post("/grade", response_model=GradingResult)
async def grade(body: WorkbookPayload):
    """
    Grades one exported workbook against the active rule set.
    Returns the score plus the full newline-delimited feedback log.
    """
    workbook = to_workbook(body)
    return grade_workbook(workbook, rules=load_rules(), messages=load_messages())
