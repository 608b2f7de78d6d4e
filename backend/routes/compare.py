from typing import Union

from fastapi import APIRouter
from pydantic import BaseModel

from grading.baseline import compare_logs
from grading.config import load_messages, load_rules
from grading.engine import grade_workbook
from models.result import ComparisonResult
from routes.grade import WorkbookPayload, to_workbook

router = APIRouter(tags=["compare"])


# ---------- Request schema ----------

class CompareRequest(BaseModel):
    workbook: WorkbookPayload
    expected_log: Union[list[str], str]


# ---------- Endpoint ----------

@router.post("/compare", response_model=ComparisonResult)
async def compare(body: CompareRequest):
    """
    Grades the workbook and diffs its feedback log against a reference log.
    Diagnostic only; the grade itself is not returned.
    """
    workbook = to_workbook(body.workbook)
    result = grade_workbook(workbook, rules=load_rules(), messages=load_messages())
    return compare_logs(body.expected_log, result.lines(), workbook.file_name or "")
