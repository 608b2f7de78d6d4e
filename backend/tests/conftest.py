import copy
import json
import os

import pytest

from grading.loader import load_workbook
from grading.messages import DEFAULT_MESSAGES
from grading.specs import DEFAULT_RULES

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def _load_fixture(name: str) -> dict:
    """Load a workbook fixture JSON as a plain dict."""
    path = os.path.join(FIXTURES_DIR, f"{name}.json")
    with open(path) as f:
        return json.load(f)


@pytest.fixture(scope="session")
def passing_data() -> dict:
    return _load_fixture("passing_design")


@pytest.fixture
def make_workbook(passing_data):
    """
    Build a Workbook from the passing design with cell overrides applied:

        make_workbook({"main": {"K33": 500}, "miss": {"E49": None}})

    A None value blanks the cell.
    """

    def build(overrides=None, file_name="Team3_Design.xlsm"):
        data = copy.deepcopy(passing_data)
        data["file_name"] = file_name
        for sheet, cells in (overrides or {}).items():
            data["sheets"].setdefault(sheet, {}).update(cells)
        return load_workbook(data)

    return build


@pytest.fixture
def rules():
    return DEFAULT_RULES


@pytest.fixture
def messages():
    return DEFAULT_MESSAGES
