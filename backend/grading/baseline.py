"""
Compare a grader feedback log against a reference log.

Reference logs were captured from the legacy grader and sometimes carry
mis-decoded comparison signs and a workbook-name header. Both logs are
normalized before a line-by-line walk that realigns on the next expected
line when the actual log has extra lines.
"""

from typing import Union

from models.result import ComparisonResult, ComparisonRow

MAX_LOOKAHEAD = 10

# UTF-8 "≥" / "≤" read back as cp1252
MISDECODED_GE = chr(0xE2) + chr(0x2030) + chr(0xA5)
MISDECODED_LE = chr(0xE2) + chr(0x2030) + chr(0xA4)

HEADER_PREFIXES = ("ge 3_", "ge 5_")


def normalize_line(line) -> str:
    if line is None:
        return ""
    return (
        str(line)
        .replace(MISDECODED_GE, "≥")
        .replace(MISDECODED_LE, "≤")
        .replace("\r", "")
        .rstrip()
    )


def normalize_log(log: Union[str, list[str]], file_name: str = "") -> list[str]:
    lines = log if isinstance(log, list) else log.split("\n")
    lower_file = (file_name or "").lower()
    cleaned = []
    for raw in lines:
        line = normalize_line(raw)
        if not line:
            continue
        lower = line.lower()
        if lower.endswith(".xlsm"):
            continue
        if lower_file and lower_file in lower:
            continue
        if lower.startswith(HEADER_PREFIXES):
            continue
        cleaned.append(line)
    return cleaned


def compare_logs(
    expected: Union[str, list[str]],
    actual: Union[str, list[str]],
    file_name: str = "",
) -> ComparisonResult:
    """
    Walk both normalized logs together.

    On a mismatch, look up to MAX_LOOKAHEAD lines ahead in the actual log for
    the expected line; if found, the skipped actual lines are recorded as
    mismatches and the walk resumes aligned. Otherwise both sides advance.
    """
    exp = normalize_log(expected)
    act = normalize_log(actual, file_name)
    rows: list[ComparisonRow] = []
    mismatches = 0
    i_exp = i_act = 0

    def record(expected_line: str, actual_line: str, match: bool):
        rows.append(ComparisonRow(
            index=len(rows) + 1, expected=expected_line, actual=actual_line, match=match,
        ))

    while i_exp < len(exp) or i_act < len(act):
        expected_line = exp[i_exp] if i_exp < len(exp) else ""
        actual_line = act[i_act] if i_act < len(act) else ""

        if expected_line == actual_line:
            record(expected_line, actual_line, True)
            i_exp += 1
            i_act += 1
            continue

        offset = next(
            (
                k for k in range(1, MAX_LOOKAHEAD + 1)
                if i_act + k < len(act) and act[i_act + k] == expected_line
            ),
            None,
        )
        if offset is not None:
            for k in range(offset):
                record(expected_line, act[i_act + k], False)
                mismatches += 1
            i_act += offset
            continue

        record(expected_line, actual_line, False)
        mismatches += 1
        i_exp += 1
        i_act += 1

    if mismatches == 0:
        outcome = f"Match: {file_name}"
    else:
        outcome = f"{mismatches} mismatched line{'' if mismatches == 1 else 's'} for {file_name}"

    return ComparisonResult(file_name=file_name, mismatches=mismatches, outcome=outcome, rows=rows)
