# src/pyright_review/review/mapper.py
from pathlib import Path
from typing import Iterable
from pyright_review.models.diagnostic import Diagnostic
from pyright_review.models.message import ReviewMessage
from pyright_review.models.patch import AddedLine, Patch


def patch_line_for_diagnostic(patches: Iterable[Patch], diagnostic: Diagnostic) -> AddedLine | None:
    """Find the added line a diagnostic should be reported on.

    Returns the deepest added line inside the diagnostic's range, or None when
    the range does not touch any line added in the diagnostic's file.
    """
    if diagnostic.file is None or diagnostic.start_line is None or diagnostic.end_line is None:
        return None

    # Pyright lines are 0-based, diff lines are 1-based
    first = diagnostic.start_line + 1
    last = diagnostic.end_line + 1

    candidates = [
        line
        for patch in patches
        if Path(patch.path) == diagnostic.file
        for line in patch.added_lines
        if first <= line.new_lineno <= last
    ]
    if not candidates:
        return None

    best = max(candidates, key=lambda line: line.new_lineno)
    duplicates = sum(1 for line in candidates if line.new_lineno == best.new_lineno)
    if duplicates > 1:
        raise ValueError(
            f"Added line {best.new_lineno} of {diagnostic.file} appears {duplicates} times in the diff"
        )
    return best


def create_message(
    line: AddedLine,
    diagnostic: Diagnostic,
    runner: str = "PyrightRunner",
) -> ReviewMessage:
    return ReviewMessage(
        path=str(diagnostic.file),
        line=line.new_lineno,
        level=diagnostic.severity,
        msg=diagnostic.message,
        commit_sha=None,
        runner=runner,
    )
