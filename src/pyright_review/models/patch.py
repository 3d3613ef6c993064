# src/pyright_review/models/patch.py
from pathlib import Path
from typing import Protocol, Sequence


class AddedLine(Protocol):
    new_lineno: int


class Patch(Protocol):
    """One file's change, as handed over by the host framework."""
    path: Path
    additions: int
    added_lines: Sequence[AddedLine]
