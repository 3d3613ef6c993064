# src/pyright_review/review/parser.py
from dataclasses import dataclass, field
from pathlib import Path
from unidiff import PatchSet


@dataclass(frozen=True)
class DiffLine:
    new_lineno: int
    content: str = ""


@dataclass
class DiffFile:
    path: Path
    diff: str
    is_new: bool
    is_deleted: bool
    added_lines: list[DiffLine] = field(default_factory=list)

    @property
    def additions(self) -> int:
        return len(self.added_lines)


def parse_diff(diff_text: str, root: Path | None = None) -> list[DiffFile]:
    """Parse unified diff into patches, with paths joined onto root when given."""
    patch = PatchSet(diff_text)
    files = []

    for patched_file in patch:
        added_lines = []

        for hunk in patched_file:
            for line in hunk:
                if line.is_added and line.target_line_no is not None:
                    added_lines.append(DiffLine(
                        new_lineno=line.target_line_no,
                        content=line.value.rstrip("\n"),
                    ))

        path = Path(patched_file.path)
        files.append(DiffFile(
            path=root / path if root else path,
            diff=str(patched_file),
            is_new=patched_file.is_added_file,
            is_deleted=patched_file.is_removed_file,
            added_lines=added_lines,
        ))

    return files
