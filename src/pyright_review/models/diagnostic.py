# src/pyright_review/models/diagnostic.py
from pathlib import Path
from typing import Any
from pydantic import BaseModel, ConfigDict


def _dig(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: Path | None = None
    severity: str | None = None
    start_line: int | None = None  # zero-based
    end_line: int | None = None  # zero-based
    message: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> "Diagnostic":
        """Build from one pyright diagnostic entry, leaving missing fields as None."""
        file = _dig(data, "file")
        start_line = _dig(data, "range", "start", "line")
        end_line = _dig(data, "range", "end", "line")
        severity = _dig(data, "severity")
        message = _dig(data, "message")
        return cls(
            file=Path(file) if isinstance(file, str) else None,
            severity=severity if isinstance(severity, str) else None,
            start_line=start_line if isinstance(start_line, int) else None,
            end_line=end_line if isinstance(end_line, int) else None,
            message=message if isinstance(message, str) else None,
        )
