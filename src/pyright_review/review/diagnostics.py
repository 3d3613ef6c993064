# src/pyright_review/review/diagnostics.py
import json
from pyright_review.models.diagnostic import Diagnostic


class DiagnosticsParseError(ValueError):
    """Checker output is valid JSON but not shaped like a diagnostics report."""


def parse_diagnostics(text: str) -> list[Diagnostic]:
    """Decode pyright --outputjson output into diagnostics.

    Raises json.JSONDecodeError for malformed output and DiagnosticsParseError
    when the top level is not an object holding a "diagnostics" list.
    """
    data = json.loads(text)

    if not isinstance(data, dict):
        raise DiagnosticsParseError(f"Expected a JSON object, got {type(data).__name__}")

    diagnostics = data.get("diagnostics")
    if not isinstance(diagnostics, list):
        raise DiagnosticsParseError('Checker output has no "diagnostics" list')

    return [Diagnostic.from_json(item) for item in diagnostics]
