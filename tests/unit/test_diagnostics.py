# tests/unit/test_diagnostics.py
import json
import pytest
from pathlib import Path
from pyright_review.review.diagnostics import DiagnosticsParseError, parse_diagnostics


def test_parse_diagnostics():
    output = json.dumps({
        "diagnostics": [
            {
                "file": "a.py",
                "severity": "warning",
                "range": {"start": {"line": 9}, "end": {"line": 10}},
                "message": "unused import",
            },
            {
                "file": "b.py",
                "severity": "error",
                "range": {"start": {"line": 0}, "end": {"line": 0}},
                "message": "syntax error",
            },
        ]
    })

    diagnostics = parse_diagnostics(output)

    assert len(diagnostics) == 2
    assert diagnostics[0].file == Path("a.py")
    assert diagnostics[0].start_line == 9
    assert diagnostics[0].end_line == 10
    assert diagnostics[1].severity == "error"


def test_parse_diagnostics_empty_list():
    assert parse_diagnostics('{"diagnostics": []}') == []


def test_parse_diagnostics_keeps_incomplete_entries():
    diagnostics = parse_diagnostics('{"diagnostics": [{"message": "no range"}]}')

    assert len(diagnostics) == 1
    assert diagnostics[0].start_line is None
    assert diagnostics[0].message == "no range"


@pytest.mark.parametrize("output", ["", "npx: command not found", "{\"diagnostics\": ["])
def test_parse_diagnostics_rejects_malformed_json(output):
    with pytest.raises(json.JSONDecodeError):
        parse_diagnostics(output)


@pytest.mark.parametrize("output", ["[]", "{}", '{"diagnostics": {}}', '{"generalDiagnostics": []}'])
def test_parse_diagnostics_rejects_other_shapes(output):
    with pytest.raises(DiagnosticsParseError):
        parse_diagnostics(output)
