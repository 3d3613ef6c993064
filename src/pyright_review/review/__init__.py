from .parser import parse_diff, DiffFile, DiffLine
from .diagnostics import parse_diagnostics, DiagnosticsParseError
from .mapper import patch_line_for_diagnostic, create_message

__all__ = [
    "parse_diff",
    "DiffFile",
    "DiffLine",
    "parse_diagnostics",
    "DiagnosticsParseError",
    "patch_line_for_diagnostic",
    "create_message",
]
