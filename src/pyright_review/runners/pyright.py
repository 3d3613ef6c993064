# src/pyright_review/runners/pyright.py
import fnmatch
import logging
import subprocess
from functools import cached_property
from pathlib import Path
from typing import Sequence
from pyright_review.models.config import RepoConfig
from pyright_review.models.message import ReviewMessage
from pyright_review.models.patch import Patch
from pyright_review.review.diagnostics import parse_diagnostics
from pyright_review.review.mapper import create_message, patch_line_for_diagnostic
from .base import Runner


logger = logging.getLogger(__name__)

PYRIGHT_COMMAND = ["npx", "pyright", "--lib", "--outputjson"]
PYTHON_EXTENSION = ".py"


def run_pyright() -> str:
    """Run pyright over the whole project and return its stdout."""
    try:
        result = subprocess.run(PYRIGHT_COMMAND, capture_output=True, text=True, check=False)
        stdout, stderr = result.stdout, result.stderr
    except FileNotFoundError as e:
        stdout, stderr = "", str(e)

    stderr = stderr.strip()
    if stderr:
        logger.warning(f"pyright-review:\n\n{stderr}")

    logger.info(stdout)
    return stdout


class PyrightRunner(Runner):
    def __init__(
        self,
        patches: Sequence[Patch],
        commit: str | None = None,
        config: RepoConfig | None = None,
    ):
        super().__init__(patches, commit)
        self.config = config or RepoConfig()

    def run(self) -> list[ReviewMessage]:
        if not self.python_patches:
            return []

        # Pyright resolves imports across the project only when it is run on
        # the whole tree, so changed files are never passed explicitly.
        stdout = run_pyright()
        diagnostics = parse_diagnostics(stdout)

        messages = []
        for diagnostic in diagnostics:
            line = patch_line_for_diagnostic(self.python_patches, diagnostic)
            if line is None:
                continue
            messages.append(
                create_message(line, diagnostic, runner=type(self).__name__)
            )

        logger.info(f"{len(messages)} of {len(diagnostics)} diagnostics are on added lines")
        return messages

    @cached_property
    def python_patches(self) -> list[Patch]:
        return [
            patch
            for patch in self.patches
            if patch.additions > 0
            and Path(patch.path).suffix == PYTHON_EXTENSION
            and not self._is_excluded(patch.path)
        ]

    def _is_excluded(self, file_path: Path) -> bool:
        """Check if file matches any exclude pattern, as given or relative to the cwd."""
        if not self.config.exclude:
            return False

        path = Path(file_path)
        names = [str(path)]
        cwd = Path.cwd()
        if path.is_absolute() and path.is_relative_to(cwd):
            names.append(str(path.relative_to(cwd)))

        for pattern in self.config.exclude:
            if any(fnmatch.fnmatch(name, pattern) for name in names):
                return True
        return False
