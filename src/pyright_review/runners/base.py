# src/pyright_review/runners/base.py
from abc import ABC, abstractmethod
from typing import Sequence
from pyright_review.models.message import ReviewMessage
from pyright_review.models.patch import Patch


class Runner(ABC):
    def __init__(self, patches: Sequence[Patch], commit: str | None = None):
        self.patches = patches
        self.commit = commit

    @abstractmethod
    def run(self) -> list[ReviewMessage]:
        """Check the patches and return messages for newly introduced issues."""
        pass
