# src/pyright_review/runners/__init__.py
from .base import Runner
from .pyright import PyrightRunner, run_pyright

__all__ = ["Runner", "PyrightRunner", "run_pyright"]
