from .config import RepoConfig
from .diagnostic import Diagnostic
from .message import ReviewMessage
from .patch import AddedLine, Patch

__all__ = [
    "RepoConfig",
    "Diagnostic",
    "ReviewMessage",
    "AddedLine",
    "Patch",
]
