from .runners import PyrightRunner, Runner

__version__ = "0.1.0"

__all__ = ["PyrightRunner", "Runner", "__version__"]
