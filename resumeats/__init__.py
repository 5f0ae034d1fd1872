__all__ = [
    "__version__",
    "parse",
    "analyze",
]

__version__ = "0.1.0"

from .pipeline import analyze, parse  # noqa: E402
