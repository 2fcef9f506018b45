"""String, number and output helpers with a printf-style formatter."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "convert",
    "formatter",
    "integers",
    "mathutil",
    "output",
    "spec",
    "text",
]