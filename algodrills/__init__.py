"""Classic algorithm exercises on arrays, strings, matrices and numbers, with a small command line."""

__version__ = "0.1.0"