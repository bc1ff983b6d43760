"""Classic array, matrix, binary-search and string algorithm exercises."""

__version__ = "0.1.0"
__all__ = ["answers", "arrays", "matrix", "parsing", "searching", "strings", "sums"]