"""Sparse spreadsheet matrix with row, column and range access and numeric range aggregates."""

__version__ = "0.1.0"
__all__ = ["matrix"]