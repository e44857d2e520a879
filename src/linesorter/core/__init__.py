"""
Core sorting engine — strategy variants, numeric key extraction and models.

This package contains the whole algorithmic part of linesorter:
- Sorter / sort_lines: single entry point dispatching over SortMode variants
- normalizer: admissible leading-run extraction and locale-free number conversion
- Models: SortMode, SortDirection, NumericGrammar, SortParams, SortStats, UnparseableLineError

All components are pure Python with no I/O — suitable for CLI, editors and servers alike.
"""

from .sorter import Sorter, sort_lines
from .models import (
    SortMode, SortDirection, SortParams, SortStats, NumericGrammar,
    UnparseableLineError, GRAMMARS)

__all__ = [
    "Sorter",
    "sort_lines",
    "SortMode",
    "SortDirection",
    "SortParams",
    "SortStats",
    "NumericGrammar",
    "UnparseableLineError",
    "GRAMMARS",
]
