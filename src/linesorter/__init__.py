"""
LineSorter — sort lines of text as text or as numbers.

Core features:
- Four ordering strategies: lexicographic, integer, decimal with comma, decimal with dot
- Locale-independent number reading: results are identical on every machine
- Blank lines grouped at one end in numeric modes, stable ordering of ties
- Typed error pointing at the first line that holds no readable number
- CLI interface with safe in-place rewriting (previous version goes to system trash)
"""

# Get version
try:
    from importlib.metadata import PackageNotFoundError, version as _version
    __version__ = _version("linesorter")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from linesorter.commands import SortCommand
from linesorter.core import (
    Sorter, sort_lines, SortMode, SortDirection, SortParams, SortStats,
    NumericGrammar, UnparseableLineError)
from linesorter.services import TextService, TextDocument

__all__ = [
    "SortCommand",
    "Sorter",
    "sort_lines",
    "SortMode",
    "SortDirection",
    "SortParams",
    "SortStats",
    "NumericGrammar",
    "UnparseableLineError",
    "TextService",
    "TextDocument",
    "__version__",
]
