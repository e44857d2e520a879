"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for line sorting: strategy variants, direction, numeric grammars and errors.
"""

from dataclasses import dataclass
from typing import Optional, Type, Union
from enum import Enum


# =============================
# Enums
# =============================

class SortMode(Enum):
    """
    Ordering strategy. The set is closed: every member has exactly one sort routine.
    """
    LEXICOGRAPHIC = "lexicographic"
    INTEGER = "integer"
    DECIMAL_COMMA = "decimal-comma"
    DECIMAL_DOT = "decimal-dot"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            SortMode.LEXICOGRAPHIC: "Lexicographic",
            SortMode.INTEGER: "Integer",
            SortMode.DECIMAL_COMMA: "Decimal (comma)",
            SortMode.DECIMAL_DOT: "Decimal (dot)",
        }
        return mapping.get(self, self.value)

    @property
    def is_numeric(self) -> bool:
        return self is not SortMode.LEXICOGRAPHIC

    def __repr__(self) -> str:
        return self.value


class SortDirection(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    @property
    def is_descending(self) -> bool:
        return self is SortDirection.DESCENDING

    @classmethod
    def from_flag(cls, descending: bool) -> "SortDirection":
        return cls.DESCENDING if descending else cls.ASCENDING


# ======================
#  Numeric grammars
# ======================

Number = Union[int, float]

# Characters treated as blank when deciding whether a line is empty
BLANK_CHARS = " \t\r\n"


@dataclass(frozen=True)
class NumericGrammar:
    """
    Textual shape of the numbers one numeric sort understands.

    admissible:   characters allowed in the leading run taken from a line
    key_type:     int (signed 64-bit range) or float (IEEE double)
    decimal_mark: separator rewritten to '.' before conversion, None for integers
    """
    name: str
    admissible: str
    key_type: Type[Number]
    decimal_mark: Optional[str] = None

    def __post_init__(self):
        if self.key_type not in (int, float):
            raise ValueError(f"Unsupported key type: {self.key_type!r}")
        if self.decimal_mark is not None and self.decimal_mark not in self.admissible:
            raise ValueError(f"Decimal mark '{self.decimal_mark}' must be admissible")


INTEGER_GRAMMAR = NumericGrammar(
    name="integer",
    admissible=BLANK_CHARS + "0123456789-",
    key_type=int,
)

DECIMAL_COMMA_GRAMMAR = NumericGrammar(
    name="decimal-comma",
    admissible=BLANK_CHARS + "0123456789,-",
    key_type=float,
    decimal_mark=",",
)

DECIMAL_DOT_GRAMMAR = NumericGrammar(
    name="decimal-dot",
    admissible=BLANK_CHARS + "0123456789.-",
    key_type=float,
    decimal_mark=".",
)

GRAMMARS = {
    SortMode.INTEGER: INTEGER_GRAMMAR,
    SortMode.DECIMAL_COMMA: DECIMAL_COMMA_GRAMMAR,
    SortMode.DECIMAL_DOT: DECIMAL_DOT_GRAMMAR,
}


# ======================
#  Errors
# ======================

class UnparseableLineError(ValueError):
    """
    Raised by numeric sorts when a non-empty line cannot be converted to a number.
    Carries the zero-based index of the offending line in the original input.
    """

    def __init__(self, index: int, line: str = "", mode: Optional[SortMode] = None):
        self.index = index
        self.line = line
        self.mode = mode
        kind = mode.display_name.lower() if mode is not None else "a number"
        super().__init__(f"Line at index {index} cannot be read as {kind}: {line!r}")

    @property
    def line_number(self) -> int:
        """1-based line number for user-facing messages."""
        return self.index + 1

    def __reduce__(self):
        return self.__class__, (self.index, self.line, self.mode)


# ======================
#  Parameters & statistics
# ======================

@dataclass
class SortParams:
    """Parameters for one sort operation. Interface-agnostic — used by CLI and library callers."""
    mode: SortMode = SortMode.LEXICOGRAPHIC
    direction: SortDirection = SortDirection.ASCENDING

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not isinstance(self.mode, SortMode):
            raise ValueError(f"Invalid sort mode: {self.mode!r}")
        if not isinstance(self.direction, SortDirection):
            raise ValueError(f"Invalid sort direction: {self.direction!r}")

    @property
    def descending(self) -> bool:
        return self.direction.is_descending


@dataclass
class SortStats:
    """
    Statistics collected during one sort operation.
    """
    mode: SortMode = SortMode.LEXICOGRAPHIC
    direction: SortDirection = SortDirection.ASCENDING
    total_lines: int = 0
    empty_lines: int = 0
    total_time: float = 0.0

    @property
    def sorted_lines(self) -> int:
        return self.total_lines - self.empty_lines

    def print_summary(self) -> str:
        lines = [
            "📊 Sort Statistics:",
            f"Mode: {self.mode.display_name} ({self.direction.value})",
            f"Total Lines: {self.total_lines}",
        ]
        if self.mode.is_numeric:
            lines.append(f"Numeric Lines: {self.sorted_lines}")
            lines.append(f"Empty Lines: {self.empty_lines}")
        lines.append(f"Total Execution Time: {self.total_time:.3f}s")
        return "\n".join(lines)
