"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/normalizer.py
Turns raw lines into numeric sort keys for the integer and decimal grammars.
Conversion never consults the host locale: '.' is the only decimal separator, no grouping.
"""

import math
import re
from functools import lru_cache

from linesorter.core.models import BLANK_CHARS, Number, NumericGrammar

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Pre-compiled numeral patterns, matched at the start of the prepared text
_PATTERN_INTEGER = re.compile(r'[ \t\r\n]*(-?[0-9]+)')
_PATTERN_DECIMAL = re.compile(r'[ \t\r\n]*(-?(?:[0-9]+\.?[0-9]*|\.[0-9]+))')
_PATTERN_NONZERO_DIGIT = re.compile(r"[1-9]")


@lru_cache(maxsize=None)
def _admissible_run_pattern(admissible: str) -> re.Pattern:
    return re.compile("[" + re.escape(admissible) + "]*")


def take_admissible_run(line: str, admissible: str) -> str:
    """
    Keep the leading run of `line` made only of `admissible` characters.
    Everything from the first other character on is dropped, even if more
    admissible characters follow it.

    Examples:
        take_admissible_run("12abc34", "0123456789") → "12"
        take_admissible_run("abc", "0123456789") → ""
    """
    return _admissible_run_pattern(admissible).match(line).group()


def is_blank(text: str) -> bool:
    """True if text holds nothing but spaces, tabs, CR and LF."""
    return not text.strip(BLANK_CHARS)


def prepare_for_conversion(line: str, grammar: NumericGrammar) -> str:
    """
    Cut a line down to the text its grammar converts: the admissible leading run,
    with the grammar's decimal mark rewritten to '.'.

    Examples (decimal-comma):
        "3,5 kg" → "3.5 "
        "1,2,3" → "1.2.3"
    """
    prepared = take_admissible_run(line, grammar.admissible)
    if grammar.decimal_mark is not None and grammar.decimal_mark != ".":
        prepared = prepared.replace(grammar.decimal_mark, ".")
    return prepared


def is_empty_line(line: str, grammar: NumericGrammar) -> bool:
    """
    An empty line has a blank admissible run and nothing was cut off after it.
    A line with visible text but no numeral (e.g. "abc") is NOT empty:
    it is a candidate that fails conversion.
    """
    run = take_admissible_run(line, grammar.admissible)
    return is_blank(run) and len(run) == len(line)


def to_int64(text: str) -> int:
    """
    Read the leading base-10 integer of `text`.
    Leading blanks are skipped, text after the numeral is ignored.

    Raises:
        ValueError: no numeral found, or the value does not fit in a signed 64-bit integer
    """
    match = _PATTERN_INTEGER.match(text)
    if match is None:
        raise ValueError(f"No integer found in {text!r}")

    value = int(match.group(1))
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"Integer out of 64-bit range: {match.group(1)}")
    return value


def to_double(text: str) -> float:
    """
    Read the leading decimal number of `text` with '.' as the decimal separator.
    Accepts "12", "12.", "12.5" and ".5", each with an optional leading minus.

    Raises:
        ValueError: no numeral found, or the value overflows or underflows a double
    """
    match = _PATTERN_DECIMAL.match(text)
    if match is None:
        raise ValueError(f"No decimal number found in {text!r}")

    value = float(match.group(1))
    if math.isinf(value):
        raise ValueError(f"Decimal number out of range: {match.group(1)}")
    if value == 0.0 and _PATTERN_NONZERO_DIGIT.search(match.group(1)):
        raise ValueError(f"Decimal number out of range (too small): {match.group(1)}")
    return value


def convert(prepared: str, grammar: NumericGrammar) -> Number:
    """Convert prepared text to the grammar's key type."""
    if grammar.key_type is int:
        return to_int64(prepared)
    return to_double(prepared)


def extract_key(line: str, grammar: NumericGrammar) -> Number:
    """Prepare and convert a single non-empty line."""
    return convert(prepare_for_conversion(line, grammar), grammar)
