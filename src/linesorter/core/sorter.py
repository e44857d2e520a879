"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure line sorting logic — zero dependencies outside core.
One entry point dispatches over the closed set of SortMode variants.
"""
import logging
from typing import Callable, Dict, List, Sequence, Tuple

from linesorter.core.models import (
    GRAMMARS, Number, NumericGrammar, SortMode, UnparseableLineError)
from linesorter.core.normalizer import extract_key, is_empty_line

logger = logging.getLogger(__name__)


def _sort_lexicographic(lines: Sequence[str], descending: bool) -> List[str]:
    # list.sort stays stable with reverse=True: equal lines keep their input order
    return sorted(lines, reverse=descending)


def partition_lines(lines: Sequence[str], grammar: NumericGrammar) -> Tuple[List[int], List[int]]:
    """
    Split line positions into (candidates, empties), both in input order.
    """
    candidates: List[int] = []
    empties: List[int] = []
    for index, line in enumerate(lines):
        if is_empty_line(line, grammar):
            empties.append(index)
        else:
            candidates.append(index)
    return candidates, empties


def _sort_numeric(lines: Sequence[str], descending: bool, mode: SortMode) -> List[str]:
    """
    Shared numeric scaffolding:
    1. Partition into candidates and empty lines (stable)
    2. Convert every candidate, the first failure aborts the whole call
    3. Stable sort of candidates by key
    4. Empty lines go first when ascending, last when descending
    """
    grammar = GRAMMARS[mode]
    candidates, empties = partition_lines(lines, grammar)

    keyed: List[Tuple[Number, int]] = []
    for index in candidates:
        try:
            keyed.append((extract_key(lines[index], grammar), index))
        except ValueError as e:
            logger.debug(f"Line {index} rejected by {grammar.name} grammar: {e}")
            raise UnparseableLineError(index, lines[index], mode) from e

    keyed.sort(key=lambda item: item[0], reverse=descending)
    ordered = [lines[index] for _, index in keyed]
    blank = [lines[index] for index in empties]

    logger.debug(f"{mode.value}: {len(keyed)} numeric lines, {len(blank)} empty lines")

    return ordered + blank if descending else blank + ordered


def _numeric(mode: SortMode) -> Callable[[Sequence[str], bool], List[str]]:
    return lambda lines, descending: _sort_numeric(lines, descending, mode)


_STRATEGIES: Dict[SortMode, Callable[[Sequence[str], bool], List[str]]] = {
    SortMode.LEXICOGRAPHIC: _sort_lexicographic,
    SortMode.INTEGER: _numeric(SortMode.INTEGER),
    SortMode.DECIMAL_COMMA: _numeric(SortMode.DECIMAL_COMMA),
    SortMode.DECIMAL_DOT: _numeric(SortMode.DECIMAL_DOT),
}

# Every variant must have a routine
_missing = set(SortMode) - set(_STRATEGIES)
if _missing:
    raise ImportError(f"No sort routine for: {sorted(m.value for m in _missing)}")


def sort_lines(lines: Sequence[str], mode: SortMode = SortMode.LEXICOGRAPHIC,
               descending: bool = False) -> List[str]:
    """
    Return a new list with `lines` reordered by `mode`. The input is never modified.

    Raises:
        UnparseableLineError: numeric modes only, for the first line that has visible
            content but no convertible number (carries its zero-based index)
    """
    if not isinstance(mode, SortMode):
        raise ValueError(f"Invalid sort mode: {mode!r}")

    logger.debug(f"Sorting {len(lines)} lines (mode={mode.value}, descending={descending})")
    return _STRATEGIES[mode](lines, descending)


class Sorter:
    """
    Sorts lines according to a fixed SortMode.
    Stateless between calls: the same input and direction always give the same output.

    Ordering rules:
    1. LEXICOGRAPHIC: plain code point comparison of whole lines, no trimming or case folding
    2. Numeric modes: lines ordered by the number read from their start,
       empty lines clustered at the start (ascending) or at the end (descending)
    3. Ties always keep their original relative order, in both directions
    """

    def __init__(self, mode: SortMode = SortMode.LEXICOGRAPHIC):
        if not isinstance(mode, SortMode):
            raise ValueError(f"Invalid sort mode: {mode!r}")
        self._mode = mode

    @property
    def mode(self) -> SortMode:
        return self._mode

    def sort(self, lines: Sequence[str], descending: bool = False) -> List[str]:
        return sort_lines(lines, self._mode, descending)

    def __repr__(self):
        return f"<Sorter mode={self._mode.value}>"
