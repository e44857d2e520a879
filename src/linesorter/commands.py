"""
Unified command orchestrator for line sorting.
This is the SINGLE source of truth for business logic — used by the CLI and library callers.
No I/O here — text in, text out.
"""
import logging
import time
from typing import List, Tuple

from linesorter.core.models import GRAMMARS, SortParams, SortStats
from linesorter.core.normalizer import is_empty_line
from linesorter.core.sorter import Sorter
from linesorter.services.text_service import TextService

logger = logging.getLogger(__name__)


class SortCommand:
    """
    Orchestrates the whole sorting workflow:
    1. Split the text into lines, remembering its line ending
    2. Sort the lines with the requested mode and direction
    3. Join them back with the original line ending

    Usage:
        params = SortParams(mode=SortMode.INTEGER, direction=SortDirection.DESCENDING)
        command = SortCommand()
        text, stats = command.execute(source_text, params)
    """

    def execute(self, text: str, params: SortParams) -> Tuple[str, SortStats]:
        """
        Sort the lines of `text` with the given parameters.

        Args:
            text: Raw text, any mix of CRLF / CR / LF line endings
            params: Validated sort parameters

        Returns:
            Tuple of (sorted_text, statistics)

        Raises:
            UnparseableLineError: numeric modes, when a line holds no readable number
        """
        start = time.perf_counter()

        document = TextService.split_lines(text)
        lines = self.sort_lines(document.lines, params)

        result = TextService.join_lines(lines, document.eol, document.trailing_eol)

        stats = SortStats(
            mode=params.mode,
            direction=params.direction,
            total_lines=len(lines),
            empty_lines=self._count_empty(lines, params),
            total_time=time.perf_counter() - start,
        )
        logger.debug(f"Sorted {stats.total_lines} lines in {stats.total_time:.3f}s")
        return result, stats

    @staticmethod
    def sort_lines(lines: List[str], params: SortParams) -> List[str]:
        """Sort an already split list of lines."""
        return Sorter(params.mode).sort(lines, descending=params.descending)

    @staticmethod
    def _count_empty(lines: List[str], params: SortParams) -> int:
        if not params.mode.is_numeric:
            return 0
        grammar = GRAMMARS[params.mode]
        return sum(1 for line in lines if is_empty_line(line, grammar))
