"""
Statistics Calculator
=====================
Per-block character classification and aggregate length statistics.

Character classes are exact code-point range checks, independent of locale:
    - Latin: ASCII a-z, A-Z
    - Cyrillic: а-я (U+0430-U+044F), А-Я (U+0410-U+042F); ё/Ё are not included
    - Digit: any Unicode decimal digit (category Nd) in the BMP
Everything else counts as "other".

Lengths are measured in UTF-16 code units: a character outside the BMP
is a surrogate pair, counted as two "other" units.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .models import (
    AnalysisReport,
    BlockStatistics,
    CommonStatistics,
    TextBlock,
    utf16_length,
)

logger = logging.getLogger(__name__)


# ─── Character Classes ────────────────────────────────────────────────────────


def is_latin(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def is_cyrillic(char: str) -> bool:
    return "а" <= char <= "я" or "А" <= char <= "Я"


def is_digit(char: str) -> bool:
    # Supplementary digits are surrogate pairs, neither unit is a digit
    return char <= "\uffff" and char.isdecimal()


def round_half_up(numerator: int, denominator: int) -> int:
    """
    Round a non-negative fraction to the nearest integer, halves up.

    Uses integer arithmetic so 2.5 -> 3 and 1.5 -> 2 exactly.
    """
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    return (2 * numerator + denominator) // (2 * denominator)


# ─── Calculator ───────────────────────────────────────────────────────────────


class StatisticsCalculator:
    """
    Computes one CommonStatistics and one BlockStatistics per block,
    preserving block order.
    """

    def calculate(self, blocks: Sequence[TextBlock]) -> AnalysisReport:
        common = self.common_statistics(blocks)
        block_stats = tuple(self.block_statistics(b) for b in blocks)

        logger.info(
            f"Computed statistics for {common.total_blocks} blocks "
            f"(avg={common.avg_block_length}, min={common.min_block_length}, "
            f"max={common.max_block_length})"
        )
        return AnalysisReport(common=common, blocks=block_stats)

    def common_statistics(self, blocks: Sequence[TextBlock]) -> CommonStatistics:
        """Aggregate lengths; an empty sequence yields all zeros."""
        if not blocks:
            return CommonStatistics()

        lengths = [utf16_length(b.text) for b in blocks]
        return CommonStatistics(
            total_blocks=len(lengths),
            avg_block_length=round_half_up(sum(lengths), len(lengths)),
            max_block_length=max(lengths),
            min_block_length=min(lengths),
        )

    def block_statistics(self, block: TextBlock) -> BlockStatistics:
        text = block.text
        latin = sum(1 for c in text if is_latin(c))
        cyr = sum(1 for c in text if is_cyrillic(c))
        digits = sum(1 for c in text if is_digit(c))

        length = utf16_length(text)
        return BlockStatistics(
            text=text,
            text_length=length,
            latin_count=latin,
            cyr_count=cyr,
            cypher_count=digits,
            other_sym_count=length - latin - cyr - digits,
        )
