"""
Block Extractor
===============
Finds text blocks enclosed by a left/right delimiter pair in a single
left-to-right pass over the source text.

Nesting is not supported: only the most recent unmatched left delimiter
is tracked, so "[a[bc]" yields the single block "bc".
"""

from __future__ import annotations

import logging
from typing import Optional

from .models import TextBlock

logger = logging.getLogger(__name__)


class BlockExtractor:
    """
    Splits source text into delimiter-bounded blocks.

    Rules:
        - A left delimiter (re)sets the pending block start
        - A right delimiter closes the pending block, if any
        - Empty blocks and unterminated starts are dropped
        - With identical delimiters, occurrences alternate open/close
    """

    def __init__(self, left_delimiter: str = "[", right_delimiter: str = "]"):
        for name, value in (("left", left_delimiter), ("right", right_delimiter)):
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(
                    f"{name} delimiter must be a single character, got {value!r}"
                )
        self.left_delimiter = left_delimiter
        self.right_delimiter = right_delimiter

    @property
    def symmetric(self) -> bool:
        """True when the same character opens and closes a block."""
        return self.left_delimiter == self.right_delimiter

    def extract(self, text: str) -> list[TextBlock]:
        """
        Extract all non-empty blocks from the text.

        Args:
            text: Source string to scan.

        Returns:
            TextBlock objects in order of their closing delimiter.
        """
        blocks: list[TextBlock] = []
        block_start: Optional[int] = None

        for idx, char in enumerate(text):
            opens = char == self.left_delimiter and (
                not self.symmetric or block_start is None
            )
            if opens:
                block_start = idx
            elif char == self.right_delimiter and block_start is not None:
                content = text[block_start + 1:idx]
                if content:
                    blocks.append(TextBlock(text=content))
                else:
                    logger.debug(f"Dropping empty block at index {block_start}")
                block_start = None

        if block_start is not None:
            logger.debug(
                f"Discarding unterminated block starting at index {block_start}"
            )

        logger.debug(
            f"Extracted {len(blocks)} blocks using delimiters "
            f"{self.left_delimiter!r} and {self.right_delimiter!r}"
        )
        return blocks
