"""
Data Models
===========
Pydantic models for extracted blocks and their statistics.
All records are immutable and serialize with lower-camel-case field names.
"""

from __future__ import annotations

from typing import Iterator, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(text) + sum(1 for c in text if c > "\uffff")


class _Record(BaseModel):
    """Base for immutable records serialized with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ─── Block Model ──────────────────────────────────────────────────────────────


class TextBlock(_Record):
    """Text found strictly between a matched pair of delimiters."""
    text: str = Field(min_length=1)


# ─── Statistics Models ────────────────────────────────────────────────────────


class CommonStatistics(_Record):
    """Aggregate length statistics over all extracted blocks."""
    total_blocks: int = Field(default=0, ge=0)
    avg_block_length: int = Field(default=0, ge=0)
    max_block_length: int = Field(default=0, ge=0)
    min_block_length: int = Field(default=0, ge=0)


class BlockStatistics(_Record):
    """
    Character-class counts for a single block, in UTF-16 code units.

    The four class counts always add up to the text length.
    """
    text: str
    text_length: int = Field(ge=0)
    latin_count: int = Field(default=0, ge=0)
    cyr_count: int = Field(default=0, ge=0)
    cypher_count: int = Field(default=0, ge=0)
    other_sym_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_counts(self) -> BlockStatistics:
        expected = utf16_length(self.text)
        if self.text_length != expected:
            raise ValueError(
                f"text_length {self.text_length} does not match "
                f"text of {expected} UTF-16 code units"
            )
        classified = self.latin_count + self.cyr_count + self.cypher_count
        if self.other_sym_count != self.text_length - classified:
            raise ValueError(
                "other_sym_count must equal text_length minus "
                "latin, cyrillic and digit counts"
            )
        return self


StatisticsRecord = Union[CommonStatistics, BlockStatistics]


# ─── Report Model ─────────────────────────────────────────────────────────────


class AnalysisReport(_Record):
    """
    Complete output of one analysis run.
    Records are emitted common statistics first, then blocks in scan order.
    """
    common: CommonStatistics = Field(default_factory=CommonStatistics)
    blocks: tuple[BlockStatistics, ...] = ()

    def records(self) -> Iterator[StatisticsRecord]:
        yield self.common
        yield from self.blocks
