"""
Output Formatter
================
Writes an AnalysisReport as line-delimited JSON: the common statistics
object first, then one object per block, one JSON value per line.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional, TextIO

from .models import AnalysisReport, StatisticsRecord

logger = logging.getLogger(__name__)


def to_json_line(record: StatisticsRecord) -> str:
    """Serialize a single record as compact JSON with camelCase keys."""
    return json.dumps(
        record.model_dump(by_alias=True),
        ensure_ascii=False,
        separators=(",", ":"),
    )


class OutputFormatter:
    """Emits report records to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def write(self, report: AnalysisReport) -> int:
        """
        Write every record of the report, one per line.

        I/O and encoding failures are logged and not re-raised; records
        after the failing one are skipped.

        Returns:
            Number of records fully written.
        """
        stream = self.stream or sys.stdout
        written = 0
        try:
            for record in report.records():
                stream.write(to_json_line(record))
                stream.write("\n")
                written += 1
            stream.flush()
        except (OSError, UnicodeEncodeError) as e:
            logger.error(f"Failed to write statistics output: {e}")

        logger.debug(f"Wrote {written} records")
        return written
