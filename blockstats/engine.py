"""
Analyzer Engine
===============
Orchestrator that combines block extraction, statistics calculation
and output formatting into the complete pipeline.

Usage:
    engine = AnalyzerEngine(AnalyzerConfig(left_delimiter="(", right_delimiter=")"))
    report = engine.analyze("f(x) = g(y)")
    engine.run("f(x) = g(y)")  # writes NDJSON to stdout

Architecture:
    text → BlockExtractor → TextBlocks → StatisticsCalculator →
    AnalysisReport → OutputFormatter (NDJSON)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from .block_extractor import BlockExtractor
from .calculator import StatisticsCalculator
from .formatter import OutputFormatter
from .models import AnalysisReport

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class AnalyzerConfig:
    """Configuration for the analyzer engine."""

    # Delimiters (single characters)
    left_delimiter: str = "["
    right_delimiter: str = "]"

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = None


class AnalyzerEngine:
    """
    Main analysis engine.

    Orchestrates the pipeline:
        1. Block extraction
        2. Statistics calculation
        3. Output formatting
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        self.config = config or AnalyzerConfig()
        self._setup_logging()
        self.extractor = BlockExtractor(
            left_delimiter=self.config.left_delimiter,
            right_delimiter=self.config.right_delimiter,
        )
        self.calculator = StatisticsCalculator()

    def _setup_logging(self):
        """Configure the package logger based on config."""
        log_level = getattr(logging, self.config.log_level.upper(), logging.WARNING)

        package_logger = logging.getLogger("blockstats")
        package_logger.setLevel(log_level)

        # Console handler (stderr keeps stdout clean for NDJSON)
        if not any(
            type(h) is logging.StreamHandler for h in package_logger.handlers
        ):
            console = logging.StreamHandler()
            console.setFormatter(
                logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
            )
            package_logger.addHandler(console)

        # File handler
        log_path = Path(self.config.log_file).resolve() if self.config.log_file else None
        if log_path and not any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path
            for h in package_logger.handlers
        ):
            log_dir = log_path.parent
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(
                logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
            )
            package_logger.addHandler(file_handler)

        for handler in package_logger.handlers:
            handler.setLevel(log_level)

    def analyze(self, text: str) -> AnalysisReport:
        """
        Extract blocks from the text and compute their statistics.

        Args:
            text: Source string to scan.

        Returns:
            AnalysisReport with common statistics and per-block records.
        """
        start_time = time.time()
        logger.info(f"Starting analysis of {len(text)} characters")

        # ── Step 1: Extract blocks ────────────────────────────────────
        logger.info("Phase 1: Block extraction")
        blocks = self.extractor.extract(text)

        # ── Step 2: Compute statistics ────────────────────────────────
        logger.info("Phase 2: Statistics calculation")
        report = self.calculator.calculate(blocks)

        elapsed = time.time() - start_time
        logger.info(
            f"Analysis complete in {elapsed:.3f}s, "
            f"{report.common.total_blocks} blocks found"
        )
        return report

    def run(self, text: str, stream: Optional[TextIO] = None) -> AnalysisReport:
        """Analyze the text and write NDJSON records to the stream."""
        report = self.analyze(text)

        logger.info("Phase 3: Output")
        OutputFormatter(stream).write(report)
        return report
