"""
Block Statistics
================
Extracts delimiter-bounded text blocks from a string and reports
character-class statistics over them.

Architecture:
    - Block Extractor: Single-pass scan for left/right delimiter pairs
    - Statistics Calculator: Per-block character counts and aggregate lengths
    - Output Formatter: Line-delimited JSON records on stdout

Version: 1.0.0
"""

__version__ = "1.0.0"
