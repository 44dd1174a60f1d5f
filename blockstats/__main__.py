"""
Module entry point for: python -m blockstats

Allows running the analyzer directly as a module:
    python -m blockstats <text> <left delimiter> <right delimiter> [options]
"""

from .cli import cli


def main():
    cli()


if __name__ == "__main__":
    main()
