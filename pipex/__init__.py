"""Run commands connected by pipes between an input file (or here-document) and an output file."""

__version__ = "1.0.0"
__all__ = ["cformat", "cli", "linereader", "numbers", "paths", "textutils"]