"""Run two commands as a pipeline between an input file and an output file."""

__version__ = "1.0.0"

__all__ = ["cli", "command", "errors", "linereader", "strutil"]