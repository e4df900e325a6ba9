"""Run chains of commands joined by pipes between an input and an output file,
with here-document input and small C-style string and formatting helpers."""

__version__ = "0.1.0"