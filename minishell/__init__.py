"""Prompt handling and C-style string, number, memory, output and list helpers for a small shell."""

__version__ = "0.1.0"