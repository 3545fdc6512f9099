"""Prompt optimization, atomization and preamble generation service."""

__version__ = "1.0.0"
