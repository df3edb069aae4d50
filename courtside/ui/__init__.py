"""Textual user interface for courtside."""
