"""Textual adapter."""

from .source import TextualInputSource, split_textual_key

__all__ = ["TextualInputSource", "split_textual_key"]
