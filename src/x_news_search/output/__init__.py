"""Output formatting for search results."""

from .formatter import format_output, time_ago, word_wrap

__all__ = ["format_output", "time_ago", "word_wrap"]
