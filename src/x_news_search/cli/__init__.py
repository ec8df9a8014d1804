"""Command-line interface for X News Search."""

from .commands import app, main

__all__ = ["app", "main"]
