"""Persistence of search output."""

from .json_writer import JsonWriter

__all__ = ["JsonWriter"]
