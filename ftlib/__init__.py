"""Helpers for characters, 32-bit numbers, byte buffers, strings, formatting, linked lists and line reading."""

__version__ = "0.1.0"
__all__ = ["chars", "numbers", "memory", "output", "strings", "printf", "lists", "reader"]