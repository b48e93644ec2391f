"""Helpers for ASCII characters, byte buffers, strings, descriptor output and linked lists."""

__version__ = "0.1.0"
__all__ = ["charclass", "memory", "strings", "output", "linkedlist"]