"""Utility exports."""
from .text import int_to_text

__all__ = ["int_to_text"]
