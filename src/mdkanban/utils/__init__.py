"""Utility functions."""

from .tokens import generate_token

__all__ = [
    "generate_token",
]
