"""Utility functions and helpers."""

from .async_utils import gather_with_concurrency

__all__ = [
    "gather_with_concurrency",
]
