"""Utility functions and helpers."""

from .logging import setup_logging, setup_observability

__all__ = [
    "setup_logging",
    "setup_observability",
]
