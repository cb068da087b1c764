"""Data models for Quick Fix prompts."""

from .ide_context import (
    CodeWindow,
    Diagnostic,
    IdeContext,
    MethodScope,
    SelectedFunction,
    SelectionRange,
)
from .outputs import QuickFixProposal
from .requests import QuickFixRequest

__all__ = [
    "IdeContext",
    "SelectionRange",
    "MethodScope",
    "SelectedFunction",
    "CodeWindow",
    "Diagnostic",
    "QuickFixRequest",
    "QuickFixProposal",
]
