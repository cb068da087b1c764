"""Prompt assembly for IDE Quick Fix requests."""

from quickfix.prompts.quick_fix_prompt import (
    build_context_section,
    build_quick_fix_prompt,
)

__all__ = ["build_context_section", "build_quick_fix_prompt"]
