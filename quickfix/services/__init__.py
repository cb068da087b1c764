"""Services for Quick Fix orchestration."""

from quickfix.services.quick_fix_service import (
    QuickFixService,
    extract_code_block,
    is_probable_partial_response,
    quick_fix_service,
)

__all__ = [
    "QuickFixService",
    "extract_code_block",
    "is_probable_partial_response",
    "quick_fix_service",
]
