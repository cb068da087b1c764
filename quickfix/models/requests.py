"""Request model for a Quick Fix invocation."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class QuickFixRequest(BaseModel):
    """
    A user's Quick Fix request as captured by the editor popup.

    === FIELDS ===
    - context: IdeContext, the raw editor payload mapping, or None when the
      editor could not collect anything. Left unvalidated on purpose so the
      prompt builder can degrade section by section.
    - instruction: What the user typed ("fix the NPE", "extract a method").
    """

    context: Any = Field(default=None, description="Editor context snapshot")
    instruction: str = Field(description="User's fix/improve request")

    @field_validator("instruction")
    @classmethod
    def validate_instruction_not_empty(cls, v: str) -> str:
        """
        Ensure the instruction is not empty.

        === EDGE CASES ===
        - Whitespace only: Raise ValueError
        - Surrounding whitespace: Stripped
        """
        v = v.strip()
        if not v:
            raise ValueError("instruction cannot be empty")
        return v
