"""Output models for parsed model replies."""

from pydantic import BaseModel, Field


class QuickFixProposal(BaseModel):
    """A code change proposed by the model in reply to a Quick Fix prompt.

    The editor shows ``new_code`` against either the selection or the whole
    active file, depending on ``replaces_selection``.
    """

    explanation: str = Field(
        default="", description="Text preceding the code block in the reply"
    )
    new_code: str = Field(description="Body of the first fenced code block")
    replaces_selection: bool = Field(
        default=False,
        description="True if the code replaces the selection, False for the full file",
    )
    possibly_partial: bool = Field(
        default=False,
        description="True if a full-file replacement looks like a truncated snippet",
    )
