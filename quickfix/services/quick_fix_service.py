"""Quick Fix service: prompt assembly and parsing of the model's reply."""

import logging
import re
from typing import Any

from quickfix.config.settings import settings
from quickfix.models.outputs import QuickFixProposal
from quickfix.models.requests import QuickFixRequest
from quickfix.prompts.quick_fix_prompt import build_quick_fix_prompt

logger = logging.getLogger(__name__)

# First fenced block, optionally tagged with one of the languages the editor handles
CODE_BLOCK_PATTERN = re.compile(
    r"```(?:javascript|typescript|java|python|html|css|js|ts|py)?\s*([\s\S]*?)```"
)


def extract_code_block(response: str) -> str | None:
    """
    Extract the body of the first fenced code block in a model reply.

    Args:
        response: Raw model reply text

    Returns:
        Stripped code block body, or None if the reply has no code block
    """
    if not response:
        return None

    match = CODE_BLOCK_PATTERN.search(response)
    if not match:
        return None
    return match.group(1).strip()


def is_probable_partial_response(
    old_code: str, new_code: str, ratio: float | None = None
) -> bool:
    """Check whether a full-file replacement looks like a snippet.

    Args:
        old_code: Current content of the active file
        new_code: Code proposed by the model
        ratio: Minimum new/old length ratio; defaults to settings

    Returns:
        True if new_code is shorter than ``ratio`` times old_code
    """
    if ratio is None:
        ratio = settings.partial_response_ratio
    return len(new_code) < len(old_code) * ratio


class QuickFixService:
    """Service gluing the editor's Quick Fix action to the model."""

    def build_prompt(self, request: QuickFixRequest) -> str:
        """Build the model prompt for a validated request."""
        prompt = build_quick_fix_prompt(request.context, request.instruction)
        logger.info(
            f"Quick Fix prompt prepared ({len(prompt)} chars, "
            f"context={type(request.context).__name__})"
        )
        return prompt

    def parse_response(
        self,
        response: str,
        original_code: str,
        has_selection: bool = False,
    ) -> QuickFixProposal | None:
        """
        Turn the model's reply into a proposed change.

        Args:
            response: Raw model reply
            original_code: Selected text if has_selection, else the full file
            has_selection: Whether the fix targets the editor selection

        Returns:
            QuickFixProposal, or None when the reply contains no code block
            (the caller shows the reply as plain text instead)
        """
        match = CODE_BLOCK_PATTERN.search(response or "")
        if not match:
            logger.info("Quick Fix reply contained no code block")
            return None

        new_code = match.group(1).strip()
        explanation = response[: match.start()].strip()

        possibly_partial = False
        if has_selection:
            logger.info("Quick Fix: using selection for diff")
        else:
            logger.info("Quick Fix: using full file for diff")
            possibly_partial = is_probable_partial_response(original_code, new_code)
            if possibly_partial:
                logger.warning(
                    f"Quick Fix reply looks like a partial snippet "
                    f"({len(new_code)} of {len(original_code)} chars)"
                )

        return QuickFixProposal(
            explanation=explanation,
            new_code=new_code,
            replaces_selection=has_selection,
            possibly_partial=possibly_partial,
        )

    def prepare(self, context: Any, instruction: str) -> str:
        """Validate raw editor input and build the prompt.

        Raises:
            pydantic.ValidationError: If the instruction is blank
        """
        request = QuickFixRequest(context=context, instruction=instruction)
        return self.build_prompt(request)


quick_fix_service = QuickFixService()
