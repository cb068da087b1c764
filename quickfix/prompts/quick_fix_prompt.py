"""Prompts for Quick Fix mode: IDE context section and fix instructions."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

AGENT_ROLE_TEMPLATE = (
    "\n\n## Agent Role and Instructions\n\n"
    "You are acting as a specialized agent with the following role and instructions:\n\n"
    "{agent_prompt}"
    "\n\n**IMPORTANT**: Follow the above role and instructions throughout this conversation.\n"
    "\n---\n"
)

# Static workaround notice; emitted regardless of the context
FILE_PATH_ADVISORY = (
    "\n\n## CRITICAL: File Path Format Requirement\n\n"
    "**IMPORTANT**: There's a file modification bug in Claude Code. "
    "The workaround is: always use complete absolute Windows paths with drive "
    "letters and backslashes for ALL file operations.\n\n"
    "**Examples**:\n"
    "- ✅ Correct: `C:\\Users\\username\\project\\src\\file.js`\n"
    "- ❌ Wrong: `/c/Users/username/project/src/file.js`\n"
    "- ❌ Wrong: `./src/file.js` (relative paths)\n\n"
    "---\n\n"
)

CONTEXT_PRIORITY_RULES = (
    "\n\n## User's Current IDE Context\n\n"
    "The user is working in an IDE. Below is their current workspace context.\n\n"
    "**Context Priority Rules**:\n"
    "1. If code is selected → That specific code is the PRIMARY SUBJECT\n"
    "2. If no code is selected → The currently active file is the PRIMARY SUBJECT\n"
    "3. PSI semantic context → Use this to understand code structure and relationships\n\n"
)

LOMBOK_ADVISORY = (
    "> **INFO**: Lombok detected. "
    "Assume all getters/setters/constructors are available.\n\n"
)

QUICK_FIX_INSTRUCTIONS = (
    "\n\n## QUICK FIX INSTRUCTIONS\n\n"
    "You are in QUICK FIX mode. The user wants to specifically fix or improve "
    "the code at their cursor or selection.\n"
    'User\'s Request: "{user_instruction}"\n\n'
    "### YOUR CORE TASK:\n"
    "1. Analyze the provided context perfectly.\n"
    "2. **FORMAT REQUIREMENT**: You MUST provide the full updated content of the "
    "active file within a triplet of backticks with the language specified "
    "(e.g., ```java). The Java backend will use this full content to show a Diff.\n"
    "3. Start your response with a brief explanation of what you fixed, "
    "followed by the code block.\n"
)


def _is_set(value: Any) -> bool:
    """Presence check for payload values; empty records and lists still count."""
    if isinstance(value, (Mapping, list, tuple)):
        return True
    return bool(value)


def _as_record(value: Any) -> Any:
    """Dump typed records to their wire mapping; other values pass through."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    return value


def _get(record: Any, key: str) -> Any:
    """Read ``key`` from a payload record, tolerating non-mapping shapes."""
    record = _as_record(record)
    if isinstance(record, Mapping):
        return record.get(key)
    return None


def _entries(value: Any) -> list[Any]:
    """Return list-shaped payload values as a list, anything else as empty."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _render_active_file(context: Mapping[str, Any], active: str) -> str:
    parts = ["### Currently Active File\n\n", f"**File**: `{active}`\n\n"]

    scope = context.get("scope")
    if _is_set(scope):
        method = _get(scope, "method")
        if method:
            parts.append(f"- **Method**: `{method}`\n")
            signature = _get(scope, "methodSignature")
            if signature:
                parts.append(f"  - Signature: `{signature}`\n")
        class_name = _get(scope, "class")
        if class_name:
            parts.append(f"- **Class**: `{class_name}`\n")
        parts.append("\n")

    # Selected methods take precedence over the raw code window
    functions = _entries(context.get("selectedFunctions"))
    window = context.get("currentWindow")
    if functions:
        parts.append("### Focused Code Context\n")
        for func in functions:
            parts.append(f"#### Method: `{_text(_get(func, 'name'))}`\n")
            parts.append(
                f"- **Location**: Lines {_text(_get(func, 'startLine'))}"
                f"-{_text(_get(func, 'endLine'))}\n"
            )
            parts.append(f"```java\n{_text(_get(func, 'content'))}\n```\n\n")
    elif _get(window, "content"):
        parts.append(
            f"#### Code View (Lines {_text(_get(window, 'startLine'))}"
            f"-{_text(_get(window, 'endLine'))})\n"
        )
        parts.append(f"```java\n{_text(_get(window, 'content'))}\n```\n\n")

    uses_lombok = any(
        isinstance(annotation, str) and "lombok" in annotation.lower()
        for annotation in _entries(context.get("annotations"))
    )
    if uses_lombok:
        parts.append(LOMBOK_ADVISORY)

    selection = context.get("selection")
    if _get(selection, "selectedText"):
        parts.append(
            f"**User has selected lines {_text(_get(selection, 'startLine'))}"
            f"-{_text(_get(selection, 'endLine'))}**. This is the focus:\n\n"
        )
        parts.append(f"```\n{_get(selection, 'selectedText')}\n```\n\n")

    return "".join(parts)


def _render_diagnostics(title: str, entries: list[Any], label_key: str) -> str:
    if not entries:
        return ""

    lines = [f"#### {title}\n"]
    for entry in entries:
        label = _text(_get(entry, label_key))
        if label_key == "line":
            label = f"Line {label}"
        lines.append(
            f"- {label} ({_text(_get(entry, 'severity'))}): "
            f"{_text(_get(entry, 'description'))}\n"
        )
    lines.append("\n")
    return "".join(lines)


def build_context_section(context: Any, agent_prompt: str | None = None) -> str:
    """
    Render the IDE context section of a Quick Fix prompt.

    Sections are gated independently on the presence of their fields, so a
    sparse or malformed context yields a shorter prompt rather than an error.
    Fields the editor sends but this prompt does not use (references, class
    hierarchy, fields, method calls, imports, errors, comments, quick fixes,
    injected languages, other open files) are ignored.

    Args:
        context: IdeContext, the raw editor payload mapping, or anything else.
            Non-record values produce only the fixed preamble.
        agent_prompt: Optional persona/role text. Ignored when blank.

    Returns:
        Markdown-formatted context section
    """
    parts: list[str] = []

    if isinstance(agent_prompt, str) and agent_prompt.strip():
        parts.append(AGENT_ROLE_TEMPLATE.format(agent_prompt=agent_prompt.strip()))

    parts.append(FILE_PATH_ADVISORY)

    context = _as_record(context)
    if not isinstance(context, Mapping):
        logger.debug(
            f"No usable IDE context ({type(context).__name__}), emitting preamble only"
        )
        return "".join(parts)

    parts.append(CONTEXT_PRIORITY_RULES)

    package_name = context.get("package")
    if _is_set(package_name):
        parts.append(f"**Package**: `{package_name}`\n\n")

    active = context.get("active")
    if isinstance(active, str) and active.strip():
        parts.append(_render_active_file(context, active))

    parts.append(
        _render_diagnostics(
            "Code Inspections", _entries(context.get("inspections")), "inspection"
        )
    )
    parts.append(
        _render_diagnostics(
            "Editor Highlights", _entries(context.get("highlights")), "line"
        )
    )

    section = "".join(parts)
    logger.debug(f"Built IDE context section ({len(section)} chars)")
    return section


def build_quick_fix_prompt(context: Any, user_instruction: str) -> str:
    """
    Build the full Quick Fix prompt for the model.

    Args:
        context: IdeContext, raw editor payload mapping, or None
        user_instruction: What the user asked for; embedded verbatim

    Returns:
        Context section followed by the Quick Fix instructions
    """
    prompt = build_context_section(context)
    # str() keeps non-string callers working; no quote or fence escaping
    prompt += QUICK_FIX_INSTRUCTIONS.format(user_instruction=str(user_instruction))

    logger.debug(f"Built Quick Fix prompt ({len(prompt)} chars)")
    return prompt
