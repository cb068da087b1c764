"""IDE context records sent by the editor integration.

Every field is optional and loosely typed. The editor side decides what it can
collect for a given file, so absence of a field only means the corresponding
prompt section is omitted. Unknown keys are preserved rather than rejected.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IdeRecord(BaseModel):
    """Base for IDE payload records: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )


class SelectionRange(IdeRecord):
    """The user's current editor selection (1-indexed lines)."""

    start_line: int | str | None = None
    end_line: int | str | None = None
    selected_text: str | None = None


class MethodScope(IdeRecord):
    """Enclosing method and class of the caret."""

    method: str | None = None
    method_signature: str | None = None
    class_name: str | None = Field(default=None, alias="class")


class SelectedFunction(IdeRecord):
    """A method overlapping the selection, with its full source."""

    name: str | None = None
    signature: str | None = None
    is_primary: bool = False
    start_line: int | None = None
    end_line: int | None = None
    content: str | None = None


class CodeWindow(IdeRecord):
    """Lines of source around the caret when no method is selected."""

    start_line: int | None = None
    end_line: int | None = None
    content: str | None = None


class Diagnostic(IdeRecord):
    """An inspection result or editor highlight.

    Inspections carry an ``inspection`` name, highlights carry a ``line``.
    """

    severity: str | None = None
    description: str | None = None
    line: int | str | None = None
    inspection: str | None = None
    tool_tip: str | None = None


class IdeContext(IdeRecord):
    """Snapshot of the developer's editor state.

    Fields rendered by the prompt builders are typed, but a value that does
    not fit its record type is kept as sent instead of being rejected. The
    remaining PSI collections (references, hierarchy, fields, calls, imports,
    errors, comments, quick fixes, injected languages) are carried as-is, so
    any shape the editor sends is accepted.
    """

    active: str | Any = Field(default=None, union_mode="left_to_right")
    selection: SelectionRange | Any = Field(default=None, union_mode="left_to_right")
    others: list[str] | Any = Field(default=None, union_mode="left_to_right")
    scope: MethodScope | Any = Field(default=None, union_mode="left_to_right")
    package: str | Any = Field(default=None, union_mode="left_to_right")
    annotations: list[str] | Any = Field(default=None, union_mode="left_to_right")
    inspections: list[Diagnostic] | Any = Field(
        default=None, union_mode="left_to_right"
    )
    highlights: list[Diagnostic] | Any = Field(
        default=None, union_mode="left_to_right"
    )
    selected_functions: list[SelectedFunction] | Any = Field(
        default=None, union_mode="left_to_right"
    )
    current_window: CodeWindow | Any = Field(default=None, union_mode="left_to_right")

    references: Any = None
    class_hierarchy: Any = None
    class_fields: Any = Field(default=None, alias="fields")
    method_calls: Any = None
    imports: Any = None
    errors: Any = None
    comments: Any = None
    quick_fixes: Any = None
    injected_languages: Any = None

    @classmethod
    def from_json(cls, payload: str | bytes) -> "IdeContext":
        """Parse the JSON payload produced by the editor integration.

        Raises:
            pydantic.ValidationError: If the payload is not valid JSON or not
                a JSON object.
        """
        return cls.model_validate_json(payload)

    def to_payload(self) -> dict[str, Any]:
        """Dump to the wire shape (camelCase keys, unset fields dropped)."""
        return self.model_dump(by_alias=True, exclude_none=True)
