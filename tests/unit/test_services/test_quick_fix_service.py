"""Unit tests for the Quick Fix service."""

import pytest
from pydantic import ValidationError

from quickfix.config.settings import settings
from quickfix.models import QuickFixProposal, QuickFixRequest
from quickfix.prompts.quick_fix_prompt import build_quick_fix_prompt
from quickfix.services import (
    QuickFixService,
    extract_code_block,
    is_probable_partial_response,
    quick_fix_service,
)

ORIGINAL_FILE = "\n".join(
    [
        "package com.acme;",
        "",
        "public class Foo {",
        "    int bar(String s) {",
        "        return s.length();",
        "    }",
        "}",
    ]
)


@pytest.fixture
def service() -> QuickFixService:
    return QuickFixService()


class TestExtractCodeBlock:
    """Tests for extract_code_block."""

    def test_tagged_block(self) -> None:
        response = "Fixed it.\n```java\nclass Foo {}\n```\n"

        assert extract_code_block(response) == "class Foo {}"

    def test_untagged_block(self) -> None:
        assert extract_code_block("```\nx = 1\n```") == "x = 1"

    @pytest.mark.parametrize("tag", ["javascript", "typescript", "python", "ts", "py"])
    def test_language_tag_is_not_part_of_code(self, tag: str) -> None:
        assert extract_code_block(f"```{tag}\nvalue\n```") == "value"

    def test_first_block_wins(self) -> None:
        response = "```java\nfirst\n```\nand\n```java\nsecond\n```"

        assert extract_code_block(response) == "first"

    @pytest.mark.parametrize("response", ["", "no code here", "```unterminated"])
    def test_no_block(self, response: str) -> None:
        assert extract_code_block(response) is None


class TestIsProbablePartialResponse:
    """Tests for is_probable_partial_response."""

    def test_short_replacement_is_partial(self) -> None:
        assert is_probable_partial_response("x" * 100, "y" * 49, ratio=0.5) is True

    def test_threshold_is_exclusive(self) -> None:
        assert is_probable_partial_response("x" * 100, "y" * 50, ratio=0.5) is False

    def test_defaults_to_settings_ratio(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, "partial_response_ratio", 0.9)

        assert is_probable_partial_response("x" * 100, "y" * 80) is True


class TestParseResponse:
    """Tests for QuickFixService.parse_response."""

    def test_full_file_reply(self, service: QuickFixService) -> None:
        fixed = ORIGINAL_FILE.replace(
            "return s.length();", "return s == null ? 0 : s.length();"
        )
        response = f"Added a null check.\n\n```java\n{fixed}\n```"

        proposal = service.parse_response(response, ORIGINAL_FILE)

        assert proposal == QuickFixProposal(
            explanation="Added a null check.",
            new_code=fixed,
            replaces_selection=False,
            possibly_partial=False,
        )

    def test_full_file_snippet_is_flagged(self, service: QuickFixService) -> None:
        response = "```java\nreturn 0;\n```"

        proposal = service.parse_response(response, ORIGINAL_FILE)

        assert proposal is not None
        assert proposal.possibly_partial is True
        assert proposal.explanation == ""

    def test_selection_reply_is_never_flagged(self, service: QuickFixService) -> None:
        response = "Shorter.\n```java\nx\n```"

        proposal = service.parse_response(
            response, "return s.length();", has_selection=True
        )

        assert proposal is not None
        assert proposal.replaces_selection is True
        assert proposal.possibly_partial is False

    @pytest.mark.parametrize("response", ["", "I cannot fix this without more context."])
    def test_reply_without_code(self, service: QuickFixService, response: str) -> None:
        assert service.parse_response(response, ORIGINAL_FILE) is None


class TestBuildPrompt:
    """Tests for prompt preparation through the service."""

    def test_build_prompt_matches_builder(
        self, service: QuickFixService, full_payload: dict
    ) -> None:
        request = QuickFixRequest(context=full_payload, instruction="  add null check ")

        result = service.build_prompt(request)

        assert result == build_quick_fix_prompt(full_payload, "add null check")

    def test_prepare_validates_instruction(self, service: QuickFixService) -> None:
        with pytest.raises(ValidationError):
            service.prepare({"active": "Foo.java"}, "   ")

    def test_module_level_service(self) -> None:
        result = quick_fix_service.prepare(None, "fix this")

        assert 'User\'s Request: "fix this"' in result
