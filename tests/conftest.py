"""Pytest configuration and fixtures."""

import pytest

from quickfix.models import IdeContext


@pytest.fixture
def full_payload() -> dict:
    """Return an editor payload exercising every rendered section."""
    return {
        "active": "C:\\work\\demo\\src\\main\\java\\com\\acme\\Foo.java",
        "package": "com.acme",
        "scope": {
            "method": "bar",
            "methodSignature": "int bar(String s)",
            "class": "com.acme.Foo",
        },
        "selectedFunctions": [
            {
                "name": "bar",
                "signature": "int bar(String s)",
                "isPrimary": True,
                "startLine": 10,
                "endLine": 14,
                "content": "int bar(String s) {\n    return s.length();\n}",
            }
        ],
        "annotations": ["lombok.Data", "Override"],
        "selection": {
            "startLine": 11,
            "endLine": 11,
            "selectedText": "return s.length();",
        },
        "inspections": [
            {
                "inspection": "NullableProblems",
                "severity": "WARNING",
                "description": "s may be null",
            }
        ],
        "highlights": [
            {"line": 11, "severity": "ERROR", "description": "Cannot resolve symbol"}
        ],
        "imports": ["java.util.List"],
        "classHierarchy": {"extends": "java.lang.Object"},
    }


@pytest.fixture
def full_context(full_payload: dict) -> IdeContext:
    """Return the full payload as a typed IdeContext."""
    return IdeContext.model_validate(full_payload)
