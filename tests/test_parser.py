"""Tests for issue-form body parsing."""

import pytest
from pydantic import ValidationError

from issue_adr.models import FormFields
from issue_adr.parser import SECTION_HEADINGS, parse_issue_body

FULL_BODY = """### Context

We need a cache in front of the catalog service.

### Decision

Use Redis.

### Consequences

One more service to operate.

### Alternatives Considered

- Memcached
- In-process LRU

### References

https://redis.io
"""


def test_parse_full_body() -> None:
    """Every section is extracted and trimmed."""
    fields = parse_issue_body(FULL_BODY)
    assert fields.context == "We need a cache in front of the catalog service."
    assert fields.decision == "Use Redis."
    assert fields.consequences == "One more service to operate."
    assert fields.alternatives == "- Memcached\n- In-process LRU"
    assert fields.references == "https://redis.io"


def test_all_fields_present_for_empty_body() -> None:
    """Missing headings give empty strings, never missing keys."""
    for body in ("", None, "just some text without headings"):
        fields = parse_issue_body(body)
        dumped = fields.model_dump()
        assert set(dumped) == set(SECTION_HEADINGS)
        assert all(value == "" for value in dumped.values())


def test_missing_optional_sections_are_empty() -> None:
    """Absent optional headings give empty strings."""
    fields = parse_issue_body("### Context\nNeed RPC.\n### Decision\nUse gRPC.\n### Consequences\nMore deps.")
    assert fields.context == "Need RPC."
    assert fields.decision == "Use gRPC."
    assert fields.consequences == "More deps."
    assert fields.alternatives == ""
    assert fields.references == ""


def test_section_order_does_not_matter() -> None:
    """Sections are found in any order."""
    body = "### References\nADR-1\n### Decision\nGo.\n### Context\nWhy."
    fields = parse_issue_body(body)
    assert fields.context == "Why."
    assert fields.decision == "Go."
    assert fields.references == "ADR-1"


def test_first_occurrence_wins() -> None:
    """A repeated heading keeps the first value."""
    fields = parse_issue_body("### Decision\nfirst\n### Decision\nsecond")
    assert fields.decision == "first"


def test_section_stops_at_any_heading_marker() -> None:
    """Unknown ### headings also end the previous section."""
    fields = parse_issue_body("### Context\nA\n### Extra notes\nB")
    assert fields.context == "A"


def test_heading_without_content_is_empty() -> None:
    """A heading followed directly by another gives an empty field."""
    fields = parse_issue_body("### Context\n### Decision\nX")
    assert fields.context == ""
    assert fields.decision == "X"


def test_multiline_section_keeps_inner_newlines() -> None:
    """Inner newlines survive; only the ends are trimmed."""
    fields = parse_issue_body("### Context\n\nline one\n\nline two\n\n")
    assert fields.context == "line one\n\nline two"


def test_parsing_is_idempotent() -> None:
    """Parsing the same body twice gives equal results."""
    assert parse_issue_body(FULL_BODY) == parse_issue_body(FULL_BODY)


def test_result_is_immutable() -> None:
    """FormFields cannot be modified after parsing."""
    fields = parse_issue_body(FULL_BODY)
    assert isinstance(fields, FormFields)
    with pytest.raises(ValidationError):
        fields.context = "changed"
