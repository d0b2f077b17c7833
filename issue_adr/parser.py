"""Extract issue-form sections from an issue body.

Issue forms render every field as ``### <Label>`` followed by the answer.
Each section runs until the next ``###`` or the end of the body; only the
first occurrence of a heading counts.
"""

import re
from typing import Dict

from issue_adr.models import FormFields

SECTION_HEADINGS: Dict[str, str] = {
    "context": "Context",
    "decision": "Decision",
    "consequences": "Consequences",
    "alternatives": "Alternatives Considered",
    "references": "References",
}

_SECTION_PATTERNS = {
    field: re.compile(rf"### {re.escape(heading)}\s+(.*?)(?=###|\Z)", re.DOTALL)
    for field, heading in SECTION_HEADINGS.items()
}


def parse_issue_body(body: str | None) -> FormFields:
    """Return all five form fields; absent sections are empty strings."""
    text = body or ""
    values: Dict[str, str] = {}
    for field, pattern in _SECTION_PATTERNS.items():
        match = pattern.search(text)
        values[field] = match.group(1).strip() if match else ""
    return FormFields(**values)
