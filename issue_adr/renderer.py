"""Render an ADR as markdown and derive its filename."""

import re

from issue_adr.models import AdrStatus, FormFields

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Lower-case title with every run of other characters turned into '-'.

    Not truncated; a title made only of symbols gives an empty slug.
    """
    return _NON_SLUG.sub("-", title.lower()).strip("-")


def adr_filename(sequence: str, title: str) -> str:
    return f"{sequence}-{slugify(title)}.md"


def render_adr(title: str, status: AdrStatus | str, fields: FormFields) -> str:
    """Build the ADR document.

    Order: title, Status, Context, Decision, Consequences, then Alternatives
    Considered and References only when they have content.
    """
    status_value = status.value if isinstance(status, AdrStatus) else str(status)
    sections = [
        f"# ADR: {title}",
        f"## Status\n{status_value[:1].upper()}{status_value[1:]}",
        f"## Context\n{fields.context or 'No context provided.'}",
        f"## Decision\n{fields.decision or 'No decision provided.'}",
        f"## Consequences\n{fields.consequences or 'No consequences provided.'}",
    ]
    if fields.alternatives:
        sections.append(f"## Alternatives Considered\n{fields.alternatives}")
    if fields.references:
        sections.append(f"## References\n{fields.references}")
    return "\n\n".join(sections).strip()
