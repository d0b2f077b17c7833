"""Data models for issues, form fields, ADR documents and run results."""

from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class AdrStatus(str, Enum):
    """ADR status; also the name of the sub-folder the record lands in."""

    ACCEPTED = "accepted"
    PROPOSED = "proposed"
    REJECTED = "rejected"


class Issue(BaseModel):
    """Issue from the triggering event."""

    number: int
    title: str
    body: str = ""
    labels: List[str] = Field(default_factory=list)


class FormFields(BaseModel):
    """Sections of an issue-form body. Missing sections are empty strings."""

    model_config = ConfigDict(frozen=True)

    context: str = ""
    decision: str = ""
    consequences: str = ""
    alternatives: str = ""
    references: str = ""


class AdrDocument(BaseModel):
    """One ADR file: numbered, titled and filed under its status."""

    title: str
    status: AdrStatus
    fields: FormFields
    sequence: str

    @property
    def slug(self) -> str:
        from issue_adr.renderer import slugify

        return slugify(self.title)

    @property
    def filename(self) -> str:
        from issue_adr.renderer import adr_filename

        return adr_filename(self.sequence, self.title)

    def render(self) -> str:
        from issue_adr.renderer import render_adr

        return render_adr(self.title, self.status, self.fields)


class GitCommit(BaseModel):
    """Commit object as returned by the git data API."""

    sha: str
    tree_sha: str


class RunResult(BaseModel):
    """Terminal outcome of one run."""

    outcome: Literal["created", "skipped", "failed"]
    message: str = ""
    path: str | None = Field(default=None, description="Local path of the written ADR")
    remote_path: str | None = Field(default=None, description="Path of the ADR in the repository")
    sequence: str | None = None
    commit_sha: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome != "failed"
