"""Error types shared by the configuration layer and the HTTP helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class ValidationIssue:
    """A single failing field and the rule it broke."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ConduitTestError(Exception):
    """Base class for errors raised by the suite's support code."""


class _IssueListError(ConduitTestError):
    """Error carrying every violation found, not just the first one."""

    summary = "validation failed"

    def __init__(self, issues: Iterable[ValidationIssue]) -> None:
        self.issues: List[ValidationIssue] = list(issues)
        super().__init__(self.render())

    @property
    def fields(self) -> List[str]:
        return [issue.field for issue in self.issues]

    def render(self) -> str:
        lines = [f"{self.summary}:"]
        lines.extend(f"  • {issue}" for issue in self.issues)
        return "\n".join(lines)


class MissingOrInvalidEnvironment(_IssueListError):
    """Required environment variables are missing or malformed."""

    summary = "Environment variable validation failed"


class SchemaViolation(_IssueListError):
    """Fixture data does not satisfy its structural rules."""

    summary = "Fixture data failed schema validation"


@dataclass
class RequestFailure(ConduitTestError):
    """Raised when an HTTP call is rejected or cannot be completed."""

    message: str
    status_code: Optional[int] = None
    method: Optional[str] = None
    url: Optional[str] = None

    def __str__(self) -> str:
        target = f" {self.method} {self.url}" if self.method and self.url else ""
        status = f" [HTTP {self.status_code}]" if self.status_code is not None else ""
        return f"{self.message}{status}{target}"
