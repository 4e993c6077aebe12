"""Rewrite issue dataclass."""

from dataclasses import dataclass

from .IssueKind import IssueKind


@dataclass(frozen=True)
class RewriteIssue:
    kind: IssueKind
    message: str
    path: str = ""
