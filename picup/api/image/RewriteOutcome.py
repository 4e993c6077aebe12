"""Result of one rewrite workflow invocation."""

from dataclasses import dataclass, field

from .IssueKind import IssueKind
from .Replacement import Replacement
from .RewriteIssue import RewriteIssue


@dataclass
class RewriteOutcome:
    """What the workflow did: applied replacements, uploads and issues."""

    replacements: list[Replacement] = field(default_factory=list)
    uploads: dict[str, str] = field(default_factory=dict)
    upload_count: int = 0
    issues: list[RewriteIssue] = field(default_factory=list)
    applied: bool = False

    def issues_of(self, kind: IssueKind) -> list[RewriteIssue]:
        return [issue for issue in self.issues if issue.kind == kind]
