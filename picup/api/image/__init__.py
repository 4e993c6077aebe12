"""Image API domain: find, upload and rewrite image references."""

from .apply_replacements import apply_replacements
from .ImageReference import ImageReference
from .IssueKind import IssueKind
from .plan_replacements import plan_replacements
from .Replacement import Replacement
from .resolve import resolve
from .ResolvedTarget import ResolvedTarget
from .rewrite_images import rewrite_images
from .RewriteIssue import RewriteIssue
from .RewriteOutcome import RewriteOutcome
from .scan import scan
from .SyntaxKind import SyntaxKind
from .TargetKind import TargetKind
from .UploadCache import UploadCache

__all__ = [
    "ImageReference",
    "IssueKind",
    "Replacement",
    "ResolvedTarget",
    "RewriteIssue",
    "RewriteOutcome",
    "SyntaxKind",
    "TargetKind",
    "UploadCache",
    "apply_replacements",
    "plan_replacements",
    "resolve",
    "rewrite_images",
    "scan",
]
