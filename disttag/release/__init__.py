"""Publish summary loading and dist-tag fan-out."""

from .dist_tag import dist_tag_command, ensure_registry_cli, issue_dist_tags, require_tag
from .errors import TagReleaseError
from .model import DistTagInvocation, DistTagRun, PublishSummaryEntry
from .summary import load_publish_summary, parse_publish_summary

__all__ = [
    "DistTagInvocation",
    "DistTagRun",
    "PublishSummaryEntry",
    "TagReleaseError",
    "dist_tag_command",
    "ensure_registry_cli",
    "issue_dist_tags",
    "load_publish_summary",
    "parse_publish_summary",
    "require_tag",
]
