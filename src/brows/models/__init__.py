"""Data models for brows."""

from .release import Release, ReleaseIndex
from .version import ParsedVersion, ReleaseClass, parse_version, sort_tags

__all__ = [
    "ParsedVersion",
    "Release",
    "ReleaseClass",
    "ReleaseIndex",
    "parse_version",
    "sort_tags",
]
