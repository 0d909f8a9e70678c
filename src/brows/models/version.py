"""Semantic version parsing and ordering for release tags.

Tags are parsed per semver 2.0.0 with an optional leading ``v``:

    v1.2.3
    1.2.3-beta.1
    1.2.3-rc.1+build.5

Ordering follows semver precedence: major, minor and patch compare
numerically, a release outranks any of its prereleases, prerelease
identifiers compare left to right (numeric identifiers numerically and
below alphanumeric ones), and build metadata is ignored.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Iterable

from brows.errors import MalformedVersion


_IDENT = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
SEMVER_PATTERN = re.compile(
    r"v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    rf"(?:-({_IDENT}(?:\.{_IDENT})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?",
    re.ASCII,
)


class ReleaseClass(str, Enum):
    """Timeline class of a release."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    OTHER = "other"


def _identifier_key(identifier: str) -> tuple[int, int | str]:
    if identifier.isdigit():
        return (0, int(identifier))
    return (1, identifier)


@total_ordering
@dataclass(frozen=True, eq=False)
class ParsedVersion:
    """A parsed semantic version.

    Equality, hashing and ordering use semver precedence only, so
    ``v1.2.0`` and ``1.2.0`` are the same version. ``original`` keeps the
    tag as it was given.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()
    original: str = ""

    @property
    def precedence(self) -> tuple:
        """Sort key implementing semver precedence."""
        if self.prerelease:
            pre: tuple = (0, tuple(_identifier_key(i) for i in self.prerelease))
        else:
            pre = (1,)
        return (self.major, self.minor, self.patch, pre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return self.precedence == other.precedence

    def __lt__(self, other: "ParsedVersion") -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return self.precedence < other.precedence

    def __hash__(self) -> int:
        return hash(self.precedence)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def classify(self) -> ReleaseClass:
        """Classify for the timeline. Carries no ordering weight."""
        if self.is_prerelease:
            return ReleaseClass.OTHER
        if self.patch != 0:
            return ReleaseClass.PATCH
        if self.minor != 0:
            return ReleaseClass.MINOR
        return ReleaseClass.MAJOR


def parse_version(tag: str) -> ParsedVersion:
    """Parse a tag into a ParsedVersion.

    Args:
        tag: Raw tag, e.g. ``"v1.2.0"``

    Returns:
        The parsed version

    Raises:
        MalformedVersion: If the tag is not a semantic version
    """
    match = SEMVER_PATTERN.fullmatch(tag)
    if match is None:
        raise MalformedVersion(tag)

    major, minor, patch, prerelease, build = match.groups()
    return ParsedVersion(
        major=int(major),
        minor=int(minor),
        patch=int(patch),
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        build=tuple(build.split(".")) if build else (),
        original=tag,
    )


def sort_tags(tags: Iterable[str]) -> list[ParsedVersion]:
    """Parse and order tags ascending by semver precedence.

    Every tag must parse; the first failure aborts the whole sort.
    Tags that normalize to the same version collapse to the first one
    encountered, so the result is strictly ascending.

    Raises:
        MalformedVersion: Naming the first tag that fails to parse
    """
    seen: dict[ParsedVersion, ParsedVersion] = {}
    for tag in tags:
        version = parse_version(tag)
        if version not in seen:
            seen[version] = version
    return sorted(seen.values())
