"""Release records and the tag index."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class Release:
    """A release as reported by GitHub."""

    tag: str
    description: str = ""


class ReleaseIndex:
    """Releases keyed by their raw tag string.

    Tags are case-sensitive keys. A tag seen twice keeps the last release.
    """

    def __init__(self, releases: Iterable[Release] = ()) -> None:
        self._releases: dict[str, Release] = {}
        for release in releases:
            self._releases[release.tag] = release

    def lookup(self, tag: str) -> Optional[Release]:
        """Return the release for a tag, or None if the tag is unknown."""
        return self._releases.get(tag)

    def tags(self) -> list[str]:
        """All tags in insertion order."""
        return list(self._releases)

    def __len__(self) -> int:
        return len(self._releases)

    def __contains__(self, tag: object) -> bool:
        return tag in self._releases

    def __iter__(self) -> Iterator[Release]:
        return iter(self._releases.values())
