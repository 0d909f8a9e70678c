"""Error types raised by brows."""

from typing import Optional


class BrowsError(Exception):
    """Base class for brows errors."""


class ConfigError(BrowsError):
    """No default organization available when one is required."""


class CredentialError(BrowsError):
    """No GitHub token could be obtained."""


class MalformedVersion(BrowsError, ValueError):
    """A tag could not be parsed as a semantic version."""

    def __init__(self, tag: str):
        super().__init__(f"Invalid semantic version: {tag!r}")
        self.tag = tag


class FetchError(BrowsError):
    """Listing releases failed."""


class NoMatchingVersion(BrowsError):
    """No release is newer than the requested starting version."""

    def __init__(self, version: str, fallback: Optional[str] = None):
        message = f"Could not find version after v{version}"
        if fallback:
            message += f", showing {fallback}"
        super().__init__(message)
        self.version = version
        self.fallback = fallback
