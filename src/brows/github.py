"""GitHub releases client for brows.

Lists every release of a repository as ``Release`` records. A failed
request is reported as ``FetchError``; nothing is retried.
"""

import time
from dataclasses import dataclass
from typing import Optional

import httpx

from brows.errors import FetchError
from brows.models import Release


# GitHub caps per_page at 100
MAX_PER_PAGE = 100
MAX_RELEASES = 1000


@dataclass
class RateLimitInfo:
    """GitHub API rate limit information."""

    limit: int = 60
    remaining: int = 60
    reset_at: float = 0.0

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "RateLimitInfo":
        """Parse rate limit info from response headers."""
        return cls(
            limit=int(headers.get("x-ratelimit-limit", 60)),
            remaining=int(headers.get("x-ratelimit-remaining", 60)),
            reset_at=float(headers.get("x-ratelimit-reset", 0)),
        )

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining <= 0

    @property
    def seconds_until_reset(self) -> float:
        """Seconds until rate limit resets."""
        return max(0, self.reset_at - time.time())


class GitHubClient:
    """Client for the GitHub releases API."""

    BASE_URL = "https://api.github.com"

    def __init__(self, token: Optional[str] = None, timeout: float = 30.0):
        """Initialize GitHub client.

        Args:
            token: GitHub access token sent as a bearer token.
            timeout: Request timeout in seconds.
        """
        self.token = token
        self.timeout = timeout
        self._client: Optional[httpx.Client] = None
        self._rate_limit = RateLimitInfo()

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            headers = {
                "Accept": "application/vnd.github+json",
                "User-Agent": "brows-release-browser",
            }
            if self.token:
                headers["Authorization"] = f"Bearer {self.token}"
            self._client = httpx.Client(
                base_url=self.BASE_URL,
                headers=headers,
                timeout=self.timeout,
                follow_redirects=True,
            )
        return self._client

    @property
    def rate_limit(self) -> RateLimitInfo:
        """Rate limit info from the last response."""
        return self._rate_limit

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def get(self, url: str, **kwargs) -> httpx.Response:
        """Make a GET request.

        Raises:
            FetchError: On transport errors and non-2xx responses
        """
        try:
            response = self.client.get(url, **kwargs)
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {url} failed: {e}") from e

        self._rate_limit = RateLimitInfo.from_headers(response.headers)

        if response.status_code in (403, 429) and self._rate_limit.is_exhausted:
            raise FetchError(
                f"Rate limit of {self._rate_limit.limit} requests exceeded. "
                f"Resets in {self._rate_limit.seconds_until_reset:.0f}s"
            )

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"GitHub returned {response.status_code} for {url}"
            ) from e
        return response

    def list_releases(
        self,
        owner: str,
        name: str,
        per_page: int = MAX_PER_PAGE,
        max_releases: int = MAX_RELEASES,
    ) -> list[Release]:
        """Fetch repository releases.

        Args:
            owner: Repository owner
            name: Repository name
            per_page: Number per page (max 100)
            max_releases: Maximum total to fetch

        Returns:
            List of releases, newest first as GitHub reports them

        Raises:
            FetchError: If any page fails
        """
        per_page = min(per_page, MAX_PER_PAGE)
        releases: list[Release] = []
        page = 1

        while len(releases) < max_releases:
            response = self.get(
                f"/repos/{owner}/{name}/releases",
                params={"per_page": per_page, "page": page},
            )
            try:
                data = response.json()
                if not data:
                    break
                for item in data:
                    releases.append(
                        Release(
                            tag=item.get("tag_name") or "",
                            description=item.get("body") or "",
                        )
                    )
            except (ValueError, TypeError, AttributeError) as e:
                raise FetchError(
                    f"Unexpected response listing releases for {owner}/{name}: {e}"
                ) from e

            if len(data) < per_page:
                break
            page += 1

        return releases[:max_releases]
