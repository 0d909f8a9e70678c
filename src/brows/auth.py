"""GitHub token resolution."""

import subprocess
from typing import Optional

from brows.errors import CredentialError


GITHUB_TOKEN_ENV = "GITHUB_OAUTH_TOKEN"
GH_CLI_COMMAND = ["gh", "auth", "token"]


def token_from_gh_cli() -> str:
    """Ask the gh CLI for its token.

    Raises:
        CredentialError: If gh is missing, fails, or prints nothing
    """
    try:
        result = subprocess.run(
            GH_CLI_COMMAND,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        raise CredentialError(
            f"{GITHUB_TOKEN_ENV} not set and failed to retrieve token from gh CLI: {e}\n"
            f"Please set {GITHUB_TOKEN_ENV} or run 'gh auth login'"
        ) from e

    token = result.stdout.strip()
    if not token:
        raise CredentialError(
            f"{GITHUB_TOKEN_ENV} not set and gh CLI did not return a token.\n"
            f"Please set {GITHUB_TOKEN_ENV} or run 'gh auth login'"
        )
    return token


def resolve_token(token: Optional[str] = None) -> str:
    """Return ``token`` if given, otherwise the gh CLI token."""
    if token:
        return token
    return token_from_gh_cli()
