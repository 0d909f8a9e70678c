"""Click CLI for brows."""

from pathlib import Path
from typing import Optional

import click

from brows import __version__
from brows.auth import GITHUB_TOKEN_ENV, resolve_token
from brows.config import BrowsConfig, resolve_repository
from brows.errors import ConfigError, CredentialError, MalformedVersion
from brows.github import GitHubClient
from brows.models import parse_version
from brows.tui import BrowsApp


DEFAULT_START_VERSION = "0.0.0"

USAGE = "Usage:\n  brows organization/repo [version]"


@click.command()
@click.argument("repository", required=False)
@click.argument("version", required=False, default=DEFAULT_START_VERSION)
@click.option("--token", "-t", envvar=GITHUB_TOKEN_ENV, help="GitHub access token")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: ~/.config/brows.yml)",
)
@click.version_option(version=__version__, prog_name="brows")
def cli(
    repository: Optional[str],
    version: str,
    token: Optional[str],
    config_path: Optional[Path],
) -> None:
    """Browse the releases of a GitHub repository.

    REPOSITORY is owner/repo, or just repo when default_org is set in the
    config file. Browsing starts at the first release after VERSION
    (default 0.0.0).

    Keyboard shortcuts:
        h / left  - Previous release
        l / right - Next release
        q / esc   - Quit
    """
    if not repository:
        click.echo(USAGE)
        raise SystemExit(1)

    config = BrowsConfig.load(config_path)

    try:
        owner, repo = resolve_repository(repository, config)
    except ConfigError as e:
        click.echo(str(e))
        raise SystemExit(1)
    except ValueError as e:
        click.echo(f"{e}\n{USAGE}")
        raise SystemExit(1)

    try:
        start_version = parse_version(version)
    except MalformedVersion as e:
        click.echo(f"Error parsing current version {e}", err=True)
        raise SystemExit(1)

    try:
        token = resolve_token(token)
    except CredentialError as e:
        click.echo(str(e), err=True)
        raise SystemExit(1)

    with GitHubClient(token) as client:
        app = BrowsApp(
            owner,
            repo,
            start_version,
            fetcher=client.list_releases,
            display=config.display,
        )
        app.run()

    if app.session.error is not None:
        click.echo(f"Error: {app.session.error}", err=True)
        raise SystemExit(1)
    if app.return_code:
        raise SystemExit(1)
