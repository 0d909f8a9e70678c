"""brows configuration management.

Handles settings stored in ~/.config/brows.yml, e.g.:

    default_org: my-org
    theme: dark
    focus_color: "#00FF00"
    muted_color: "#5C5C5C"
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml

from brows.errors import ConfigError


# Default configuration values
DEFAULT_THEME = "dark"  # dark, light
DEFAULT_FOCUS_COLOR = "#00FF00"
DEFAULT_MUTED_COLOR = "#5C5C5C"


@dataclass(frozen=True)
class DisplayConfig:
    """Styles handed to the renderers."""

    theme: str = DEFAULT_THEME
    focus_color: str = DEFAULT_FOCUS_COLOR
    muted_color: str = DEFAULT_MUTED_COLOR


@dataclass
class BrowsConfig:
    """brows application configuration."""

    # Owner used when the repository argument has none
    default_org: Optional[str] = None

    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the config file."""
        return Path.home() / ".config" / "brows.yml"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "BrowsConfig":
        """Load configuration from file, or return defaults if not found."""
        config_path = path or cls.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                if isinstance(data, dict):
                    return cls.from_dict(data)
            except (OSError, yaml.YAMLError):
                # Invalid config, return defaults
                pass

        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> "BrowsConfig":
        """Build a config from a parsed mapping, ignoring unknown keys."""
        display_fields = {f.name for f in fields(DisplayConfig)}
        display = DisplayConfig(
            **{k: str(v) for k, v in data.items() if k in display_fields and v is not None}
        )
        default_org = data.get("default_org")
        return cls(
            default_org=str(default_org) if default_org else None,
            display=display,
        )

    def require_default_org(self) -> str:
        """Return the default organization.

        Raises:
            ConfigError: If none is configured
        """
        if not self.default_org:
            raise ConfigError(
                "No organization specified, and no default organization configured."
            )
        return self.default_org


def resolve_repository(repository: str, config: BrowsConfig) -> tuple[str, str]:
    """Split ``owner/repo`` on the first slash.

    A bare ``repo`` takes its owner from the configured default organization.

    Raises:
        ConfigError: If no owner is given and no default is configured
        ValueError: If the owner or repo part is empty
    """
    if "/" not in repository:
        return config.require_default_org(), repository

    owner, _, repo = repository.partition("/")
    if not owner or not repo:
        raise ValueError(f"Invalid repository: {repository!r}")
    return owner, repo
