"""Terminal UI for brows."""

from .app import BrowsApp

__all__ = ["BrowsApp"]
