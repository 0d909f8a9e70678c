"""Keeps the release body viewport in step with the focused release."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from brows.models import Release


# Rows above and below the scrollable body
HEADER_ROWS = 3  # title, timeline, tag label
FOOTER_ROWS = 2  # scroll indicator, key footer

PLACEHOLDER = "content unavailable"


def clamp(value, low, high):
    """Constrain value to [low, high]. Inverted bounds are swapped first."""
    if high < low:
        low, high = high, low
    return min(max(value, low), high)


@dataclass
class ViewportState:
    """Size, scroll position and content of the release body."""

    width: int = 0
    height: int = 0
    offset: float = 0
    max_offset: float = 0
    content: Any = None

    @property
    def fits(self) -> bool:
        """True when the whole content is visible without scrolling."""
        return self.max_offset <= 0

    @property
    def scroll_percent(self) -> float:
        """Fraction scrolled, 0.0 at the top and 1.0 at the bottom."""
        if self.fits:
            return 1.0
        return clamp(self.offset / self.max_offset, 0.0, 1.0)


class ViewSync:
    """Owns the ViewportState of the release body.

    ``renderer`` turns a description into something displayable; it is
    called once per content replacement.
    """

    def __init__(self, renderer: Callable[[str], Any]) -> None:
        self.renderer = renderer
        self.state = ViewportState()

    def show(self, release: Optional[Release]) -> None:
        """Replace the content with the rendered release description."""
        if release is None:
            self.state.content = self.renderer(PLACEHOLDER)
        else:
            self.state.content = self.renderer(release.description)
        self.state.offset = 0
        self.state.max_offset = 0

    def resize(self, width: int, height: int) -> None:
        """Size the body for a terminal of width x height cells."""
        self.state.width = max(0, width)
        self.state.height = clamp(height - HEADER_ROWS - FOOTER_ROWS, 0, height)

    def scrolled(self, offset: float, max_offset: float) -> None:
        """Record the scroll position reported by the scroll container."""
        self.state.max_offset = max(0, max_offset)
        self.state.offset = clamp(offset, 0, self.state.max_offset)
