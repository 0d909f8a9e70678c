"""One-line glyph strip summarizing the release history."""

from typing import Optional, Sequence

from rich.style import Style
from rich.text import Text

from brows.config import DisplayConfig
from brows.models import ParsedVersion, ReleaseClass


GLYPHS = {
    ReleaseClass.MAJOR: "▇",
    ReleaseClass.MINOR: "▅",
    ReleaseClass.PATCH: "▂",
    ReleaseClass.OTHER: "_",
}


def render_timeline(
    sequence: Sequence[ParsedVersion],
    focus: Optional[int],
    width: int,
    display: DisplayConfig,
) -> Text:
    """Render one glyph per release, centered in ``width`` cells.

    The focused release uses the focus color, every other release the
    muted color. Strips wider than ``width`` are not windowed.
    """
    focus_style = Style(color=display.focus_color)
    muted_style = Style(color=display.muted_color)

    strip = Text(no_wrap=True)
    for i, version in enumerate(sequence):
        glyph = GLYPHS[version.classify()]
        strip.append(glyph, style=focus_style if i == focus else muted_style)

    padding = max(0, width - strip.cell_len)
    left = padding // 2
    return Text(" " * left, no_wrap=True) + strip + Text(" " * (padding - left))
