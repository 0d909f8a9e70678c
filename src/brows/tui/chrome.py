"""Header, footer and loading text around the release body."""

from rich.text import Text

from brows.navigation import SessionModel
from brows.viewsync import ViewportState


SPINNER_FRAMES = ["⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷"]
KEY_HINT = "[q] quit [h] prev [l] next"
RULE = "─"


def title_text(session: SessionModel) -> str:
    return f"{session.full_name} Releases"


def tag_label(session: SessionModel, width: int) -> Text:
    """Focused tag followed by a rule out to ``width``."""
    version = session.focused
    tag = version.original if version is not None else ""
    label = Text(f" {tag} ", style="bold")
    label.append(RULE * max(0, width - label.cell_len), style="dim")
    return label


def footer_line(state: ViewportState) -> Text:
    """A plain rule when the body fits, otherwise a rule ending in the scroll percent."""
    if state.fits:
        return Text(RULE * state.width, style="dim")

    info = Text(f" {state.scroll_percent * 100:3.0f}% ", style="bold")
    line = Text(RULE * max(0, state.width - info.cell_len), style="dim")
    return line + info


def loading_text(session: SessionModel) -> str:
    frame = SPINNER_FRAMES[session.spinner_frame % len(SPINNER_FRAMES)]
    return f"\n\n   {frame} loading...\n\n{KEY_HINT}"
