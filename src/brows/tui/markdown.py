"""Markdown rendering for release descriptions."""

from rich.console import RenderableType
from rich.markdown import Markdown
from rich.text import Text


# Pygments style for fenced code per theme
CODE_THEMES = {
    "dark": "monokai",
    "light": "friendly",
}


def render_markdown(text: str, theme: str = "dark") -> RenderableType:
    """Render markdown text for the terminal.

    Rendering failures yield empty output.
    """
    try:
        return Markdown(text, code_theme=CODE_THEMES.get(theme, CODE_THEMES["dark"]))
    except Exception:
        return Text("")
