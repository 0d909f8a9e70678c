"""Tests for brows TUI application."""

import pytest
from rich.console import Console
from rich.markdown import Markdown
from rich.text import Text

from brows.config import DisplayConfig
from brows.errors import FetchError
from brows.models import Release, parse_version, sort_tags
from brows.navigation import FetchSucceeded, Phase, SessionModel, update
from brows.tui.chrome import (
    KEY_HINT,
    RULE,
    SPINNER_FRAMES,
    footer_line,
    loading_text,
    tag_label,
    title_text,
)
from brows.tui.markdown import render_markdown
from brows.tui.timeline import GLYPHS, render_timeline
from brows.viewsync import ViewSync, ViewportState


def plain(renderable) -> str:
    """Render to plain text."""
    console = Console(width=80, color_system=None, record=True)
    console.print(renderable)
    return console.export_text()


def loaded_session(*tags: str, start: str = "0.0.0") -> SessionModel:
    session = SessionModel(
        owner="alice",
        repo="hello",
        start_version=parse_version(start),
        view=ViewSync(lambda text: text),
    )
    update(session, FetchSucceeded(tuple(Release(tag, f"notes {tag}") for tag in tags)))
    return session


class TestTimeline:
    """Tests for render_timeline."""

    def test_glyph_per_class(self) -> None:
        """Test each class gets its glyph in order."""
        sequence = sort_tags(["1.0.0", "1.1.0", "1.1.1", "2.0.0-beta.1"])
        strip = render_timeline(sequence, 1, 4, DisplayConfig())
        assert strip.plain == "▇▅▂_"

    def test_distinct_glyphs(self) -> None:
        """Test the four classes are visually distinct."""
        assert len(set(GLYPHS.values())) == 4

    def test_centered(self) -> None:
        """Test the strip is centered within the width."""
        sequence = sort_tags(["1.0.0", "2.0.0"])
        strip = render_timeline(sequence, 0, 10, DisplayConfig())
        assert strip.plain == "    ▇▇    "
        assert strip.cell_len == 10

    def test_not_truncated(self) -> None:
        """Test a strip wider than the width is left whole."""
        sequence = sort_tags([f"1.{i}.0" for i in range(1, 21)])
        strip = render_timeline(sequence, 0, 5, DisplayConfig())
        assert strip.plain == "▅" * 20

    def test_focus_style(self) -> None:
        """Test only the focused glyph uses the focus color."""
        display = DisplayConfig(focus_color="#00FF00", muted_color="#5C5C5C")
        sequence = sort_tags(["1.0.0", "1.1.0", "1.2.0"])
        strip = render_timeline(sequence, 1, 3, display)

        colors = [str(span.style.color.name).lower() for span in strip.spans]
        assert colors == ["#5c5c5c", "#00ff00", "#5c5c5c"]


class TestChrome:
    """Tests for header, footer and loading text."""

    def test_title_contains_repo(self) -> None:
        """Test the title names owner/repo."""
        session = loaded_session("0.1.0", "1.0.0")
        assert "alice/hello" in title_text(session)

    def test_tag_label(self) -> None:
        """Test the tag label shows the focused tag and fills the width."""
        session = loaded_session("v0.1.0", "v1.0.0")
        label = tag_label(session, 40)
        assert "v0.1.0" in label.plain
        assert label.plain.endswith(RULE)
        assert label.cell_len == 40

    def test_footer_when_content_fits(self) -> None:
        """Test the footer is a plain rule when nothing scrolls."""
        line = footer_line(ViewportState(width=20, max_offset=0))
        assert line.plain == RULE * 20

    def test_footer_when_scrollable(self) -> None:
        """Test the footer shows the scroll percent."""
        line = footer_line(ViewportState(width=30, offset=50, max_offset=100))
        assert line.plain.endswith(" 50% ")
        assert line.cell_len == 30

    def test_loading_text(self) -> None:
        """Test the loading view shows the spinner and key hint."""
        session = SessionModel(
            owner="alice",
            repo="hello",
            start_version=parse_version("0.0.0"),
            view=ViewSync(str),
        )
        session.spinner_frame = 3
        text = loading_text(session)
        assert SPINNER_FRAMES[3] in text
        assert "loading..." in text
        assert KEY_HINT in text


class TestMarkdown:
    """Tests for render_markdown."""

    def test_renders_markdown(self) -> None:
        """Test markdown is rendered for the terminal."""
        rendered = render_markdown("# Changes\n\n* fixed a bug")
        assert isinstance(rendered, Markdown)
        output = plain(rendered)
        assert "Changes" in output
        assert "fixed a bug" in output

    def test_empty_description(self) -> None:
        """Test an empty description renders to nothing visible."""
        assert plain(render_markdown("")).strip() == ""

    def test_unknown_theme_falls_back(self) -> None:
        """Test an unknown theme still renders."""
        assert isinstance(render_markdown("text", theme="neon"), Markdown)

    def test_failure_is_swallowed(self) -> None:
        """Test render failures yield empty text."""
        rendered = render_markdown(None)  # type: ignore[arg-type]
        assert isinstance(rendered, Text)
        assert rendered.plain == ""


class TestTUIModule:
    """Tests for TUI module imports."""

    def test_import_brows_app(self) -> None:
        """Test that BrowsApp can be imported."""
        from brows.tui import BrowsApp
        assert BrowsApp is not None

    def test_app_class_attributes(self) -> None:
        """Test BrowsApp has required attributes."""
        from brows.tui import BrowsApp
        assert hasattr(BrowsApp, "TITLE")
        assert hasattr(BrowsApp, "BINDINGS")
        assert hasattr(BrowsApp, "CSS")

    def test_app_bindings(self) -> None:
        """Test BrowsApp has expected key bindings."""
        from brows.tui import BrowsApp
        binding_keys = [b.key for b in BrowsApp.BINDINGS]
        for key in ("q", "escape", "ctrl+c", "h", "left", "l", "right"):
            assert key in binding_keys


def fetcher_for(*tags: str):
    def fetch(owner: str, repo: str) -> list[Release]:
        return [Release(tag, f"## {tag}\n\nnotes for {owner}/{repo}") for tag in tags]
    return fetch


def failing_fetcher(owner: str, repo: str) -> list[Release]:
    raise FetchError("GitHub returned 404")


class TestBrowsApp:
    """Tests driving BrowsApp headlessly."""

    @pytest.mark.asyncio
    async def test_loads_and_navigates(self) -> None:
        """Test load, next, next at the end, previous."""
        from brows.tui import BrowsApp

        app = BrowsApp("alice", "hello", parse_version("0.0.0"), fetcher=fetcher_for("1.0.0", "0.1.0"))
        async with app.run_test(size=(80, 24)) as pilot:
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert app.session.loaded is True
            assert app.session.focused.original == "0.1.0"

            await pilot.press("l")
            assert app.session.focused.original == "1.0.0"

            await pilot.press("right")
            assert app.session.focused.original == "1.0.0"

            await pilot.press("h")
            assert app.session.focused.original == "0.1.0"

            await pilot.press("left")
            assert app.session.focused.original == "0.1.0"

    @pytest.mark.asyncio
    async def test_resize_keeps_focus(self) -> None:
        """Test a terminal resize updates the viewport only."""
        from brows.tui import BrowsApp

        app = BrowsApp("alice", "hello", parse_version("0.0.0"), fetcher=fetcher_for("0.1.0", "1.0.0"))
        async with app.run_test(size=(80, 24)) as pilot:
            await app.workers.wait_for_complete()
            await pilot.press("l")
            await pilot.resize_terminal(100, 30)
            await pilot.pause()

            assert app.session.focused.original == "1.0.0"
            assert app.session.view.state.width == 100

    @pytest.mark.asyncio
    async def test_quit(self) -> None:
        """Test q exits with return code 0."""
        from brows.tui import BrowsApp

        app = BrowsApp("alice", "hello", parse_version("0.0.0"), fetcher=fetcher_for("0.1.0"))
        async with app.run_test() as pilot:
            await app.workers.wait_for_complete()
            app.action_navigate("q")

        assert app.session.phase is Phase.TERMINATED
        assert app.session.error is None
        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_fetch_failure_exits(self) -> None:
        """Test a fetch error ends the app before any release is shown."""
        from brows.tui import BrowsApp

        app = BrowsApp("alice", "hello", parse_version("0.0.0"), fetcher=failing_fetcher)
        async with app.run_test():
            await app.workers.wait_for_complete()

        assert app.session.loaded is False
        assert isinstance(app.session.error, FetchError)
        assert app.return_code == 1

    @pytest.mark.asyncio
    async def test_unexpected_fetch_error_exits(self) -> None:
        """Test a fetcher raising a non-FetchError still ends the session with an error."""
        from brows.tui import BrowsApp

        def broken_fetcher(owner: str, repo: str) -> list[Release]:
            raise ValueError("not a release list")

        app = BrowsApp("alice", "hello", parse_version("0.0.0"), fetcher=broken_fetcher)
        async with app.run_test():
            await app.workers.wait_for_complete()

        assert app.session.phase is Phase.TERMINATED
        assert isinstance(app.session.error, ValueError)
        assert app.return_code == 1
