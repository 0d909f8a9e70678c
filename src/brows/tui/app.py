"""Main brows TUI application."""

from functools import partial
from typing import Callable, Optional

from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.timer import Timer
from textual.widgets import Footer, Static

from brows.config import DisplayConfig
from brows.models import ParsedVersion, Release
from brows.navigation import (
    Event,
    FetchFailed,
    FetchSucceeded,
    KeyPressed,
    Phase,
    Resized,
    SessionModel,
    Tick,
    update,
)
from brows.tui.chrome import footer_line, loading_text, tag_label, title_text
from brows.tui.markdown import render_markdown
from brows.tui.timeline import render_timeline
from brows.viewsync import ViewSync


SPINNER_INTERVAL = 0.1  # seconds between spinner frames

Fetcher = Callable[[str, str], list[Release]]


class BrowsApp(App):
    """Step through the releases of one repository."""

    TITLE = "brows"

    CSS = """
    Screen {
        layout: vertical;
    }

    #title {
        height: 1;
        padding: 0 1;
        text-style: bold;
    }

    #timeline, #tag-label, #scroll-footer {
        height: 1;
    }

    #loading {
        height: 1fr;
        padding: 0 1;
    }

    #release-body {
        height: 1fr;
    }

    #release-notes {
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "navigate('q')", "Quit", show=True),
        Binding("escape", "navigate('escape')", "Quit", show=False),
        Binding("ctrl+c", "navigate('ctrl+c')", "Quit", show=False, priority=True),
        Binding("h", "navigate('h')", "Previous", show=True),
        Binding("left", "navigate('left')", "Previous", show=False, priority=True),
        Binding("l", "navigate('l')", "Next", show=True),
        Binding("right", "navigate('right')", "Next", show=False, priority=True),
    ]

    def __init__(
        self,
        owner: str,
        repo: str,
        start_version: ParsedVersion,
        fetcher: Fetcher,
        display: Optional[DisplayConfig] = None,
    ):
        super().__init__()
        self.display_config = display or DisplayConfig()
        self.fetcher = fetcher
        self.session = SessionModel(
            owner=owner,
            repo=repo,
            start_version=start_version,
            view=ViewSync(partial(render_markdown, theme=self.display_config.theme)),
        )
        self._spinner: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        yield Static(title_text(self.session), id="title")
        yield Static(id="loading")
        yield Static(id="timeline")
        yield Static(id="tag-label")
        with VerticalScroll(id="release-body"):
            yield Static(id="release-notes")
        yield Static(id="scroll-footer")
        yield Footer()

    def on_mount(self) -> None:
        self.watch(
            self.query_one("#release-body", VerticalScroll),
            "scroll_y",
            self._on_body_scrolled,
            init=False,
        )
        self.handle(Resized(self.size.width, self.size.height))
        self._spinner = self.set_interval(SPINNER_INTERVAL, self._tick)
        self.fetch_releases()

    def on_resize(self, event: events.Resize) -> None:
        # may arrive before mount; only redraw once releases are on screen
        update(self.session, Resized(event.size.width, event.size.height))
        if self.session.phase is Phase.LOADED:
            self.refresh_chrome()
            self.call_after_refresh(self._sync_scroll)

    def action_navigate(self, key: str) -> None:
        """Feed a bound key into the session."""
        self.handle(KeyPressed(key))

    def handle(self, event: Event) -> None:
        """Apply an event to the session and bring the screen up to date."""
        outcome = update(self.session, event)
        if not isinstance(event, Tick):
            self.log(event=event, outcome=outcome)

        if outcome.notice:
            self.notify(outcome.notice, severity="warning")

        if outcome.quit:
            self.exit(return_code=1 if self.session.error else 0)
            return

        if outcome.rendered:
            self.query_one("#release-notes", Static).update(self.session.view.state.content)
            self.query_one("#release-body", VerticalScroll).scroll_home(animate=False)
            self.call_after_refresh(self._sync_scroll)

        self.refresh_chrome()

    def refresh_chrome(self) -> None:
        """Redraw everything around the release body."""
        loaded = self.session.loaded
        for selector in ("#timeline", "#tag-label", "#release-body", "#scroll-footer"):
            self.query_one(selector).display = loaded
        self.query_one("#loading").display = not loaded

        if not loaded:
            self.query_one("#loading", Static).update(loading_text(self.session))
            return

        state = self.session.view.state
        self.query_one("#timeline", Static).update(
            render_timeline(
                self.session.sequence,
                self.session.focus,
                state.width,
                self.display_config,
            )
        )
        self.query_one("#tag-label", Static).update(tag_label(self.session, state.width))
        self.query_one("#scroll-footer", Static).update(footer_line(state))

    def _tick(self) -> None:
        if self.session.loaded:
            if self._spinner is not None:
                self._spinner.stop()
                self._spinner = None
            return
        self.handle(Tick())

    def _on_body_scrolled(self, _value: float) -> None:
        self._sync_scroll()

    def _sync_scroll(self) -> None:
        if self.session.phase is not Phase.LOADED:
            return
        body = self.query_one("#release-body", VerticalScroll)
        self.session.view.scrolled(body.scroll_y, body.max_scroll_y)
        self.query_one("#scroll-footer", Static).update(footer_line(self.session.view.state))

    @work(exclusive=True, thread=True)
    def fetch_releases(self) -> None:
        """Fetch releases in a background thread and post the result."""
        try:
            releases = self.fetcher(self.session.owner, self.session.repo)
        except Exception as e:
            # any fetcher failure ends the session through the model
            self.call_from_thread(self.handle, FetchFailed(e))
            return
        self.call_from_thread(self.handle, FetchSucceeded(tuple(releases)))
