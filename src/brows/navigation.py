"""Release navigation state machine.

A ``SessionModel`` moves through three phases:

    UNLOADED --FetchSucceeded--> LOADED --quit--> TERMINATED
    UNLOADED --FetchFailed-----> TERMINATED

Every input is one of the event types below and is applied by
``update()``, which mutates the session and returns an ``Outcome``
telling the caller what to redraw or whether to exit.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from brows.errors import FetchError, MalformedVersion, NoMatchingVersion
from brows.models import ParsedVersion, Release, ReleaseIndex, sort_tags
from brows.viewsync import ViewSync


QUIT_KEYS = frozenset({"q", "ctrl+c", "escape", "esc"})
PREVIOUS_KEYS = frozenset({"left", "h"})
NEXT_KEYS = frozenset({"right", "l"})


class Phase(str, Enum):
    """Lifecycle phase of a session."""

    UNLOADED = "unloaded"
    LOADED = "loaded"
    TERMINATED = "terminated"


# Events

@dataclass(frozen=True)
class FetchSucceeded:
    releases: tuple[Release, ...]


@dataclass(frozen=True)
class FetchFailed:
    error: Exception


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


@dataclass(frozen=True)
class Tick:
    pass


Event = Union[FetchSucceeded, FetchFailed, KeyPressed, Resized, Tick]


@dataclass
class Outcome:
    """What the display needs to do after an event."""

    rendered: bool = False  # viewport content was replaced
    quit: bool = False
    notice: Optional[str] = None


@dataclass
class SessionModel:
    """All state of one browsing session."""

    owner: str
    repo: str
    start_version: ParsedVersion
    view: ViewSync
    sequence: list[ParsedVersion] = field(default_factory=list)
    index: ReleaseIndex = field(default_factory=ReleaseIndex)
    focus: Optional[int] = None
    phase: Phase = Phase.UNLOADED
    loaded: bool = False
    error: Optional[Exception] = None
    spinner_frame: int = 0

    @property
    def full_name(self) -> str:
        """Return owner/repo format."""
        return f"{self.owner}/{self.repo}"

    @property
    def focused(self) -> Optional[ParsedVersion]:
        """The focused version, or None before load."""
        if self.focus is None:
            return None
        return self.sequence[self.focus]

    @property
    def focused_release(self) -> Optional[Release]:
        version = self.focused
        if version is None:
            return None
        return self.index.lookup(version.original)


def initial_focus(sequence: list[ParsedVersion], start: ParsedVersion) -> int:
    """Index of the first version strictly after ``start``.

    Raises:
        NoMatchingVersion: If no version is newer than ``start``
    """
    for i, version in enumerate(sequence):
        if version > start:
            return i
    raise NoMatchingVersion(str(start), fallback=sequence[-1].original if sequence else None)


def _terminate(session: SessionModel, error: Optional[Exception] = None) -> Outcome:
    session.phase = Phase.TERMINATED
    session.error = error
    return Outcome(quit=True)


def _load(session: SessionModel, releases: tuple[Release, ...]) -> Outcome:
    index = ReleaseIndex(releases)
    try:
        sequence = sort_tags(index.tags())
    except MalformedVersion as e:
        return _terminate(session, e)
    if not sequence:
        return _terminate(session, FetchError(f"no releases found for {session.full_name}"))

    outcome = Outcome()
    try:
        focus = initial_focus(sequence, session.start_version)
    except NoMatchingVersion as e:
        focus = len(sequence) - 1
        outcome.notice = str(e)

    session.index = index
    session.sequence = sequence
    session.focus = focus
    session.phase = Phase.LOADED
    session.loaded = True
    session.view.show(session.focused_release)
    outcome.rendered = True
    return outcome


def _move(session: SessionModel, step: int) -> Outcome:
    if session.phase is not Phase.LOADED or session.focus is None:
        return Outcome()
    target = min(max(session.focus + step, 0), len(session.sequence) - 1)
    if target == session.focus:
        return Outcome()
    session.focus = target
    session.view.show(session.focused_release)
    return Outcome(rendered=True)


def update(session: SessionModel, event: Event) -> Outcome:
    """Apply one event to the session."""
    if session.phase is Phase.TERMINATED:
        return Outcome(quit=True)

    match event:
        case FetchSucceeded(releases=releases):
            if session.phase is not Phase.UNLOADED:
                return Outcome()
            return _load(session, releases)
        case FetchFailed(error=error):
            return _terminate(session, error)
        case KeyPressed(key=key) if key in QUIT_KEYS:
            return _terminate(session)
        case KeyPressed(key=key) if key in PREVIOUS_KEYS:
            return _move(session, -1)
        case KeyPressed(key=key) if key in NEXT_KEYS:
            return _move(session, 1)
        case KeyPressed():
            # left to the viewport's own scrolling
            return Outcome()
        case Resized(width=width, height=height):
            session.view.resize(width, height)
            return Outcome()
        case Tick():
            if session.phase is Phase.UNLOADED:
                session.spinner_frame += 1
            return Outcome()
    raise TypeError(f"unexpected event: {event!r}")
