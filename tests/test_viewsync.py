"""Tests for viewport synchronization."""

import pytest

from brows.models import Release
from brows.viewsync import FOOTER_ROWS, HEADER_ROWS, PLACEHOLDER, ViewSync, ViewportState, clamp


class TestClamp:
    """Tests for clamp."""

    def test_above_range(self) -> None:
        assert clamp(5, 1, 3) == 3

    def test_below_range(self) -> None:
        assert clamp(-1, 0, 10) == 0

    def test_within_range(self) -> None:
        assert clamp(4, 0, 10) == 4

    def test_inverted_bounds(self) -> None:
        """Test inverted bounds behave like the ordered range."""
        assert clamp(5, 10, 1) == 5
        assert clamp(0, 10, 1) == 1
        assert clamp(20, 10, 1) == 10

    def test_floats(self) -> None:
        assert clamp(1.5, 0.0, 1.0) == 1.0


class TestViewportState:
    """Tests for ViewportState scroll queries."""

    def test_fits_when_nothing_to_scroll(self) -> None:
        state = ViewportState(width=80, height=20, max_offset=0)
        assert state.fits is True
        assert state.scroll_percent == 1.0

    def test_scroll_percent(self) -> None:
        state = ViewportState(width=80, height=20, offset=25, max_offset=100)
        assert state.fits is False
        assert state.scroll_percent == pytest.approx(0.25)

    def test_scroll_percent_is_clamped(self) -> None:
        state = ViewportState(offset=150, max_offset=100)
        assert state.scroll_percent == 1.0


class TestViewSync:
    """Tests for ViewSync."""

    def test_show_replaces_content(self) -> None:
        """Test show renders the description and resets the scroll position."""
        view = ViewSync(str.upper)
        view.scrolled(40, 100)
        view.show(Release("v1.0.0", "hello"))
        assert view.state.content == "HELLO"
        assert view.state.offset == 0

    def test_show_missing_release(self) -> None:
        """Test a missing release shows the placeholder."""
        view = ViewSync(lambda text: text)
        view.show(None)
        assert view.state.content == PLACEHOLDER

    def test_resize_reserves_header_and_footer(self) -> None:
        """Test resize subtracts the header and footer bands."""
        view = ViewSync(str)
        view.resize(120, 40)
        assert view.state.width == 120
        assert view.state.height == 40 - HEADER_ROWS - FOOTER_ROWS

    def test_resize_tiny_terminal(self) -> None:
        """Test a terminal shorter than the chrome gives an empty body."""
        view = ViewSync(str)
        view.resize(10, 2)
        assert view.state.height == 0

    def test_resize_keeps_content(self) -> None:
        """Test resizing does not re-render."""
        calls = []
        view = ViewSync(lambda text: calls.append(text) or text)
        view.show(Release("v1.0.0", "body"))
        view.resize(80, 24)
        assert calls == ["body"]
        assert view.state.content == "body"

    def test_scrolled(self) -> None:
        """Test scroll positions are recorded and kept in range."""
        view = ViewSync(str)
        view.scrolled(30, 60)
        assert view.state.offset == 30
        assert view.state.max_offset == 60

        view.scrolled(90, 60)
        assert view.state.offset == 60
