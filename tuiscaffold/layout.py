"""A screen layout of header, scrollable viewport and footer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .style import Align, Style, join_vertical
from .viewport import Viewport


class VerticalAlignment(IntEnum):
    """Where content shorter than the viewport is placed."""

    TOP = 0
    CENTER = 1
    BOTTOM = 2


@dataclass(frozen=True)
class WindowSize:
    """The terminal was resized to this many columns and rows."""

    width: int
    height: int


@dataclass(frozen=True)
class Key:
    """A key press, named like "q", "ctrl+c", "down" or "pgdown"."""

    name: str


_QUIT_KEYS = {"ctrl+c", "q"}


def _default_style(background: str) -> Style:
    return Style().bold_().fg("#FFFFFF").bg(background).sized(100).aligned(Align.CENTER)


class Layout:
    """Header, viewport and footer stacked to fill the terminal."""

    def __init__(self) -> None:
        self.header = "Header"
        self.footer = "Footer"
        self.header_height = 1
        self.footer_height = 1
        self.header_style = _default_style("#0000FF")
        self.footer_style = _default_style("#333333")
        self.viewport = Viewport()
        self.window_width = 0
        self.window_height = 0
        self._pending_content = ""
        self._vertical_align = VerticalAlignment.TOP
        self._content = ""

    @property
    def vertical_alignment(self) -> VerticalAlignment:
        return self._vertical_align

    def set_content(self, content: str) -> None:
        self._content = content
        if self.viewport.width == 0:
            self._pending_content = content
            return
        self._apply_alignment()

    def set_vertical_alignment(self, alignment: VerticalAlignment) -> None:
        self._vertical_align = VerticalAlignment(alignment)
        if self._content and self.viewport.width > 0:
            self._apply_alignment()

    def update(self, msg: object) -> bool:
        """Handle a message; return True when the program should quit."""
        if isinstance(msg, WindowSize):
            self._resize(msg)
        elif isinstance(msg, Key):
            if msg.name in _QUIT_KEYS:
                return True
            self.viewport.handle_key(msg.name)
        return False

    def _resize(self, size: WindowSize) -> None:
        self.window_width = size.width
        self.window_height = size.height
        self.header_style = self.header_style.sized(max(size.width, 0))
        self.footer_style = self.footer_style.sized(max(size.width, 0))
        viewport_height = max(0, size.height - self.header_height - self.footer_height)
        if self.viewport.width == 0:
            self.viewport = Viewport(size.width, viewport_height)
            if self._pending_content:
                self._content = self._pending_content
                self._pending_content = ""
                self._apply_alignment()
        else:
            self.viewport.width = size.width
            self.viewport.height = viewport_height
            self._apply_alignment()

    def view(self) -> str:
        if self.window_height == 0:
            return "Initializing..."
        return join_vertical(
            Align.LEFT,
            self.header_style.render(self.header),
            self.viewport.view(),
            self.footer_style.render(self.footer),
        )

    def _apply_alignment(self) -> None:
        if self.viewport.width == 0:
            return
        lines = self._content.count("\n") + 1
        padding = self.viewport.height - lines
        if padding <= 0 or self._vertical_align is VerticalAlignment.TOP:
            self.viewport.set_content(self._content)
        elif self._vertical_align is VerticalAlignment.CENTER:
            self.viewport.set_content("\n" * (padding // 2) + self._content)
        else:
            self.viewport.set_content("\n" * padding + self._content)

    @property
    def viewport_height(self) -> int:
        return self.viewport.height

    @property
    def viewport_width(self) -> int:
        return self.viewport.width

    @property
    def viewport_y_position(self) -> int:
        """Screen row at which the viewport is drawn."""
        return self.viewport.y_position

    @viewport_y_position.setter
    def viewport_y_position(self, y: int) -> None:
        self.viewport.y_position = y

    def viewport_at_top(self) -> bool:
        return self.viewport.at_top()

    def viewport_at_bottom(self) -> bool:
        return self.viewport.at_bottom()

    def line_down(self) -> None:
        self.viewport.line_down(1)

    def line_up(self) -> None:
        self.viewport.line_up(1)

    def half_page_down(self) -> None:
        self.viewport.line_down(self.viewport.height // 2)

    def half_page_up(self) -> None:
        self.viewport.line_up(self.viewport.height // 2)

    def page_down(self) -> None:
        self.viewport.line_down(self.viewport.height)

    def page_up(self) -> None:
        self.viewport.line_up(self.viewport.height)

    def scroll_to_top(self) -> None:
        self.viewport.goto_top()

    def scroll_to_bottom(self) -> None:
        self.viewport.goto_bottom()