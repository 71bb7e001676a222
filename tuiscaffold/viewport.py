"""A scrollable window onto a block of text."""

from __future__ import annotations

import re

from wcwidth import wcwidth

_TOKEN_RE = re.compile(r"(\x1b\[[0-9;?]*[ -/]*[@-~])")

# key -> (direction, step) where step is "page", "half" or "line"
_KEYS = {
    **dict.fromkeys(("pgdown", " ", "f"), (1, "page")),
    **dict.fromkeys(("pgup", "b"), (-1, "page")),
    **dict.fromkeys(("d", "ctrl+d"), (1, "half")),
    **dict.fromkeys(("u", "ctrl+u"), (-1, "half")),
    **dict.fromkeys(("down", "j"), (1, "line")),
    **dict.fromkeys(("up", "k"), (-1, "line")),
}


def _fit(line: str, width: int) -> str:
    """Cut a line to width cells, keeping escapes, and pad with spaces."""
    out: list[str] = []
    used = 0
    styled = False
    for part in _TOKEN_RE.split(line):
        if _TOKEN_RE.fullmatch(part):
            out.append(part)
            styled = True
            continue
        for ch in part:
            cells = max(wcwidth(ch), 0)
            if used + cells > width:
                return "".join(out) + ("\x1b[0m" if styled else "") + " " * (width - used)
            out.append(ch)
            used += cells
    return "".join(out) + " " * (width - used)


class Viewport:
    """Shows `height` lines of its content starting at `y_offset`."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self.y_offset = 0
        self.y_position = 0
        self._lines: list[str] = []

    def set_content(self, content: str) -> None:
        self._lines = content.replace("\r\n", "\n").split("\n")
        if self.y_offset > len(self._lines) - 1:
            self.goto_bottom()

    def max_y_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    def at_top(self) -> bool:
        return self.y_offset <= 0

    def at_bottom(self) -> bool:
        return self.y_offset >= self.max_y_offset()

    def _scroll_to(self, offset: int) -> None:
        self.y_offset = min(max(offset, 0), self.max_y_offset())

    def line_down(self, n: int = 1) -> None:
        if n and self._lines and not self.at_bottom():
            self._scroll_to(self.y_offset + n)

    def line_up(self, n: int = 1) -> None:
        if n and self._lines and not self.at_top():
            self._scroll_to(self.y_offset - n)

    def goto_top(self) -> None:
        if not self.at_top():
            self._scroll_to(0)

    def goto_bottom(self) -> None:
        self._scroll_to(self.max_y_offset())

    def handle_key(self, key: str) -> bool:
        """Scroll for a navigation key; return whether the key was used."""
        entry = _KEYS.get(key)
        if entry is None:
            return False
        direction, step = entry
        n = {"page": self.height, "half": self.height // 2, "line": 1}[step]
        (self.line_down if direction > 0 else self.line_up)(n)
        return True

    def visible_lines(self) -> list[str]:
        top = max(0, self.y_offset)
        bottom = min(max(self.y_offset + self.height, top), len(self._lines))
        return self._lines[top:bottom]

    def view(self) -> str:
        """Render exactly `height` rows, each `width` cells wide."""
        if self.height <= 0:
            return ""
        rows = self.visible_lines()[:self.height]
        if self.width > 0:
            rows = [_fit(row, self.width) for row in rows]
        rows += [" " * max(self.width, 0)] * (self.height - len(rows))
        return "\n".join(rows)