"""Terminal text styling: colours, bold, padding, width and alignment."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, replace
from enum import Enum

from wcwidth import wcwidth

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


class Align(Enum):
    """Horizontal placement of text inside a block."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def _width(line: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in _ANSI_RE.sub("", line))


def visible_width(text: str) -> int:
    """Return the cell width of the widest line, ignoring escape sequences."""
    return max(_width(line) for line in text.split("\n"))


def _color_sgr(color: str, layer: int) -> str:
    if color.startswith("#"):
        digits = color[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6 and all(ch in string.hexdigits for ch in digits):
            red, green, blue = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
            return f"{layer};2;{red};{green};{blue}"
    elif color.isdigit() and int(color) <= 255:
        return f"{layer};5;{int(color)}"
    raise ValueError(f"invalid colour: {color!r}")


def _wrap(line: str, limit: int) -> list[str]:
    if _width(line) <= limit:
        return [line]
    pieces: list[str] = []
    for word in line.split(" "):
        chunk = ""
        for ch in word:
            if chunk and _width(chunk + ch) > limit:
                pieces.append(chunk)
                chunk = ""
            chunk += ch
        pieces.append(chunk)
    wrapped: list[str] = []
    current = ""
    for piece in pieces:
        candidate = f"{current} {piece}" if current else piece
        if _width(candidate) <= limit:
            current = candidate
        else:
            wrapped.append(current)
            current = piece
    wrapped.append(current)
    return wrapped


def _align(lines: list[str], align: Align, width: int) -> list[str]:
    target = max(width, *(_width(line) for line in lines))
    aligned = []
    for line in lines:
        gap = target - _width(line)
        left = {Align.LEFT: 0, Align.CENTER: gap // 2, Align.RIGHT: gap}[align]
        aligned.append(" " * left + line + " " * (gap - left))
    return aligned


def join_vertical(align: Align, *blocks: str) -> str:
    """Stack blocks of text, padding every line to the widest one."""
    if not blocks:
        return ""
    lines = [line for block in blocks for line in block.split("\n")]
    return "\n".join(_align(lines, align, 0))


@dataclass(frozen=True)
class Style:
    """An immutable description of how a block of text is drawn."""

    bold: bool = False
    foreground: str | None = None
    background: str | None = None
    padding: tuple[int, int, int, int] = (0, 0, 0, 0)
    width: int = 0
    align: Align = Align.LEFT

    def bold_(self, value: bool = True) -> Style:
        return replace(self, bold=value)

    def fg(self, color: str) -> Style:
        _color_sgr(color, 38)
        return replace(self, foreground=color)

    def bg(self, color: str) -> Style:
        _color_sgr(color, 48)
        return replace(self, background=color)

    def padded(self, *args: int) -> Style:
        """Set padding using one to four values, in CSS order."""
        if not 1 <= len(args) <= 4:
            raise TypeError("padded() takes one to four values")
        top, right, bottom, left = {
            1: lambda a: (a[0],) * 4,
            2: lambda a: (a[0], a[1], a[0], a[1]),
            3: lambda a: (a[0], a[1], a[2], a[1]),
            4: lambda a: a,
        }[len(args)](args)
        if min(top, right, bottom, left) < 0:
            raise ValueError("padding cannot be negative")
        return replace(self, padding=(top, right, bottom, left))

    def sized(self, width: int) -> Style:
        if width < 0:
            raise ValueError("width cannot be negative")
        return replace(self, width=width)

    def aligned(self, align: Align) -> Style:
        return replace(self, align=align)

    def render(self, text: str) -> str:
        """Draw text with this style and return the resulting lines."""
        top, right, bottom, left = self.padding
        lines = text.replace("\r\n", "\n").replace("\t", "    ").split("\n")
        limit = self.width - left - right
        if self.width and limit > 0:
            lines = [piece for line in lines for piece in _wrap(line, limit)]
        lines = [""] * top + [" " * left + line + " " * right for line in lines] + [""] * bottom
        if len(lines) > 1 or self.width:
            lines = _align(lines, self.align, self.width)
        codes = ";".join(
            code
            for code in (
                "1" if self.bold else None,
                self.foreground and _color_sgr(self.foreground, 38),
                self.background and _color_sgr(self.background, 48),
            )
            if code
        )
        if codes:
            lines = [f"\x1b[{codes}m{line}\x1b[0m" for line in lines]
        return "\n".join(lines)