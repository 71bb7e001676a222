"""Demo application built on the header/viewport/footer layout."""

from __future__ import annotations

import argparse
import sys

from blessed import Terminal
from blessed.keyboard import Keystroke

from .layout import Key, Layout, VerticalAlignment, WindowSize
from .style import Align, Style

VERSION = "v1.0.0"

_FOOTER_POS = "Press 'p' to hide position info | 'q' to quit"
_FOOTER_HELP = (
    "h: toggle help | p: show pos | q: quit | ↑/↓, j/k: line | "
    "u/d: half page | 1/2/3: align top/center/bottom"
)
_FOOTER_DEFAULT = (
    "Press 'h' for help | 'p' for position info | 'q' to quit | 1/2/3: alignment"
)

_HELP_TEXT = """Navigation Controls:
↑/↓, j/k      : Scroll up/down one line
PageUp/PageDown: Scroll full page up/down
Home/End       : Go to top/bottom
u/d           : Scroll half page up/down
t/b           : Go to top/bottom
h             : Toggle help in footer
p             : Show position info (snapshot)
1/2/3         : Align top/center/bottom
q             : Quit"""

_ALIGNMENT_KEYS = {
    "1": VerticalAlignment.TOP,
    "2": VerticalAlignment.CENTER,
    "3": VerticalAlignment.BOTTOM,
}

_SEQUENCE_NAMES = {
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_PGUP": "pgup",
    "KEY_PGDOWN": "pgdown",
    "KEY_HOME": "home",
    "KEY_END": "end",
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc",
    "KEY_TAB": "tab",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
}


class DemoApp:
    """Wraps a layout and adds the demo's own key bindings."""

    def __init__(
        self, layout: Layout, show_help: bool = False, show_pos_info: bool = False
    ) -> None:
        self.layout = layout
        self.show_help = show_help
        self.show_pos_info = show_pos_info

    def update_footer(self) -> None:
        """Set the footer text to match the current help/position state."""
        if self.show_pos_info:
            self.layout.footer = _FOOTER_POS
        elif self.show_help:
            self.layout.footer = _FOOTER_HELP
        else:
            self.layout.footer = _FOOTER_DEFAULT

    def update(self, msg: object) -> bool:
        """Handle a message; return True when the program should quit."""
        if isinstance(msg, Key):
            handled = self._handle_key(msg.name)
            if handled is not None:
                return handled
        return self.layout.update(msg)

    def _handle_key(self, name: str) -> bool | None:
        actions = {
            "j": self.layout.line_down,
            "down": self.layout.line_down,
            "k": self.layout.line_up,
            "up": self.layout.line_up,
            "u": self.layout.half_page_up,
            "d": self.layout.half_page_down,
            "page_up": self.layout.page_up,
            "page_down": self.layout.page_down,
            "home": self.layout.scroll_to_top,
            "t": self.layout.scroll_to_top,
            "end": self.layout.scroll_to_bottom,
            "b": self.layout.scroll_to_bottom,
        }
        if name in ("q", "ctrl+c"):
            return True
        if name in actions:
            actions[name]()
            return False
        if name == "h":
            self.show_help = not self.show_help
            if self.show_help:
                self.show_pos_info = False
            self.update_footer()
            return False
        if name == "p":
            self.show_pos_info = not self.show_pos_info
            if self.show_pos_info:
                self.show_help = False
            self.update_footer()
            return False
        if name in _ALIGNMENT_KEYS:
            self.layout.set_vertical_alignment(_ALIGNMENT_KEYS[name])
            return False
        return None

    def view(self) -> str:
        return self.layout.view()


def generate_test_content() -> str:
    """Build a long, styled document for exercising scrolling."""
    parts: list[str] = []
    help_style = Style().fg("#FFFF00").bg("#333333").bold_().padded(1)
    parts.append(help_style.render(_HELP_TEXT))
    parts.append("\n\n")

    section_style = (
        Style()
        .fg("#FFFFFF")
        .bg("#8A2BE2")
        .bold_()
        .sized(50)
        .aligned(Align.CENTER)
        .padded(1, 0)
    )
    marker_style = Style().fg("#FF0000").bold_()
    line_style = Style().fg("#AAAAAA")

    parts.append(section_style.render("TOP OF CONTENT"))
    parts.append("\n\n")

    section_count = 10
    lines_per_section = 30
    for section in range(1, section_count + 1):
        parts.append(section_style.render(f"Section {section} of {section_count}"))
        parts.append("\n\n")
        for line in range(1, lines_per_section + 1):
            if line % 5 == 0:
                parts.append(
                    marker_style.render(
                        f"---- MARKER: Section {section}, Line {line} ----"
                    )
                )
                parts.append("\n")
            text = (
                f"Section {section}, Line {line}: "
                "This is sample content for testing scrolling\n"
            )
            parts.append(line_style.render(text) if line % 2 == 0 else text)
        parts.append("\n")

    parts.append(section_style.render("BOTTOM OF CONTENT"))
    parts.append("\n")
    return "".join(parts)


def build_layout() -> Layout:
    """Create the demo layout with its header, footer styles and content."""
    layout = Layout()
    layout.header = f"TUI Layout Scaffold Demo {VERSION}"
    layout.header_style = (
        Style()
        .bold_()
        .fg("#FFFFFF")
        .bg("#8A2BE2")
        .padded(1, 1)
        .sized(100)
        .aligned(Align.CENTER)
    )
    layout.header_height = 3
    layout.footer_style = (
        Style()
        .bold_()
        .fg("#FFFFFF")
        .bg("#333333")
        .padded(0, 1)
        .sized(100)
        .aligned(Align.CENTER)
    )
    layout.set_content(generate_test_content())
    return layout


def _key_name(keystroke: Keystroke) -> str | None:
    if keystroke.is_sequence:
        return _SEQUENCE_NAMES.get(keystroke.name)
    text = str(keystroke)
    if len(text) != 1:
        return None
    code = ord(text)
    if code == 0x1B:
        return "esc"
    if 0 < code < 0x20:
        return "ctrl+" + chr(code + 0x60)
    return text


def run(app: DemoApp) -> None:
    """Drive the app in the terminal's alternate screen until it quits."""
    term = Terminal()
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        size: WindowSize | None = None
        last_frame: str | None = None
        while True:
            current = WindowSize(term.width, term.height)
            if current != size:
                size = current
                app.update(size)
                last_frame = None
            frame = app.view()
            if frame != last_frame:
                sys.stdout.write(term.home + term.clear + frame)
                sys.stdout.flush()
                last_frame = frame
            try:
                keystroke = term.inkey(timeout=0.1)
            except KeyboardInterrupt:
                return
            if not keystroke:
                continue
            name = _key_name(keystroke)
            if name is not None and app.update(Key(name)):
                return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tuiscaffold",
        description="Header, scrollable viewport and footer layout demo.",
    )
    parser.add_argument("--version", action="version", version=VERSION)
    parser.parse_args(argv)

    app = DemoApp(build_layout())
    app.update_footer()
    try:
        run(app)
    except Exception as exc:  # report any terminal failure like the program does
        print(f"Error running program: {exc}")
        return 1
    return 0