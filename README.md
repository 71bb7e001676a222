# tuiscaffold

A small scaffold for full-screen terminal applications. A `Layout` stacks
three parts from top to bottom:

- a styled **header**,
- a scrollable **viewport** holding the main content,
- a styled **footer**.

The viewport fills the rows between the header and the footer. It resizes
with the terminal. Content shorter than the viewport can be aligned to the
top, the centre or the bottom.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The demo

```
tuiscaffold
```

This opens a full-screen demo in the terminal's alternate screen. It shows a
long page of sectioned, coloured content. `tuiscaffold --version` prints the
version and exits. If the terminal cannot be driven, the command prints
`Error running program: ...` and exits with status 1.

| Key                              | Action                               |
|----------------------------------|--------------------------------------|
| `↑`/`↓`, `k`/`j`                 | scroll one line                      |
| `u` / `d`                        | scroll half a page up / down         |
| `PageUp` / `PageDown`, `f`, space | scroll a full page                  |
| `Home`/`t`, `End`/`b`            | jump to the top / bottom             |
| `h`                              | toggle help text in the footer       |
| `p`                              | toggle the position-info footer      |
| `1` / `2` / `3`                  | align content top / centre / bottom  |
| `q`, `Ctrl+C`                    | quit                                 |

The `p` footer is a fixed message. It does not report the live scroll
position. The alignment keys only change what you see when the content is
shorter than the viewport. The demo page is longer than most terminals, so on
such a terminal these keys have no visible effect.

## Using the layout

```python
from tuiscaffold.layout import Key, Layout, VerticalAlignment, WindowSize
from tuiscaffold.style import Align, Style

layout = Layout()
layout.header = "My application"
layout.header_style = Style().bold_(True).fg("#FFFFFF").bg("#8A2BE2").aligned(Align.CENTER)
layout.footer = "q to quit"
layout.set_content("line one\nline two\nline three")
layout.set_vertical_alignment(VerticalAlignment.CENTER)

# Tell the layout how large the terminal is, then render it.
layout.update(WindowSize(width=80, height=24))
print(layout.view())

# Key presses: update() returns True when the program should quit.
should_quit = layout.update(Key("q"))
```

Until a `WindowSize` arrives, `view()` returns `"Initializing..."`. Content
set before then is kept and shown once the viewport exists. On every resize
the header and footer styles take the window's width. The viewport's height
is the window height minus `header_height` and `footer_height`.

`update` takes messages:

- A `WindowSize` resizes the layout.
- A `Key` is a key name such as `"q"`, `"ctrl+c"`, `"down"` or `"pgdown"`. The
  keys `q` and `ctrl+c` make `update` return `True`. Any other key goes to the
  viewport, which scrolls for `up`/`down`/`j`/`k`,
  `pgup`/`pgdown`/`b`/`f`/space, and `u`/`d`/`ctrl+u`/`ctrl+d`.

These methods scroll the viewport:

- `line_down`, `line_up`
- `half_page_down`, `half_page_up`
- `page_down`, `page_up`
- `scroll_to_top`, `scroll_to_bottom`

These properties and methods read its state:

- properties: `viewport_height`, `viewport_width`, `viewport_y_position`
  (settable), `vertical_alignment`
- methods: `viewport_at_top()`, `viewport_at_bottom()`

### The viewport

`Viewport` in `tuiscaffold.viewport` is the scrollable window on its own. It
has the following members:

- `width`, `height` and `y_offset`
- `set_content`
- `line_down(n)`, `line_up(n)`
- `goto_top`, `goto_bottom`
- `at_top`, `at_bottom` and `max_y_offset`
- `handle_key(key)`, which returns whether the key scrolled
- `visible_lines`
- `view()`, which renders exactly `height` rows, each cut or padded to
  `width` cells

### Styles

`Style` in `tuiscaffold.style` is an immutable description of how a block of
text is drawn. Each method returns a new style:

- `bold_`
- `fg` and `bg`, which take `#RGB`, `#RRGGBB` or a 0–255 palette index
- `padded`, which takes one to four values in CSS order
- `sized` for a fixed width, with text wrapped to fit
- `aligned` with `Align.LEFT`, `Align.CENTER` or `Align.RIGHT`

`render(text)` produces the styled string. `join_vertical(align, *blocks)`
stacks rendered blocks. `visible_width(text)` measures the widest line in
terminal cells, ignoring escape sequences.

## What it does not do

There is no mouse support. The layout handles only resize and key messages.
Keys that the demo does not bind are ignored.