import pytest

from tuiscaffold.app import DemoApp, build_layout, generate_test_content, main
from tuiscaffold.layout import Key, Layout, VerticalAlignment, WindowSize

FOOTER_DEFAULT = (
    "Press 'h' for help | 'p' for position info | 'q' to quit | 1/2/3: alignment"
)
FOOTER_POS = "Press 'p' to hide position info | 'q' to quit"
FOOTER_HELP = (
    "h: toggle help | p: show pos | q: quit | ↑/↓, j/k: line | "
    "u/d: half page | 1/2/3: align top/center/bottom"
)


@pytest.fixture
def app():
    demo = DemoApp(build_layout())
    demo.update_footer()
    return demo


@pytest.fixture
def sized_app(app):
    app.update(WindowSize(120, 30))
    return app


def test_initial_footer_is_default(app):
    assert app.layout.footer == FOOTER_DEFAULT
    assert app.show_help is False
    assert app.show_pos_info is False


def test_help_toggle(app):
    assert app.update(Key("h")) is False
    assert app.show_help is True
    assert app.layout.footer == FOOTER_HELP
    app.update(Key("h"))
    assert app.show_help is False
    assert app.layout.footer == FOOTER_DEFAULT


def test_position_toggle(app):
    app.update(Key("p"))
    assert app.show_pos_info is True
    assert app.layout.footer == FOOTER_POS
    app.update(Key("p"))
    assert app.show_pos_info is False
    assert app.layout.footer == FOOTER_DEFAULT


def test_position_turns_off_help(app):
    app.update(Key("h"))
    app.update(Key("p"))
    assert app.show_help is False
    assert app.show_pos_info is True
    assert app.layout.footer == FOOTER_POS


def test_help_turns_off_position(app):
    app.update(Key("p"))
    app.update(Key("h"))
    assert app.show_pos_info is False
    assert app.show_help is True
    assert app.layout.footer == FOOTER_HELP


@pytest.mark.parametrize("name", ["q", "ctrl+c"])
def test_quit_keys(app, name):
    assert app.update(Key(name)) is True


def test_build_layout_header():
    layout = build_layout()
    assert layout.header == "TUI Layout Scaffold Demo v1.0.0"
    assert layout.header_height == 3


def test_view_before_resize(app):
    assert app.view() == "Initializing..."


def test_resize_sets_viewport(sized_app):
    layout = sized_app.layout
    assert layout.viewport_width == 120
    assert layout.viewport_height == 30 - layout.header_height - layout.footer_height


def test_view_contains_header_and_footer(sized_app):
    frame = sized_app.view()
    assert "TUI Layout Scaffold Demo v1.0.0" in frame
    assert FOOTER_DEFAULT in frame
    assert frame == sized_app.layout.view()


def test_line_down_and_up(sized_app):
    viewport = sized_app.layout.viewport
    assert sized_app.layout.viewport_at_top()
    sized_app.update(Key("j"))
    assert viewport.y_offset == 1
    sized_app.update(Key("down"))
    assert viewport.y_offset == 2
    sized_app.update(Key("k"))
    sized_app.update(Key("up"))
    assert viewport.y_offset == 0


def test_half_page_keys(sized_app):
    viewport = sized_app.layout.viewport
    sized_app.update(Key("d"))
    assert viewport.y_offset == viewport.height // 2
    sized_app.update(Key("u"))
    assert viewport.y_offset == 0


def test_page_keys_pass_through_to_viewport(sized_app):
    viewport = sized_app.layout.viewport
    assert sized_app.update(Key("pgdown")) is False
    assert viewport.y_offset == viewport.height
    sized_app.update(Key("pgup"))
    assert viewport.y_offset == 0


def test_bottom_and_top_keys(sized_app):
    layout = sized_app.layout
    sized_app.update(Key("b"))
    assert layout.viewport_at_bottom()
    sized_app.update(Key("t"))
    assert layout.viewport_at_top()
    sized_app.update(Key("end"))
    assert layout.viewport_at_bottom()
    sized_app.update(Key("home"))
    assert layout.viewport_at_top()


def test_alignment_keys():
    layout = Layout()
    layout.set_content("a\nb")
    demo = DemoApp(layout)
    demo.update(WindowSize(40, 12))
    demo.update(Key("3"))
    assert layout.vertical_alignment is VerticalAlignment.BOTTOM
    assert layout.viewport.visible_lines()[-1] == "b"
    demo.update(Key("2"))
    assert layout.vertical_alignment is VerticalAlignment.CENTER
    lines = layout.viewport.visible_lines()
    assert lines[0] == ""
    assert lines[-1] == "b"
    demo.update(Key("1"))
    assert layout.vertical_alignment is VerticalAlignment.TOP
    assert layout.viewport.visible_lines()[0] == "a"


def test_content_has_all_markers():
    content = generate_test_content()
    for section in range(1, 11):
        assert f"Section {section} of 10" in content
        for line in range(5, 31, 5):
            assert f"---- MARKER: Section {section}, Line {line} ----" in content
        for line in range(1, 31):
            assert (
                f"Section {section}, Line {line}: "
                "This is sample content for testing scrolling"
            ) in content


def test_content_order():
    content = generate_test_content()
    assert content.index("Navigation Controls:") < content.index("TOP OF CONTENT")
    assert content.index("TOP OF CONTENT") < content.index("Section 1 of 10")
    assert content.index("Section 10 of 10") < content.index("BOTTOM OF CONTENT")
    assert content.endswith("\n")


def test_main_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "v1.0.0" in capsys.readouterr().out