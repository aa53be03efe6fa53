"""Tests for Rich Console factory and theme."""

from io import StringIO

from utilkit.output.console import (
    UTILKIT_THEME,
    create_console,
    get_output,
    style_for_kind,
)


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        console = create_console(width=80)
        assert console.width == 80

    def test_default_width(self) -> None:
        console = create_console()
        assert console.width == 120

    def test_highlight_disabled(self) -> None:
        console = create_console()
        console.print("value=42")
        assert "\x1b" not in get_output(console)


class TestGetOutput:
    def test_extracts_printed_text(self) -> None:
        console = create_console(no_color=True)
        console.print("hello world")
        assert "hello world" in get_output(console)

    def test_empty_console(self) -> None:
        console = create_console()
        assert get_output(console) == ""


class TestStyleForKind:
    def test_known_kinds(self) -> None:
        assert style_for_kind("function") == "uk.kind.function"
        assert style_for_kind("async function") == "uk.kind.async"
        assert style_for_kind("class") == "uk.kind.class"
        assert style_for_kind("constant") == "uk.kind.constant"

    def test_unknown_kind(self) -> None:
        assert style_for_kind("module") == ""

    def test_styles_exist_in_theme(self) -> None:
        for kind in ("function", "async function", "class", "constant"):
            assert style_for_kind(kind) in UTILKIT_THEME.styles
