"""Tests for the Rich console factory."""

from rich.text import Text

from dagstore.output.console import DAG_THEME, create_console, get_output


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_width_override(self) -> None:
        assert create_console(width=40).width == 40
        assert create_console().width == 120

    def test_theme_styles_apply_without_markup_leaks(self) -> None:
        console = create_console(no_color=True)
        console.print(Text("[dag.ok]not markup[/]", style="dag.ok"))
        assert get_output(console).strip() == "[dag.ok]not markup[/]"

    def test_theme_defines_dag_styles(self) -> None:
        for name in ("dag.ok", "dag.error", "dag.warning", "dag.node", "dag.arrow"):
            assert name in DAG_THEME.styles
