from __future__ import annotations

import pytest
from rich.console import Console

from tagver.utils.console import (
    TAGVER_THEME,
    make_console,
    print_error,
    print_table,
    print_warning,
)


@pytest.fixture(autouse=True)
def isolated(clean_env: None) -> None:
    pass


@pytest.mark.unit
class TestMakeConsole:
    """Tests for make_console."""

    def test_returns_console(self) -> None:
        assert isinstance(make_console(), Console)

    def test_theme_styles(self) -> None:
        for name in ("success", "error", "warning", "info"):
            assert name in TAGVER_THEME.styles

    def test_color_false_disables_color(self) -> None:
        assert make_console(color=False).no_color is True

    def test_no_color_env_disables_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        assert make_console(color=True).no_color is True

    def test_stderr_console(self) -> None:
        assert make_console(stderr=True).stderr is True


@pytest.mark.unit
class TestStatusMessages:
    """Tests for print_error and print_warning."""

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture) -> None:
        print_error("something failed", color=False)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "[ERROR] something failed\n"

    def test_warning_goes_to_stderr(self, capsys: pytest.CaptureFixture) -> None:
        print_warning("careful", color=False)

        assert capsys.readouterr().err == "[WARNING] careful\n"

    def test_custom_prefix(self, capsys: pytest.CaptureFixture) -> None:
        print_error("oops", prefix="Error:", color=False)

        assert capsys.readouterr().err == "Error: oops\n"

    def test_markup_is_printed_literally(self, capsys: pytest.CaptureFixture) -> None:
        print_error("pattern [a-z]+ rejected", color=False)

        assert "[a-z]+" in capsys.readouterr().err

    def test_long_message_is_not_wrapped(self, capsys: pytest.CaptureFixture) -> None:
        message = "x" * 150

        print_error(message, color=False)

        assert message in capsys.readouterr().err


@pytest.mark.unit
class TestPrintTable:
    """Tests for print_table."""

    def test_prints_rows_to_stdout(self, capsys: pytest.CaptureFixture) -> None:
        print_table(
            [{"Type": "release", "Pattern": "^v?[0-9]+$"}],
            title="Rules",
            color=False,
        )

        captured = capsys.readouterr()
        assert "Rules" in captured.out
        assert "release" in captured.out
        assert "^v?[0-9]+$" in captured.out
        assert captured.err == ""

    def test_markup_like_cells_are_escaped(self, capsys: pytest.CaptureFixture) -> None:
        print_table([{"Pattern": "_[a-zA-Z]+"}], color=False)

        assert "[a-zA-Z]" in capsys.readouterr().out

    def test_custom_headers_order(self, capsys: pytest.CaptureFixture) -> None:
        print_table([{"a": "1", "b": "2"}], headers=["b", "a"], color=False)

        out = capsys.readouterr().out
        assert out.index("b") < out.index("a")

    def test_empty_data_prints_nothing(self, capsys: pytest.CaptureFixture) -> None:
        print_table([], color=False)

        assert capsys.readouterr().out == ""
