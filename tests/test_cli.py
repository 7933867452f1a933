"""Unit tests for ttycolors.cli."""

from unittest.mock import patch

import pytest

from ttycolors import __version__
from ttycolors.cli import entrypoint, main
from ttycolors.cli.preview import render_preview
from ttycolors.codes import init_off, init_on


class TestMain:
    def test_returns_zero(self, capsys):
        assert main(["--color", "off"]) == 0

    def test_color_on_prints_escape_sequences(self, capsys):
        main(["--color", "on"])

        out = capsys.readouterr().out
        assert "\x1b[31mred\x1b[0m" in out
        assert "\x1b[106mbright_cyan\x1b[0m" in out
        assert "\x1b[1mbold\x1b[0m" in out

    def test_color_off_prints_plain_text(self, capsys):
        main(["--color", "off"])

        out = capsys.readouterr().out
        assert "\x1b" not in out
        assert "bright_magenta" in out

    def test_auto_is_plain_when_captured(self, capsys, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        main([])

        assert "\x1b" not in capsys.readouterr().out

    def test_auto_enables_on_tty(self, capsys, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        with patch("ttycolors.codes.is_tty", return_value=True):
            main(["--color", "auto"])

        assert "\x1b[32mgreen\x1b[0m" in capsys.readouterr().out

    def test_auto_respects_no_color_on_tty(self, capsys, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        with patch("ttycolors.codes.is_tty", return_value=True):
            main(["--color", "auto"])

        assert "\x1b" not in capsys.readouterr().out

    def test_rejects_unknown_color_mode(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--color", "always"])

        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert f"ttycolors {__version__}" in capsys.readouterr().out


class TestEntrypoint:
    def test_entrypoint_raises_system_exit(self):
        with patch("ttycolors.cli.app.main", return_value=0):
            with pytest.raises(SystemExit) as exc_info:
                entrypoint()

        assert exc_info.value.code == 0


class TestRenderPreview:
    def test_has_one_line_per_group(self):
        lines = render_preview(init_off())
        assert [line.split()[0] for line in lines] == ["attr", "fg", "fg", "bg", "bg"]

    def test_plain_preview_lists_names(self):
        lines = render_preview(init_off())
        assert lines[0].split()[1:] == ["reset", "bold", "italic", "underline", "blink", "reverse"]
        assert lines[2].split()[2:] == [
            "bright_black",
            "bright_red",
            "bright_green",
            "bright_yellow",
            "bright_blue",
            "bright_magenta",
            "bright_cyan",
            "bright_white",
        ]

    def test_background_line_uses_background_codes(self):
        lines = render_preview(init_on())
        assert "\x1b[44mblue\x1b[0m" in lines[3]
        assert "\x1b[34m" not in lines[3]
