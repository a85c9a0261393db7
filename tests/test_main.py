"""Tests for the command line entry point (no dialog is opened)."""
import sys

import pytest

pytest.importorskip("PySide6")

from search_param_editor.__main__ import format_parameters, main  # noqa: E402
from search_param_editor.algorithm_parameters import MsgfParameters  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_excepthook(monkeypatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


def test_list_prints_available_tools(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Comet", "MetaMorpheus", "MS-GF+", "OMSSA", "Sage", "X!Tandem"]


def test_unknown_tool_exits_with_error(capsys):
    assert main(["Mascot"]) == 2
    assert "Unknown search engine 'Mascot'" in capsys.readouterr().err


def test_format_parameters():
    text = format_parameters(MsgfParameters(instrument_id=1))
    lines = text.splitlines()
    assert lines[0] == "MsgfParameters"
    assert "  instrument_id = 1" in lines
    assert "  search_decoy_database = False" in lines


def test_dark_stylesheet_uses_palette():
    from search_param_editor.constants import DARK_COLORS
    from search_param_editor.theme import get_dark_stylesheet

    sheet = get_dark_stylesheet()
    assert "QGroupBox" in sheet
    assert DARK_COLORS['bg'] in sheet
    assert DARK_COLORS['accent'] in sheet
