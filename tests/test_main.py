# tests/test_main.py
import pytest

from linetui.__main__ import main
from linetui.style import strip_style


def _clear_env(monkeypatch):
    for name in ("NO_COLOR", "LINETUI_NO_COLOR", "LINETUI_MAX_WIDTH", "LINETUI_CENTERED", "LINETUI_THEME"):
        monkeypatch.delenv(name, raising=False)


def test_demo_renders_both_scenes(capsys, monkeypatch):
    _clear_env(monkeypatch)
    assert main(["--width", "40"]) == 0
    out = capsys.readouterr().out
    plain = strip_style(out)
    assert "Main Menu" in plain
    assert "Settings" in plain
    assert "mode: < verbose >" in plain
    assert "\x1b[38;5;" in out
    first = plain.split("\n")[0]
    assert first == "-" * 40


def test_demo_no_color(capsys, monkeypatch):
    _clear_env(monkeypatch)
    main(["--no-color", "--left"])
    out = capsys.readouterr().out
    assert "\x1b[" not in out
    lines = out.split("\n")
    assert lines[1] == "Main Menu"
    assert "[q] quit" in out


@pytest.mark.parametrize("width", ["0", "-5", "wide"])
def test_demo_rejects_non_positive_width(width, capsys, monkeypatch):
    _clear_env(monkeypatch)
    with pytest.raises(SystemExit) as exc:
        main(["--width", width])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert "--width" in captured.err
    assert "Main Menu" not in captured.out
