#!/usr/bin/env python3
# File: screen.py
# Purpose: screen/cursor control sequences (alt screen, cursor, clear, move).
# Notes: every helper writes once to the sink and returns characters written.

from __future__ import annotations

from .config import RenderConfig
from .layout import emit
from .style import CSI, apply_style

ALT_SCREEN_ON  = CSI + "?1049h"
ALT_SCREEN_OFF = CSI + "?1049l"
CURSOR_HIDE    = CSI + "?25l"
CURSOR_SHOW    = CSI + "?25h"
CLEAR_SCREEN   = CSI + "2J"
CLEAR_LINE     = CSI + "2K\r"


def move_seq(row: int, col: int) -> str:
    """1-based absolute cursor move; values below 1 clamp to 1."""
    return f"{CSI}{max(row, 1)};{max(col, 1)}H"


def enter_alt_screen(sink=None) -> int:
    return emit(ALT_SCREEN_ON, sink)

def exit_alt_screen(sink=None) -> int:
    return emit(ALT_SCREEN_OFF, sink)

def hide_cursor(sink=None) -> int:
    return emit(CURSOR_HIDE, sink)

def show_cursor(sink=None) -> int:
    return emit(CURSOR_SHOW, sink)

def move_to(row: int, col: int, sink=None) -> int:
    return emit(move_seq(row, col), sink)

def clear_screen(sink=None) -> int:
    return emit(CLEAR_SCREEN, sink)

def clear_line(sink=None) -> int:
    """Clear the current line and return to column 1."""
    return emit(CLEAR_LINE, sink)


def write_at(cfg: RenderConfig, row: int, col: int, style: str, text: str, sink=None) -> int:
    """Move to row/col, then write styled text (no newline)."""
    n = move_to(row, col, sink)
    return n + emit(apply_style(style, text, cfg.no_color), sink)


# ----- Frames -----
def begin_frame(sink=None) -> int:
    """
    Alt screen -> hide cursor -> clear -> home (1,1).
    Stops at the first failing write; the error propagates.
    """
    n = enter_alt_screen(sink)
    n += hide_cursor(sink)
    n += clear_screen(sink)
    n += move_to(1, 1, sink)
    return n

def end_frame(sink=None) -> int:
    n = show_cursor(sink)
    n += exit_alt_screen(sink)
    return n


__all__ = [
    "ALT_SCREEN_ON", "ALT_SCREEN_OFF", "CURSOR_HIDE", "CURSOR_SHOW",
    "CLEAR_SCREEN", "CLEAR_LINE", "move_seq",
    "enter_alt_screen", "exit_alt_screen", "hide_cursor", "show_cursor",
    "move_to", "clear_screen", "clear_line", "write_at",
    "begin_frame", "end_frame",
]
