#!/usr/bin/env python3
# File: style.py
# Purpose: ANSI style tokens (build, apply, strip). No config, no I/O.
# SRP Slices:
#   [PALETTE] 256-color indices + names
#   [TOKENS]  SGR builders and attribute constants
#   [CODEC]   apply_style / strip_style / visible_width

from __future__ import annotations

import re

# ════════════════════════════════════════════════════════════════════════════
# [PALETTE] 256-color indices
# ════════════════════════════════════════════════════════════════════════════
#   0..7     base colors
#   8..15    bright versions of 0..7
#   16..231  color cube: 16 + 36*r + 6*g + b, r/g/b in 0..5
#   232..255 grayscale ramp

BLACK   = 0
RED     = 1
GREEN   = 2
YELLOW  = 3
BLUE    = 4
MAGENTA = 5
CYAN    = 6
WHITE   = 7

BRIGHT_BLACK   = 8
BRIGHT_RED     = 9
BRIGHT_GREEN   = 10
BRIGHT_YELLOW  = 11
BRIGHT_BLUE    = 12
BRIGHT_MAGENTA = 13
BRIGHT_CYAN    = 14
BRIGHT_WHITE   = 15

COLOR_BY_NAME = {
    "black":   BLACK,
    "red":     RED,
    "green":   GREEN,
    "yellow":  YELLOW,
    "blue":    BLUE,
    "magenta": MAGENTA,
    "cyan":    CYAN,
    "white":   WHITE,
    "gray":    BRIGHT_BLACK,
    "grey":    BRIGHT_BLACK,
    "bright_black":   BRIGHT_BLACK,
    "bright_red":     BRIGHT_RED,
    "bright_green":   BRIGHT_GREEN,
    "bright_yellow":  BRIGHT_YELLOW,
    "bright_blue":    BRIGHT_BLUE,
    "bright_magenta": BRIGHT_MAGENTA,
    "bright_cyan":    BRIGHT_CYAN,
    "bright_white":   BRIGHT_WHITE,
}

# ════════════════════════════════════════════════════════════════════════════
# [TOKENS] SGR builders
# ════════════════════════════════════════════════════════════════════════════

ESC = "\x1b"
CSI = ESC + "["


def sgr(n: int) -> str:
    """Select Graphic Rendition for one numeric code: sgr(1) -> bold."""
    return f"{CSI}{n}m"


def _check_index(n: int) -> int:
    if not 0 <= n <= 255:
        raise ValueError(f"color index out of range 0..255: {n}")
    return n


def color256(n: int) -> str:
    """Foreground 256-color token, ESC[38;5;Nm."""
    return f"{CSI}38;5;{_check_index(n)}m"


def bg_color256(n: int) -> str:
    """Background 256-color token, ESC[48;5;Nm."""
    return f"{CSI}48;5;{_check_index(n)}m"


RESET = sgr(0)

BOLD      = sgr(1)
DIM       = sgr(2)
ITALIC    = sgr(3)  # not always supported
UNDERLINE = sgr(4)
BLINK     = sgr(5)
REVERSE   = sgr(7)
HIDDEN    = sgr(8)
STRIKE    = sgr(9)

# ════════════════════════════════════════════════════════════════════════════
# [CODEC] apply / strip / measure
# ════════════════════════════════════════════════════════════════════════════

# One recognized SGR parameter. Anything else (truecolor, out-of-range
# indices, cursor/erase sequences, truncated tokens) is left in the text.
# Zero-padded indices ("38;5;07") name the same color and are stripped.
_INDEX = r"0*(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9]?[0-9])"
_PARAM = (
    r"(?:"
    r"[34]8;5;" + _INDEX +          # 256-color fg/bg
    r"|10[0-7]"                     # bright bg
    r"|9[0-7]"                      # bright fg
    r"|[34][0-79]"                  # base fg/bg + default fg/bg
    r"|2[1-9]"                      # attribute off
    r"|0?[0-9]"                     # reset + attributes
    r")"
)
_SGR_PATTERN = re.compile(r"\x1b\[(?:" + _PARAM + r"(?:;" + _PARAM + r")*)?m")


def apply_style(style: str, text: str, disabled: bool = False) -> str:
    """
    Wrap text as style + text + RESET.
    No-op when color is disabled or either style or text is empty.
    """
    if disabled or not style or not text:
        return text
    return f"{style}{text}{RESET}"


def strip_style(text: str) -> str:
    """
    Remove recognized SGR tokens, leaving printable content.
    Removal can splice a new token together ("\\x1b" + "[0m"), so repeat
    until nothing changes; that keeps strip_style idempotent.
    """
    out = text or ""
    while True:
        stripped = _SGR_PATTERN.sub("", out)
        if stripped == out:
            return stripped
        out = stripped


def visible_width(text: str) -> int:
    """Code points left after stripping style tokens."""
    return len(strip_style(text))


def center_tag(tag: str, width: int) -> str:
    """Center an already-styled tag inside width columns using its visible width."""
    n = visible_width(tag)
    if n >= width:
        return tag
    pad = width - n
    left = pad // 2
    return " " * left + tag + " " * (pad - left)


__all__ = [
    # palette
    "BLACK", "RED", "GREEN", "YELLOW", "BLUE", "MAGENTA", "CYAN", "WHITE",
    "BRIGHT_BLACK", "BRIGHT_RED", "BRIGHT_GREEN", "BRIGHT_YELLOW",
    "BRIGHT_BLUE", "BRIGHT_MAGENTA", "BRIGHT_CYAN", "BRIGHT_WHITE",
    "COLOR_BY_NAME",
    # tokens
    "sgr", "color256", "bg_color256",
    "RESET", "BOLD", "DIM", "ITALIC", "UNDERLINE", "BLINK", "REVERSE", "HIDDEN", "STRIKE",
    # codec
    "apply_style", "strip_style", "visible_width", "center_tag",
]
