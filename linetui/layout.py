#!/usr/bin/env python3
# File: layout.py
# Purpose: width-aware text primitives + line compositor (WRITE ONLY).
# Notes: widths are code-point counts (len of a str), never byte lengths.
#        Styled lines carry their visible width separately; the compositor
#        never re-measures by stripping.

from __future__ import annotations

import io
import logging
import sys

from .config import RenderConfig
from .style import apply_style

logger = logging.getLogger(__name__)

# --- Width primitives ---
def clip(width: int, s: str) -> str:
    """First `width` code points of s (no ellipsis); "" for width <= 0."""
    if width <= 0:
        return ""
    s = s or ""
    if len(s) <= width:
        return s
    return s[:width]

def pad_left(width: int, s: str) -> str:
    s = clip(width, s)
    return " " * max(width - len(s), 0) + s

def pad_right(width: int, s: str) -> str:
    s = clip(width, s)
    return s + " " * max(width - len(s), 0)

def center(width: int, s: str) -> str:
    """Clip, then split the padding floor(pad/2) left, remainder right."""
    s = clip(width, s)
    pad = max(width - len(s), 0)
    left = pad // 2
    return " " * left + s + " " * (pad - left)


# --- Sink ---
def _is_binary(sink) -> bool:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    mode = getattr(sink, "mode", "")
    return isinstance(mode, str) and "b" in mode

def emit(text: str, sink=None) -> int:
    """
    Single write of `text` to sink (default: current sys.stdout).
    Returns characters written. Sink errors propagate unchanged.
    """
    out = sys.stdout if sink is None else sink
    try:
        if _is_binary(out):
            out.write(text.encode("utf-8"))
        else:
            out.write(text)
    except (OSError, ValueError) as e:
        logger.debug("sink write failed: %s", e)
        raise
    return len(text)


# --- Line compositor ---
def write_composite(cfg: RenderConfig, line: str, visible_width: int, sink=None) -> int:
    """
    Center `line` inside layout.max_width (when centering applies) and write it
    with one trailing newline. `line` may hold style tokens from several roles;
    `visible_width` must be its stripped code-point count. A wrong value is not
    detected and only skews the padding.
    """
    if cfg.centering:
        pad = max(cfg.layout.max_width - visible_width, 0)
        left = pad // 2
        line = " " * left + line + " " * (pad - left)
    return emit(line + "\n", sink)

def write_component(cfg: RenderConfig, style: str, plain: str, width: int, sink=None) -> int:
    """Single-role line: clip (width > 0), style, then composite."""
    if width > 0:
        plain = clip(width, plain)
    styled = apply_style(style, plain, cfg.no_color)
    return write_composite(cfg, styled, len(plain), sink)


__all__ = [
    # width primitives
    "clip", "pad_left", "pad_right", "center",
    # sink
    "emit",
    # compositor
    "write_composite", "write_component",
]
