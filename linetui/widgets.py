#!/usr/bin/env python3
# File: widgets.py
# Purpose: small inline widgets (menu item, key hint, field, input line, status).
# Notes: inline = no trailing newline, no clipping, no centering.
#        Values are display strings already; callers convert before calling.

from __future__ import annotations

from .config import RenderConfig
from .layout import emit
from .style import apply_style


# ----- Helpers -----
def styled(cfg: RenderConfig, style: str, text: str, sink=None) -> int:
    """Write text wrapped in style (plain when cfg.no_color)."""
    return emit(apply_style(style, text, cfg.no_color), sink)


# ----- Menu / hints -----
def menu_item(cfg: RenderConfig, index: int, label: str, selected: bool, sink=None) -> int:
    lay = cfg.normalized().layout
    if selected:
        style, prefix = cfg.colors.title, lay.menu_selected_prefix
    else:
        style, prefix = cfg.colors.menu, lay.menu_unselected_prefix
    return styled(cfg, style, f"{prefix} {index:>{lay.menu_index_width}}) {label}", sink)

def key_hint(cfg: RenderConfig, key: str, desc: str, sink=None) -> int:
    """'[key] desc' with key in prompt role, desc in data role."""
    k = apply_style(cfg.colors.prompt, key, cfg.no_color)
    d = apply_style(cfg.colors.data, desc, cfg.no_color)
    return emit(f"[{k}] {d}", sink)

def field(cfg: RenderConfig, label: str, value: str, sink=None) -> int:
    k = apply_style(cfg.colors.prompt, label, cfg.no_color)
    v = apply_style(cfg.colors.data, value, cfg.no_color)
    return emit(f"{k}: {v}", sink)

def input_line(cfg: RenderConfig, prefix: str, value: str, active: bool, sink=None) -> int:
    """Prompt prefix + value, cursor glyph appended when active."""
    parts = [
        apply_style(cfg.colors.prompt, prefix, cfg.no_color),
        apply_style(cfg.colors.data, value, cfg.no_color),
    ]
    if active:
        cursor = cfg.normalized().layout.input_cursor
        parts.append(apply_style(cfg.colors.prompt, cursor, cfg.no_color))
    return emit("".join(parts), sink)


# ----- Status lines -----
def status(cfg: RenderConfig, level: str, msg: str, sink=None) -> int:
    return styled(cfg, cfg.colors.level(level), msg, sink)

def status_info(cfg: RenderConfig, msg: str, sink=None) -> int:
    return status(cfg, "info", msg, sink)

def status_warn(cfg: RenderConfig, msg: str, sink=None) -> int:
    return status(cfg, "warn", msg, sink)

def status_error(cfg: RenderConfig, msg: str, sink=None) -> int:
    return status(cfg, "error", msg, sink)


__all__ = [
    # helpers
    "styled",
    # menu / hints
    "menu_item", "key_hint", "field", "input_line",
    # status
    "status", "status_info", "status_warn", "status_error",
]
