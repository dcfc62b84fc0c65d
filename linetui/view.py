#!/usr/bin/env python3
# File: view.py
# Responsibilities:
#   - Render request values (menu, title, selector, input, divider)
#   - TUI: stateless renderer over one RenderConfig snapshot + sink
# Notes:
#   - Pure rendering: looks up role styles from cfg.colors; does not compute colors.
#   - Every component writes complete lines (one trailing newline each).

from __future__ import annotations

from dataclasses import dataclass, field

from .config import RenderConfig, effective_width
from .layout import clip, pad_right, write_component, write_composite
from .screen import clear_screen, move_to
from .style import apply_style

SELECTOR_OPEN  = ": < "
SELECTOR_CLOSE = " >"
INPUT_SEP      = ": "
DEFAULT_FILL   = "-"


# ----- Render requests -----
@dataclass(frozen=True)
class MenuEntry:
    label: str
    selected: bool = False

@dataclass(frozen=True)
class MenuParams:
    items: tuple[MenuEntry, ...] = field(default_factory=tuple)
    width: int = 0  # 0 = layout.max_width

@dataclass(frozen=True)
class TitleParams:
    text: str
    width: int = 0

@dataclass(frozen=True)
class SelectorParams:
    label: str
    items: tuple[str, ...] = field(default_factory=tuple)
    current: int = 0  # 0-based; out of range renders an empty value
    width: int = 0

@dataclass(frozen=True)
class InputParams:
    label: str
    value: str = ""
    active: bool = False  # appends layout.input_cursor
    width: int = 0

@dataclass(frozen=True)
class DividerParams:
    fill: str = ""  # "" = "-"
    width: int = 0  # 0 = max_width, then layout.divider_width


# ----- Renderer -----
class TUI:
    """Stateless component renderer. Holds the config snapshot and sink, nothing else."""

    def __init__(self, cfg: RenderConfig | None = None, sink=None) -> None:
        self.cfg = (cfg or RenderConfig()).normalized()
        self.sink = sink

    def _style(self, style: str, text: str) -> str:
        return apply_style(style, text, self.cfg.no_color)

    def menu(self, p: MenuParams) -> int:
        """
        One line per entry. Every row is right-padded to the widest row so a
        centered block keeps its prefix column aligned.
        """
        cfg = self.cfg
        lay = cfg.layout
        width = effective_width(p.width, cfg)

        rows = []
        block_width = 0
        for i, entry in enumerate(p.items, start=1):
            if entry.selected:
                style, prefix = cfg.colors.title, lay.menu_selected_prefix
            else:
                style, prefix = cfg.colors.menu, lay.menu_unselected_prefix
            plain = f"{prefix} {i:>{lay.menu_index_width}}) {entry.label}"
            rows.append((style, plain))
            block_width = max(block_width, len(plain))

        n = 0
        for style, plain in rows:
            n += write_component(cfg, style, pad_right(block_width, plain), width, self.sink)
        return n

    def title(self, p: TitleParams) -> int:
        width = effective_width(p.width, self.cfg)
        return write_component(self.cfg, self.cfg.colors.title, p.text, width, self.sink)

    def selector(self, p: SelectorParams) -> int:
        """'label: < current >' with label in prompt role, current in data role."""
        cfg = self.cfg
        current = p.items[p.current] if 0 <= p.current < len(p.items) else ""
        label = p.label

        width = effective_width(p.width, cfg)
        if width > 0:
            deco = len(SELECTOR_OPEN) + len(SELECTOR_CLOSE)
            label = clip(max(width - len(current) - deco, 0), label)
            remaining = max(width - len(label) - len(SELECTOR_OPEN), 0)
            current = clip(remaining - len(SELECTOR_CLOSE), current)

        visible = len(label) + len(SELECTOR_OPEN) + len(current) + len(SELECTOR_CLOSE)
        line = (
            self._style(cfg.colors.prompt, label)
            + SELECTOR_OPEN
            + self._style(cfg.colors.data, current)
            + SELECTOR_CLOSE
        )
        return write_composite(cfg, line, visible, self.sink)

    def input(self, p: InputParams) -> int:
        """'label: value' plus the cursor glyph when active."""
        cfg = self.cfg
        cursor = cfg.layout.input_cursor if p.active else ""
        value = p.value

        width = effective_width(p.width, cfg)
        if width > 0:
            value = clip(max(width - len(p.label) - len(INPUT_SEP) - len(cursor), 0), value)

        visible = len(p.label) + len(INPUT_SEP) + len(value) + len(cursor)
        line = (
            self._style(cfg.colors.prompt, p.label)
            + INPUT_SEP
            + self._style(cfg.colors.data, value)
            + self._style(cfg.colors.prompt, cursor)
        )
        return write_composite(cfg, line, visible, self.sink)

    def divider(self, p: DividerParams | None = None) -> int:
        cfg = self.cfg
        p = p or DividerParams()
        fill = p.fill[:1] or DEFAULT_FILL

        width = p.width
        if width <= 0:
            width = effective_width(0, cfg)
        if width <= 0:
            width = cfg.layout.divider_width

        return write_component(cfg, cfg.colors.divider, fill * width, 0, self.sink)

    def refresh(self) -> int:
        """Clear the screen and home the cursor."""
        return clear_screen(self.sink) + move_to(1, 1, self.sink)


__all__ = [
    "MenuEntry", "MenuParams", "TitleParams", "SelectorParams", "InputParams", "DividerParams",
    "TUI",
]
