#!/usr/bin/env python3
# File: __main__.py
# Description: demo scenes (python3 -m linetui)

from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from .config import config_from_env
from .theme import available_themes, no_colors, resolve_colors
from .view import (
    TUI, DividerParams, InputParams, MenuEntry, MenuParams, SelectorParams, TitleParams,
)
from .widgets import key_hint


def draw_main_scene(tui: TUI) -> None:
    tui.divider()
    tui.title(TitleParams("Main Menu"))
    tui.divider()
    tui.menu(MenuParams(items=(
        MenuEntry("Status", selected=True),
        MenuEntry("Settings"),
        MenuEntry("Logs"),
        MenuEntry("Quit"),
    )))
    tui.divider()
    tui.selector(SelectorParams("mode", ("debug", "verbose", "silent"), current=1))
    tui.input(InputParams("filter", "error"))
    tui.input(InputParams("output", "stdout", active=True))
    tui.divider()

def draw_settings_scene(tui: TUI) -> None:
    tui.divider(DividerParams(fill="="))
    tui.title(TitleParams("Settings"))
    tui.divider()
    tui.menu(MenuParams(items=(
        MenuEntry("Network"),
        MenuEntry("Storage", selected=True),
        MenuEntry("Security"),
    )))
    tui.divider()
    tui.selector(SelectorParams("theme", ("dark", "light", "system"), current=0))
    tui.input(InputParams("alias", "dev-box", active=True))
    tui.divider(DividerParams(fill="="))


def _positive_int(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="linetui", description="Render the linetui sample scenes.")
    ap.add_argument("--theme", choices=available_themes(), help="color preset (default: LINETUI_THEME or 'default')")
    ap.add_argument("--no-color", action="store_true", help="emit plain text")
    ap.add_argument("--width", type=_positive_int, default=None, help="max width for clipping/centering (> 0)")
    ap.add_argument("--left", action="store_true", help="disable centering for the first scene")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = config_from_env()

    layout = cfg.layout
    if args.width is not None:
        layout = replace(layout, max_width=args.width)
    if not args.left and layout.max_width == 0:
        layout = replace(layout, max_width=48)
    layout = replace(layout, centered=not args.left)

    colors = resolve_colors(args.theme) if args.theme else cfg.colors
    if args.no_color:
        colors = no_colors()
    cfg = replace(cfg, no_color=cfg.no_color or args.no_color, colors=colors, layout=layout)

    draw_main_scene(TUI(cfg))
    sys.stdout.write("\n")
    # second scene always left-aligned
    left = replace(cfg, layout=replace(layout, centered=False, max_width=0))
    draw_settings_scene(TUI(left))
    key_hint(cfg, "q", "quit")
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
