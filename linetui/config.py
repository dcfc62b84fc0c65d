#!/usr/bin/env python3
# File: config.py
# Purpose: immutable render snapshot (color flag, roles, layout) + width resolution
# Notes: renderers receive a RenderConfig value; nothing here is global or mutable.

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Mapping

from .theme import ENV_PREFIX, ColorRoles, no_colors, resolve_colors

logger = logging.getLogger(__name__)

DEFAULT_SELECTED_PREFIX   = ">"
DEFAULT_UNSELECTED_PREFIX = " "
DEFAULT_INDEX_WIDTH       = 2
DEFAULT_INPUT_CURSOR      = "_"
DEFAULT_DIVIDER_WIDTH     = 40


@dataclass(frozen=True)
class LayoutConfig:
    """
    Layout knobs. Empty strings / non-positive ints mean "unset" and are filled
    by normalize_layout(). max_width=0 means unconstrained (no clipping, no centering).
    """
    menu_selected_prefix: str = ""
    menu_unselected_prefix: str = ""
    menu_index_width: int = 0
    input_cursor: str = ""
    divider_width: int = 0
    max_width: int = 0
    centered: bool = False


def normalize_layout(layout: LayoutConfig) -> LayoutConfig:
    return replace(
        layout,
        menu_selected_prefix=layout.menu_selected_prefix or DEFAULT_SELECTED_PREFIX,
        menu_unselected_prefix=layout.menu_unselected_prefix or DEFAULT_UNSELECTED_PREFIX,
        menu_index_width=layout.menu_index_width if layout.menu_index_width > 0 else DEFAULT_INDEX_WIDTH,
        input_cursor=layout.input_cursor or DEFAULT_INPUT_CURSOR,
        divider_width=layout.divider_width if layout.divider_width > 0 else DEFAULT_DIVIDER_WIDTH,
        max_width=max(layout.max_width, 0),
    )


@dataclass(frozen=True)
class RenderConfig:
    no_color: bool = False
    colors: ColorRoles = field(default_factory=no_colors)
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    def normalized(self) -> "RenderConfig":
        return replace(self, layout=normalize_layout(self.layout))

    @property
    def centering(self) -> bool:
        """Centering only applies when a max width is set."""
        return self.layout.centered and self.layout.max_width > 0


def effective_width(param_width: int, cfg: RenderConfig) -> int:
    """Priority: per-call width -> layout.max_width -> 0 (unconstrained)."""
    if param_width > 0:
        return param_width
    if cfg.layout.max_width > 0:
        return cfg.layout.max_width
    return 0


# ----- Env-driven snapshot -----
def _int_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: expected an integer", name, raw)
        return default

def _bool_env(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    logger.warning("ignoring %s=%r: expected a boolean", name, raw)
    return default

def _str_env(environ: Mapping[str, str], name: str, default: str) -> str:
    raw = environ.get(name, "")
    return raw if raw else default


def config_from_env(environ: Mapping[str, str] | None = None) -> RenderConfig:
    """
    Build a normalized RenderConfig from LINETUI_* knobs.
    NO_COLOR (any non-empty value) disables color like LINETUI_NO_COLOR=1.
    """
    if environ is None:
        environ = os.environ
    p = ENV_PREFIX

    no_color = bool(environ.get("NO_COLOR", "")) or _bool_env(environ, p + "NO_COLOR", False)
    layout = LayoutConfig(
        menu_selected_prefix=_str_env(environ, p + "SELECTED_PREFIX", ""),
        menu_unselected_prefix=_str_env(environ, p + "UNSELECTED_PREFIX", ""),
        menu_index_width=_int_env(environ, p + "INDEX_WIDTH", 0),
        input_cursor=_str_env(environ, p + "CURSOR", ""),
        divider_width=_int_env(environ, p + "DIVIDER_WIDTH", 0),
        max_width=_int_env(environ, p + "MAX_WIDTH", 0),
        centered=_bool_env(environ, p + "CENTERED", False),
    )
    colors = resolve_colors(environ.get(p + "THEME"), environ=environ)
    return RenderConfig(no_color=no_color, colors=colors, layout=layout).normalized()


__all__ = [
    "DEFAULT_SELECTED_PREFIX", "DEFAULT_UNSELECTED_PREFIX", "DEFAULT_INDEX_WIDTH",
    "DEFAULT_INPUT_CURSOR", "DEFAULT_DIVIDER_WIDTH",
    "LayoutConfig", "normalize_layout", "RenderConfig", "effective_width",
    "config_from_env",
]
