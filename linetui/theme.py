#!/usr/bin/env python3
# File: theme.py
# Purpose: centralize semantic color roles (palette, presets, env-driven overrides)
# SRP Slices:
#   [CONFIG]  Data-only: role names, presets (no I/O)
#   [ROLES]   ColorRoles value + lookups (severity levels, message fallback)
#   [ENGINE]  Resolution: preset + env overrides -> ColorRoles of style tokens

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .style import COLOR_BY_NAME, color256

logger = logging.getLogger(__name__)

# ════════════════════════════════════════════════════════════════════════════
# [CONFIG] Data (no side-effects)
# ════════════════════════════════════════════════════════════════════════════

# Logical slots (semantics)
# - UI components: title (selected menu rows too), menu, prompt (labels/cursor), data (values), divider
# - Severity: trace, debug, info, warn, error, fatal, panic
# - Log line parts: message (falls back to the severity role), timestamp, field_name, field_value

UI_ROLES = ("menu", "title", "prompt", "data", "divider")
LEVEL_ROLES = ("trace", "debug", "info", "warn", "error", "fatal", "panic")
EXTRA_ROLES = ("message", "timestamp", "field_name", "field_value")

LEVEL_ALIASES = {"warning": "warn"}

# Values are color names (see style.COLOR_BY_NAME) or 0..255 indices.
THEME_PRESETS = {
    # Default: bright UI, classic severity palette
    "default": {
        "title":   "bright_white",
        "menu":    "bright_cyan",
        "prompt":  "bright_green",
        "data":    "white",
        "divider": "gray",
        "trace": "gray",
        "debug": "green",
        "info":  "blue",
        "warn":  "yellow",
        "error": "red",
        "fatal": 196,
        "panic": "magenta",
        "timestamp":   "gray",
        "field_name":  "cyan",
        "field_value": "white",
    },

    # Night: cool blues, warm highlight
    "night": {
        "title":   "bright_yellow",
        "menu":    "bright_blue",
        "prompt":  "bright_magenta",
        "data":    "white",
        "divider": "cyan",
        "trace": 240,
        "debug": "cyan",
        "info":  "bright_blue",
        "warn":  214,
        "error": "bright_red",
        "fatal": 196,
        "panic": "bright_magenta",
        "timestamp":   240,
        "field_name":  "blue",
        "field_value": "white",
    },

    # Day: dark ink for light backgrounds
    "day": {
        "title":   "black",
        "menu":    "blue",
        "prompt":  "magenta",
        "data":    236,
        "divider": 244,
        "trace": 244,
        "debug": 28,
        "info":  "blue",
        "warn":  130,
        "error": "red",
        "fatal": 160,
        "panic": "magenta",
        "timestamp":   244,
        "field_name":  25,
        "field_value": 236,
    },

    # Mono: no color tokens at all
    "mono": {},
}

DEFAULT_THEME = "default"

# ════════════════════════════════════════════════════════════════════════════
# [ROLES] ColorRoles value
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ColorRoles:
    """Role -> style token. An empty string means "no color" for that role."""

    menu: str = ""
    title: str = ""
    prompt: str = ""
    data: str = ""
    divider: str = ""

    trace: str = ""
    debug: str = ""
    info: str = ""
    warn: str = ""
    error: str = ""
    fatal: str = ""
    panic: str = ""

    message: str = ""
    timestamp: str = ""
    field_name: str = ""
    field_value: str = ""

    def role(self, name: str) -> str:
        """Generic lookup; unknown or unset roles yield ""."""
        key = (name or "").strip().lower()
        key = LEVEL_ALIASES.get(key, key)
        if key not in _ROLE_NAMES:
            return ""
        return getattr(self, key)

    def level(self, level: str) -> str:
        key = (level or "").strip().lower()
        key = LEVEL_ALIASES.get(key, key)
        if key not in LEVEL_ROLES:
            return ""
        return getattr(self, key)

    def message_for(self, level: str) -> str:
        """Message role, falling back to the active severity's role when unset."""
        return self.message or self.level(level)


ALL_ROLES = UI_ROLES + LEVEL_ROLES + EXTRA_ROLES
_ROLE_NAMES = frozenset(ALL_ROLES)


def no_colors() -> ColorRoles:
    return ColorRoles()


def default_colors() -> ColorRoles:
    return resolve_colors(DEFAULT_THEME, environ={})


# ════════════════════════════════════════════════════════════════════════════
# [ENGINE] Resolution (preset + env overrides -> style tokens)
# ════════════════════════════════════════════════════════════════════════════

ENV_PREFIX = "LINETUI_"


def color_index(value) -> int | None:
    """Name or 0..255 index (int or digit string) -> palette index; None when invalid."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value if 0 <= value <= 255 else None
    text = str(value or "").strip().lower().replace("-", "_").replace(" ", "_")
    if not text:
        return None
    if text.isdigit():
        n = int(text)
        return n if 0 <= n <= 255 else None
    return COLOR_BY_NAME.get(text)


def _style_from_env(environ: Mapping[str, str], role: str, default: str) -> str:
    name = f"{ENV_PREFIX}{role.upper()}_FG"
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    if raw.lower() == "none":
        return ""
    idx = color_index(raw)
    if idx is None:
        logger.warning("ignoring %s=%r: not a color name or 0..255 index", name, raw)
        return default
    return color256(idx)


def available_themes() -> list[str]:
    return sorted(THEME_PRESETS.keys())


def resolve_theme_name(name: str | None) -> str:
    key = (name or "").strip().lower()
    if not key:
        return DEFAULT_THEME
    if key not in THEME_PRESETS:
        logger.warning("unknown theme %r, using %r", name, DEFAULT_THEME)
        return DEFAULT_THEME
    return key


def resolve_colors(theme_name: str | None = None, environ: Mapping[str, str] | None = None) -> ColorRoles:
    """Return ColorRoles for the named preset with LINETUI_<ROLE>_FG overrides applied."""
    if environ is None:
        environ = os.environ
    preset = THEME_PRESETS[resolve_theme_name(theme_name)]

    C = {}
    for role, value in preset.items():
        idx = color_index(value)
        C[role] = color256(idx) if idx is not None else ""

    for role in ALL_ROLES:
        C[role] = _style_from_env(environ, role, C.get(role, ""))

    return ColorRoles(**C)


__all__ = [
    "UI_ROLES", "LEVEL_ROLES", "EXTRA_ROLES", "ALL_ROLES", "THEME_PRESETS", "DEFAULT_THEME",
    "ColorRoles", "no_colors", "default_colors",
    "color_index", "available_themes", "resolve_theme_name", "resolve_colors",
]
