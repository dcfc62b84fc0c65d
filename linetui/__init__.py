"""
linetui package: width-correct, optionally colorized terminal lines.

Modules:
- style: ANSI style tokens (apply, strip, measure)
- theme: semantic color roles, presets, env overrides
- config: immutable render snapshot + effective width
- layout: width primitives (clip, pad, center) + line compositor
- view: component renderers (menu, title, selector, input, divider)
- screen: alt screen, cursor and clear sequences
- widgets: inline helpers (menu item, key hint, field, status)
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "style",
    "theme",
    "config",
    "layout",
    "view",
    "screen",
    "widgets",
]
