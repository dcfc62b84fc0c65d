# Ensure the project root is on sys.path so tests can
# "import linetui" without an install.
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from linetui.config import LayoutConfig, RenderConfig  # noqa: E402
from linetui.theme import ColorRoles  # noqa: E402
from linetui.style import color256  # noqa: E402


@pytest.fixture
def ui_colors():
    return ColorRoles(
        title=color256(15),
        menu=color256(14),
        prompt=color256(10),
        data=color256(7),
        divider=color256(8),
    )


@pytest.fixture
def make_cfg(ui_colors):
    """make_cfg(no_color=False, **layout_kwargs) -> RenderConfig"""
    def _make(no_color=False, colors=None, **layout):
        return RenderConfig(
            no_color=no_color,
            colors=ui_colors if colors is None else colors,
            layout=LayoutConfig(**layout),
        )
    return _make
