"""Theme definitions for crossbar diagrams."""

from xbar.themes.classic import CLASSIC_THEME
from xbar.themes.dark import DARK_THEME

THEMES = {
    "classic": CLASSIC_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "CLASSIC_THEME", "DARK_THEME"]
