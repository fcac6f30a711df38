# style/__init__.py

from .definitions import (
    RESET, AnsiColor, Attributes, Color,
    DefaultColor, Ansi, Indexed, Rgb
)
from .engine import Style, to_rich_style
from .strategies import FLAT, TRACKED, FlatReset, TrackedReset, current_reset_style

__all__ = [
    'RESET', 'AnsiColor', 'Attributes', 'Color', 'DefaultColor', 'Ansi',
    'Indexed', 'Rgb', 'Style', 'to_rich_style', 'FLAT', 'TRACKED',
    'FlatReset', 'TrackedReset', 'current_reset_style'
]
