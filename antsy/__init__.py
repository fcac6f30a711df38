# __init__.py

from .enable import StyleMode, set_style_mode, style_enabled, reset_style_mode, styling
from .logger import Logger, configure_logging
from .style import Attributes, Color, Style, FLAT, TRACKED
from .styled import (
    Styled, Hyperlink, Deferred, FormatArgs,
    styled, hyperlink, apply, apply_hyperlink, render
)

__all__ = [
    "StyleMode", "set_style_mode", "style_enabled", "reset_style_mode", "styling",
    "Logger", "configure_logging",
    "Attributes", "Color", "Style", "FLAT", "TRACKED",
    "Styled", "Hyperlink", "Deferred", "FormatArgs",
    "styled", "hyperlink", "apply", "apply_hyperlink", "render",
]
