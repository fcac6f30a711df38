# style/engine.py

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import FrozenSet, Optional, Tuple

from rich.color import Color as RichColor
from rich.style import Style as RichStyle

from ..enable import style_enabled
from .definitions import (
    ATTRIBUTE_CODES, BACKGROUND, CSI, FOREGROUND,
    Ansi, AnsiColor, Attributes, Color, Indexed, Rgb
)


def _attribute_segments(bits: int) -> str:
    return ''.join(f';{code}' for flag, code in ATTRIBUTE_CODES.items() if bits & flag)


# One rendered suffix per possible attribute byte
ATTRIBUTE_TABLE: Tuple[str, ...] = tuple(_attribute_segments(bits) for bits in range(256))


@dataclass(frozen=True)
class Style:
    """
    Immutable combination of foreground, background and text attributes.

    Builder methods return a new Style. Color builders overwrite the
    current color; attribute builders add to the current attribute set.

        Style().bold().red()           # ESC[0;31;1m
        Style().fg(Color.rgb(1, 2, 3)) # ESC[0;38;2;1;2;3m
    """
    foreground: Color = Color.DEFAULT
    background: Color = Color.DEFAULT
    attributes: Attributes = Attributes.EMPTY

    BUILDERS = frozenset()  # filled in below the class

    def fg(self, color: Color) -> 'Style':
        """Set the foreground color."""
        if not isinstance(color, Color):
            raise TypeError(f"Expected a Color, got {type(color).__name__}")
        return replace(self, foreground=color)

    def bg(self, color: Color) -> 'Style':
        """Set the background color."""
        if not isinstance(color, Color):
            raise TypeError(f"Expected a Color, got {type(color).__name__}")
        return replace(self, background=color)

    def attrs(self, attributes: Attributes) -> 'Style':
        """Add attributes to the current set."""
        if not isinstance(attributes, Attributes):
            raise TypeError(f"Expected Attributes, got {type(attributes).__name__}")
        return replace(self, attributes=self.attributes | attributes)

    def bold(self) -> 'Style':
        return self.attrs(Attributes.BOLD)

    def dim(self) -> 'Style':
        return self.attrs(Attributes.DIM)

    def italic(self) -> 'Style':
        return self.attrs(Attributes.ITALIC)

    def underlined(self) -> 'Style':
        return self.attrs(Attributes.UNDERLINED)

    def blinking(self) -> 'Style':
        return self.attrs(Attributes.BLINKING)

    def inverse(self) -> 'Style':
        return self.attrs(Attributes.INVERSE)

    def hidden(self) -> 'Style':
        return self.attrs(Attributes.HIDDEN)

    def crossed(self) -> 'Style':
        return self.attrs(Attributes.CROSSED)

    def rgb(self, r: int, g: int, b: int) -> 'Style':
        return self.fg(Rgb(r, g, b))

    def on_rgb(self, r: int, g: int, b: int) -> 'Style':
        return self.bg(Rgb(r, g, b))

    def indexed(self, index: int) -> 'Style':
        return self.fg(Indexed(index))

    def on_indexed(self, index: int) -> 'Style':
        return self.bg(Indexed(index))

    ansi256 = indexed
    on_ansi256 = on_indexed

    def sgr(self) -> str:
        """
        Render the escape sequence that switches the terminal to this style.

        Returns an empty string while styling is disabled. The identity
        style renders as the bare reset ``ESC[0m``.
        """
        if not style_enabled():
            return ''
        return render_sequence(self)

    def to_rich(self) -> RichStyle:
        """Return the equivalent rich Style."""
        return to_rich_style(self)

    def __str__(self) -> str:
        return self.sgr()

    def __format__(self, format_spec: str) -> str:
        return format(self.sgr(), format_spec)


@lru_cache(maxsize=512)
def render_sequence(style: Style) -> str:
    """Render a style's SGR sequence regardless of the enable switch."""
    return (
        f'{CSI}0'
        f'{style.foreground.segment(FOREGROUND)}'
        f'{style.background.segment(BACKGROUND)}'
        f'{ATTRIBUTE_TABLE[int(style.attributes)]}'
        'm'
    )


def _color_builder(code: AnsiColor, background: bool):
    color = Ansi(code)

    if background:
        def builder(self: Style) -> Style:
            return replace(self, background=color)
        builder.__name__ = f'on_{code.name.lower()}'
        builder.__doc__ = f"Set the background to {code.name.lower().replace('_', ' ')}."
    else:
        def builder(self: Style) -> Style:
            return replace(self, foreground=color)
        builder.__name__ = code.name.lower()
        builder.__doc__ = f"Set the foreground to {code.name.lower().replace('_', ' ')}."
    builder.__qualname__ = f'Style.{builder.__name__}'
    return builder


# Style.red(), Style.on_red(), ... for all 16 named colors
for _code in AnsiColor:
    for _background in (False, True):
        _builder = _color_builder(_code, _background)
        setattr(Style, _builder.__name__, _builder)
del _code, _background, _builder

Style.BUILDERS = frozenset(
    ['fg', 'bg', 'attrs', 'bold', 'dim', 'italic', 'underlined', 'blinking',
     'inverse', 'hidden', 'crossed', 'rgb', 'on_rgb', 'indexed', 'on_indexed',
     'ansi256', 'on_ansi256']
    + [code.name.lower() for code in AnsiColor]
    + [f'on_{code.name.lower()}' for code in AnsiColor]
)

# Rich names for each attribute flag
_RICH_ATTRIBUTES = {
    Attributes.BOLD: 'bold',
    Attributes.DIM: 'dim',
    Attributes.ITALIC: 'italic',
    Attributes.UNDERLINED: 'underline',
    Attributes.BLINKING: 'blink',
    Attributes.INVERSE: 'reverse',
    Attributes.HIDDEN: 'conceal',
    Attributes.CROSSED: 'strike',
}


def _rich_color(color: Color) -> Optional[RichColor]:
    if isinstance(color, Ansi):
        return RichColor.from_ansi(int(color.code))
    if isinstance(color, Indexed):
        return RichColor.from_ansi(color.index)
    if isinstance(color, Rgb):
        return RichColor.from_rgb(color.r, color.g, color.b)
    return None


def to_rich_style(style: Style) -> RichStyle:
    """
    Convert a Style into a rich Style.

    Unset attributes are left as ``None`` so the result layers cleanly over
    whatever rich style is already active.
    """
    flags = {
        name: True
        for flag, name in _RICH_ATTRIBUTES.items()
        if flag in style.attributes
    }
    return RichStyle(
        color=_rich_color(style.foreground),
        bgcolor=_rich_color(style.background),
        **flags
    )
