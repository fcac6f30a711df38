# style/definitions.py

from dataclasses import dataclass
from enum import STRICT, IntEnum, IntFlag
from typing import Dict, NamedTuple

# Escape sequence building blocks
ESC = '\033'
CSI = ESC + '['
OSC = ESC + ']'
ST = ESC + '\\'
RESET = CSI + '0m'


class Layer(NamedTuple):
    """SGR parameter prefixes for one color layer."""
    base: str
    bright: str
    extended: str


FOREGROUND = Layer(base='3', bright='9', extended='38')
BACKGROUND = Layer(base='4', bright='10', extended='48')


class AnsiColor(IntEnum):
    """The 16 named 4-bit terminal colors: 8 base followed by 8 bright."""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15


def _check_byte(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


class Color:
    """
    A foreground or background color.

    Exactly one representation is active per value: the terminal default,
    one of the 16 named ANSI colors, an 8-bit palette index or an RGB triple.
    Build colors through the named constructors (``Color.red()``,
    ``Color.bright_cyan()``, ``Color.rgb(r, g, b)``, ``Color.indexed(i)``)
    or use ``Color.DEFAULT``.
    """
    __slots__ = ()

    DEFAULT: 'Color'

    def __new__(cls, *args, **kwargs):
        if cls is Color:
            raise TypeError("Color is abstract; use a named constructor or Color.DEFAULT")
        return super().__new__(cls)

    def segment(self, layer: Layer) -> str:
        """Return the ``;``-prefixed SGR parameters selecting this color on a layer."""
        raise NotImplementedError

    @staticmethod
    def rgb(r: int, g: int, b: int) -> 'Rgb':
        return Rgb(r, g, b)

    @staticmethod
    def indexed(index: int) -> 'Indexed':
        return Indexed(index)

    ansi256 = indexed


@dataclass(frozen=True)
class DefaultColor(Color):
    """The terminal's own default color; contributes no SGR parameters."""

    def segment(self, layer: Layer) -> str:
        return ''


@dataclass(frozen=True)
class Ansi(Color):
    code: AnsiColor

    def __post_init__(self):
        if isinstance(self.code, bool) or not isinstance(self.code, int) or not 0 <= self.code <= 15:
            raise ValueError(f"ANSI color code must be in 0..15, got {self.code!r}")
        object.__setattr__(self, 'code', AnsiColor(self.code))

    def segment(self, layer: Layer) -> str:
        if self.code < 8:
            return f';{layer.base}{int(self.code)}'
        return f';{layer.bright}{self.code - 8}'


@dataclass(frozen=True)
class Indexed(Color):
    index: int

    def __post_init__(self):
        _check_byte('index', self.index)

    def segment(self, layer: Layer) -> str:
        return f';{layer.extended};5;{self.index}'


@dataclass(frozen=True)
class Rgb(Color):
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ('r', 'g', 'b'):
            _check_byte(name, getattr(self, name))

    def segment(self, layer: Layer) -> str:
        return f';{layer.extended};2;{self.r};{self.g};{self.b}'


Color.DEFAULT = DefaultColor()


def _named_constructor(code: AnsiColor):
    def constructor() -> Ansi:
        return Ansi(code)
    constructor.__name__ = code.name.lower()
    constructor.__doc__ = f"The {code.name.lower().replace('_', ' ')} ANSI color."
    return staticmethod(constructor)


# Color.black() ... Color.bright_white()
for _code in AnsiColor:
    setattr(Color, _code.name.lower(), _named_constructor(_code))
del _code


class Attributes(IntFlag, boundary=STRICT):
    """
    Binary text attributes.

    Bit positions are fixed: they index the precomputed rendering table in
    the style engine. Combine with ``|``, intersect with ``&``, complement
    with ``~`` and query with ``in`` or :meth:`contains`. Values outside the
    eight defined bits raise ``ValueError``.
    """
    EMPTY = 0

    BOLD = 1 << 0
    DIM = 1 << 1
    ITALIC = 1 << 2
    UNDERLINED = 1 << 3
    BLINKING = 1 << 4
    INVERSE = 1 << 5
    HIDDEN = 1 << 6
    CROSSED = 1 << 7

    def contains(self, other: 'Attributes') -> bool:
        """True when every flag of ``other`` is set in this set."""
        return (self & other) == other

    def __invert__(self) -> 'Attributes':
        return self.__class__(0xFF & ~self._value_)


# SGR parameter per attribute, in rendering order
ATTRIBUTE_CODES: Dict[Attributes, int] = {
    Attributes.BOLD: 1,
    Attributes.DIM: 2,
    Attributes.ITALIC: 3,
    Attributes.UNDERLINED: 4,
    Attributes.BLINKING: 5,
    Attributes.INVERSE: 7,
    Attributes.HIDDEN: 8,
    Attributes.CROSSED: 9,
}
