# test_definitions.py

import pytest

from antsy.style.engine import Style
from antsy.style.definitions import (
    ATTRIBUTE_CODES, BACKGROUND, FOREGROUND,
    Ansi, AnsiColor, Attributes, Color, DefaultColor, Indexed, Rgb
)

ALL_FLAGS = [
    Attributes.BOLD, Attributes.DIM, Attributes.ITALIC, Attributes.UNDERLINED,
    Attributes.BLINKING, Attributes.INVERSE, Attributes.HIDDEN, Attributes.CROSSED,
]


class TestColor:
    def test_named_constructors_cover_all_sixteen(self):
        for code in AnsiColor:
            constructor = getattr(Color, code.name.lower())
            assert constructor() == Ansi(code)

    def test_value_equality(self):
        assert Color.rgb(1, 2, 3) == Rgb(1, 2, 3)
        assert Color.rgb(1, 2, 3) != Color.rgb(1, 2, 4)
        assert Color.indexed(7) == Color.ansi256(7)
        assert Color.indexed(1) != Color.red()
        assert Color.DEFAULT == DefaultColor()

    def test_segments(self):
        assert Color.DEFAULT.segment(FOREGROUND) == ''
        assert Color.red().segment(FOREGROUND) == ';31'
        assert Color.red().segment(BACKGROUND) == ';41'
        assert Color.bright_white().segment(FOREGROUND) == ';97'
        assert Color.bright_black().segment(BACKGROUND) == ';100'
        assert Color.indexed(208).segment(FOREGROUND) == ';38;5;208'
        assert Color.indexed(0).segment(BACKGROUND) == ';48;5;0'
        assert Color.rgb(161, 123, 90).segment(FOREGROUND) == ';38;2;161;123;90'
        assert Color.rgb(0, 0, 0).segment(BACKGROUND) == ';48;2;0;0;0'

    @pytest.mark.parametrize("args", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5), (True, 0, 0)])
    def test_rgb_rejects_out_of_range(self, args):
        with pytest.raises(ValueError):
            Color.rgb(*args)

    def test_indexed_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            Color.indexed(300)

    def test_ansi_rejects_unknown_code(self):
        with pytest.raises(ValueError):
            Ansi(16)

    def test_ansi_accepts_plain_int(self):
        assert Ansi(9).code is AnsiColor.BRIGHT_RED

    def test_colors_are_hashable(self):
        assert len({Color.red(), Ansi(1), Color.rgb(1, 1, 1), Rgb(1, 1, 1)}) == 2

    def test_base_color_cannot_be_built(self):
        with pytest.raises(TypeError):
            Color()
        with pytest.raises(TypeError):
            Style().fg(Color())


class TestAttributes:
    def test_bit_positions_are_stable(self):
        assert [int(flag) for flag in ALL_FLAGS] == [1 << i for i in range(8)]

    def test_union_contains_every_member(self):
        combined = Attributes.EMPTY
        for flag in ALL_FLAGS[::2]:
            combined = combined | flag
        for flag in ALL_FLAGS[::2]:
            assert combined.contains(flag)
            assert flag in combined
        for flag in ALL_FLAGS[1::2]:
            assert not combined.contains(flag)

    def test_intersection(self):
        left = Attributes.BOLD | Attributes.ITALIC
        right = Attributes.ITALIC | Attributes.HIDDEN
        assert left & right == Attributes.ITALIC

    def test_complement_stays_within_eight_bits(self):
        assert ~Attributes.BOLD == Attributes(0xFE)
        assert ~Attributes.EMPTY == Attributes(0xFF)
        assert ~Attributes(0xFF) == Attributes.EMPTY
        assert not (~Attributes.DIM).contains(Attributes.DIM)

    def test_empty_is_contained_everywhere(self):
        assert Attributes.BOLD.contains(Attributes.EMPTY)
        assert Attributes.EMPTY.contains(Attributes.EMPTY)

    def test_codes_follow_sgr(self):
        assert list(ATTRIBUTE_CODES.values()) == [1, 2, 3, 4, 5, 7, 8, 9]

    @pytest.mark.parametrize("bits", [256, 512, 0x1FF])
    def test_rejects_bits_beyond_eight(self, bits):
        with pytest.raises(ValueError):
            Attributes(bits)

    def test_union_with_wide_int_is_rejected(self):
        with pytest.raises(ValueError):
            Attributes.BOLD | 256

    def test_full_byte_renders(self):
        assert Style().attrs(Attributes(0xFF)).sgr() == "\x1b[0;1;2;3;4;5;7;8;9m"
