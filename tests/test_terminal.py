# test_terminal.py

from io import StringIO
from unittest.mock import Mock

import pytest
from prompt_toolkit.formatted_text import FormattedText

from antsy import StyleMode, hyperlink, set_style_mode, styled
from antsy.display import DisplayTerminal, to_formatted_text
from antsy.style.strategies import current_reset_style
from antsy.style import Style

ESC = "\x1b"


class TestDisplayTerminal:
    def setup_method(self):
        self.stream = StringIO()
        self.terminal = DisplayTerminal(self.stream)

    def test_write_renders_into_stream(self):
        self.terminal.write(styled("Hello").bold().red())
        assert self.stream.getvalue() == f"{ESC}[0;31;1mHello{ESC}[0m"

    def test_write_line(self):
        self.terminal.write_line("plain")
        self.terminal.write_line(hyperlink("https://example.com", "Example"))
        lines = self.stream.getvalue().split("\n")
        assert lines[0] == "plain"
        assert lines[1].endswith(f"{ESC}]8;;{ESC}\\")

    def test_write_respects_switch(self):
        set_style_mode(StyleMode.NEVER)
        self.terminal.write_line(styled("a{}c", styled("b").red()).cyan())
        assert self.stream.getvalue() == "abc\n"

    def test_stream_errors_propagate(self):
        stream = Mock()
        stream.write.side_effect = OSError("closed")
        terminal = DisplayTerminal(stream)
        with pytest.raises(OSError):
            terminal.write(styled("Hello").red())
        assert current_reset_style() == Style()

    def test_defaults_to_stdout(self, capsys):
        DisplayTerminal().write_line(styled("out"))
        assert "out" in capsys.readouterr().out

    def test_print_formatted_plain_stream(self):
        self.terminal.print_formatted(styled("Hello").bold().red())
        assert "Hello" in self.stream.getvalue()


class TestFormattedText:
    def test_styled_fragments(self):
        fragments = to_formatted_text(styled("Hi").green())
        assert isinstance(fragments, FormattedText)
        assert "".join(text for _, text in fragments) == "Hi"
        assert "ansigreen" in fragments[0][0]

    def test_disabled_is_single_plain_fragment(self):
        set_style_mode(StyleMode.NEVER)
        assert list(to_formatted_text(styled("Hi").green())) == [("", "Hi")]
