# display/terminal.py

import sys
from typing import Any, Optional, TextIO

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import ANSI, FormattedText

from ..enable import style_enabled
from ..styled import render, write_content


def to_formatted_text(value: Any) -> FormattedText:
    """
    Convert any displayable value to prompt_toolkit formatted text.

    Styling follows the global switch: when it is off the value becomes a
    single unstyled fragment.
    """
    if style_enabled():
        return FormattedText(ANSI(render(value)).__pt_formatted_text__())
    return FormattedText([('', render(value))])


class DisplayTerminal:
    """Writes styled values to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Args:
            stream: Output stream; sys.stdout (looked up at write time) when omitted
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, value: Any = "", newline: bool = False) -> None:
        """
        Render a value directly into the stream.

        Errors raised by the stream (closed file, broken pipe) propagate to
        the caller.
        """
        stream = self.stream
        write_content(value, stream)
        if newline:
            stream.write("\n")
        stream.flush()

    def write_line(self, value: Any = "") -> None:
        """Write a value followed by a newline."""
        self.write(value, newline=True)

    def print_formatted(self, value: Any, end: str = "\n") -> None:
        """Print a value through prompt_toolkit's output layer."""
        print_formatted_text(to_formatted_text(value), end=end, file=self.stream)
