# styled.py

from dataclasses import dataclass, field, replace
from functools import wraps
from io import StringIO
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from prompt_toolkit.formatted_text import ANSI, StyleAndTextTuples
from rich.style import Style as RichStyle
from rich.text import Text

from .enable import style_enabled, styling
from .style.definitions import OSC, ST
from .style.engine import Style
from .style.strategies import TRACKED, ResetStrategy

HYPERLINK_OPEN = OSC + '8;;'
HYPERLINK_CLOSE = OSC + '8;;' + ST


class Sink(Protocol):
    """Anything text can be written into: streams, StringIO, custom buffers."""
    def write(self, text: str) -> Any: ...


def write_content(content: Any, sink: Sink) -> None:
    """
    Write any displayable value into a sink.

    Values that know how to render themselves (styled regions, hyperlinks,
    deferred callbacks) write straight into the sink so nested regions share
    the same reset tracking; everything else goes through ``str()``.
    """
    writer = getattr(content, 'write_to', None)
    if writer is not None:
        writer(sink)
    else:
        sink.write(str(content))


def render(value: Any, enabled: Optional[bool] = None) -> str:
    """
    Render a value to a string.

    Args:
        value: Styled, Hyperlink, Style or any displayable object
        enabled: Force styling on/off for this call only; None follows the
            global switch

    Returns:
        The rendered text, including escape codes when styling is on
    """
    if enabled is not None:
        with styling(enabled):
            return render(value)
    if isinstance(value, Style):
        return value.sgr()
    buffer = StringIO()
    write_content(value, buffer)
    return buffer.getvalue()


@dataclass(frozen=True)
class FormatArgs:
    """A ``str.format`` call evaluated at render time rather than up front."""
    template: str
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def write_to(self, sink: Sink) -> None:
        sink.write(self.template.format(*self.args, **self.kwargs))

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Deferred:
    """Content produced by a callback that writes directly into the sink."""
    callback: Callable[[Sink], Any]

    def write_to(self, sink: Sink) -> None:
        self.callback(sink)

    def __str__(self) -> str:
        return render(self)


class _StyleBuilders:
    """
    Forwards every Style builder to the wrapped style.

    ``styled("x").bold().red()`` returns a new wrapper whose style is
    ``Style().bold().red()``; the content is untouched.
    """
    style: Style

    def with_style(self, style: Style):
        return replace(self, style=style)

    def __getattr__(self, name):
        if name not in Style.BUILDERS:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        builder = getattr(self.style, name)

        @wraps(builder)
        def rebuild(*args, **kwargs):
            return self.with_style(builder(*args, **kwargs))
        return rebuild

    def __dir__(self):
        return sorted(set(super().__dir__()) | Style.BUILDERS)

    def __str__(self) -> str:
        return render(self)

    def __format__(self, format_spec: str) -> str:
        return format(render(self), format_spec)


@dataclass(frozen=True)
class Styled(_StyleBuilders):
    """
    Content paired with the style it is displayed in.

    Rendering writes the style's escape sequence, the content, then the
    sequence chosen by the reset strategy. With the default tracked strategy
    that is the enclosing region's style, so text after a nested region keeps
    the outer styling:

        inner = styled("inner").rgb(161, 123, 90)
        str(styled("Wor{}ld", inner).cyan())
        # ESC[0;36mWor ESC[0;38;2;161;123;90m inner ESC[0;36m ld ESC[0m
    """
    content: Any
    style: Style = field(default_factory=Style)
    strategy: ResetStrategy = field(default=TRACKED, repr=False, compare=False)

    def write_to(self, sink: Sink) -> None:
        enclosing = self.strategy.enter(self.style)
        try:
            sink.write(self.style.sgr())
            write_content(self.content, sink)
            sink.write(self.strategy.closing(enclosing).sgr())
        finally:
            self.strategy.leave(enclosing)

    def __rich__(self) -> Text:
        return Text.from_ansi(render(self, enabled=True))

    def __pt_formatted_text__(self) -> StyleAndTextTuples:
        return ANSI(render(self, enabled=True)).__pt_formatted_text__()


@dataclass(frozen=True)
class Hyperlink(_StyleBuilders):
    """
    A styled region wrapped in an OSC-8 terminal hyperlink.

    The URI is rendered with styling suppressed, so a styled URI expression
    contributes only its plain text to the link target. With styling off the
    content is rendered alone, without any link framing.
    """
    uri: Any
    content: Any
    style: Style = field(default_factory=Style)
    strategy: ResetStrategy = field(default=TRACKED, repr=False, compare=False)

    def write_to(self, sink: Sink) -> None:
        if not style_enabled():
            write_content(self.content, sink)
            return

        sink.write(HYPERLINK_OPEN)
        with styling(False):
            write_content(self.uri, sink)
        sink.write(ST)
        Styled(self.content, self.style, self.strategy).write_to(sink)
        sink.write(HYPERLINK_CLOSE)

    def __rich__(self) -> Text:
        # rich drops links on SGR resets, so attach the link as its own span
        text = Text.from_ansi(render(Styled(self.content, self.style, self.strategy), enabled=True))
        text.stylize(RichStyle(link=render(self.uri, enabled=False)))
        return text


def _content(template: Any, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
    if args or kwargs:
        return FormatArgs(template, args, kwargs)
    return template


def styled(template: Any, *args: Any, **kwargs: Any) -> Styled:
    """
    Create an unstyled region; chain builders to style it.

    With format arguments the template is formatted lazily at render time,
    so nested styled arguments are tracked against this region.
    """
    return Styled(_content(template, args, kwargs))


def hyperlink(uri: Any, template: Any, *args: Any, **kwargs: Any) -> Hyperlink:
    """Create an unstyled hyperlink to ``uri``; chain builders to style it."""
    return Hyperlink(uri, _content(template, args, kwargs))


def apply(style: Style, template: Any, *args: Any, **kwargs: Any) -> Styled:
    """Attach a prebuilt style to content."""
    return Styled(_content(template, args, kwargs), style)


def apply_hyperlink(style: Style, uri: Any, template: Any, *args: Any, **kwargs: Any) -> Hyperlink:
    """Attach a prebuilt style to a hyperlink."""
    return Hyperlink(uri, _content(template, args, kwargs), style)
