# style/strategies.py

import threading

from .engine import Style

IDENTITY = Style()


class ResetStrategy:
    """
    Decides what a styled region emits once its content has been written.

    ``enter`` is called before the region renders and returns the enclosing
    style it displaced; ``closing`` turns that into the style written after
    the content; ``leave`` is always called with the same enclosing style
    when the region finishes, whether rendering succeeded or not.
    """

    def enter(self, style: Style) -> Style:
        raise NotImplementedError

    def closing(self, enclosing: Style) -> Style:
        raise NotImplementedError

    def leave(self, enclosing: Style) -> None:
        raise NotImplementedError


class TrackedReset(ResetStrategy):
    """
    Close by re-emitting the enclosing region's style.

    The enclosing style lives in a per-thread slot, so unrelated renders on
    other threads never observe each other's nesting.
    """

    def __init__(self):
        self._local = threading.local()

    def current(self) -> Style:
        """Style that the innermost open region on this thread restores to."""
        return getattr(self._local, 'style', IDENTITY)

    def enter(self, style: Style) -> Style:
        enclosing = self.current()
        self._local.style = style
        return enclosing

    def closing(self, enclosing: Style) -> Style:
        return enclosing

    def leave(self, enclosing: Style) -> None:
        self._local.style = enclosing

    def reset(self) -> None:
        """Drop any recorded enclosing style for this thread."""
        self._local.style = IDENTITY

    def __repr__(self) -> str:
        return 'TrackedReset()'


class FlatReset(ResetStrategy):
    """
    Always close with the full reset, ignoring any enclosing style.

    The region's own style is still recorded in the tracker's slot, so
    tracked regions nested inside it restore to it.
    """

    def __init__(self, tracker: TrackedReset):
        self._tracker = tracker

    def enter(self, style: Style) -> Style:
        return self._tracker.enter(style)

    def closing(self, enclosing: Style) -> Style:
        return IDENTITY

    def leave(self, enclosing: Style) -> None:
        self._tracker.leave(enclosing)

    def __repr__(self) -> str:
        return 'FlatReset()'


TRACKED = TrackedReset()
FLAT = FlatReset(TRACKED)


def current_reset_style() -> Style:
    return TRACKED.current()
