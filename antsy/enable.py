# enable.py

import os
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Mapping, Optional, Union

from .logger import Logger

logger = Logger(__name__)

# Process-wide switch: unresolved until first read or explicit set
_UNRESOLVED, _OFF, _ON = 0, 1, 2
_state = _UNRESOLVED

# Per-thread override installed by styling()
_local = threading.local()


class StyleMode(Enum):
    """How the global switch decides whether escape codes are emitted."""
    AUTO = 'auto'
    ALWAYS = 'always'
    NEVER = 'never'


def env_supports_styling(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Inspect the environment for signals that styling is unwanted.

    A missing or ``dumb`` TERM disables styling, as does NO_COLOR set to
    anything other than ``0``.
    """
    env = os.environ if environ is None else environ

    term = env.get('TERM')
    if term is None or term == 'dumb':
        logger.debug(f"Styling unsupported: TERM is {term!r}")
        return False

    no_color = env.get('NO_COLOR')
    if no_color is not None and no_color != '0':
        logger.debug(f"Styling disabled: NO_COLOR is {no_color!r}")
        return False

    return True


def set_style_mode(mode: Union[StyleMode, str] = StyleMode.AUTO) -> bool:
    """
    Resolve and store the global style mode.

    Args:
        mode: A StyleMode or one of "auto", "always", "never".

    Returns:
        True if styling is now enabled.
    """
    global _state
    mode = StyleMode(mode)
    if mode is StyleMode.AUTO:
        enabled = env_supports_styling()
    else:
        enabled = mode is StyleMode.ALWAYS
    _state = _ON if enabled else _OFF
    logger.debug(f"Style mode {mode.value} resolved to {'on' if enabled else 'off'}")
    return enabled


def style_enabled() -> bool:
    """Return True if escape codes should be emitted on this thread right now."""
    override = getattr(_local, 'override', None)
    if override is not None:
        return override
    if _state == _UNRESOLVED:
        return set_style_mode(StyleMode.AUTO)
    return _state == _ON


def reset_style_mode() -> None:
    """Forget the resolved mode; the next read auto-detects again."""
    global _state
    _state = _UNRESOLVED


@contextmanager
def styling(enabled: bool) -> Iterator[None]:
    """
    Force styling on or off for the current thread inside the block.

    The global mode is left untouched and other threads are unaffected.
    Blocks nest; leaving one restores the override that was active before.
    """
    previous = getattr(_local, 'override', None)
    _local.override = bool(enabled)
    try:
        yield
    finally:
        _local.override = previous
