# conftest.py

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from antsy import StyleMode, reset_style_mode, set_style_mode
from antsy.style.strategies import TRACKED


@pytest.fixture(autouse=True)
def styling_on():
    """Every test starts with styling forced on and a clean reset slot."""
    set_style_mode(StyleMode.ALWAYS)
    TRACKED.reset()
    yield
    reset_style_mode()
    TRACKED.reset()
