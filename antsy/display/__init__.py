# display/__init__.py

from .terminal import DisplayTerminal, to_formatted_text

__all__ = ['DisplayTerminal', 'to_formatted_text']
