"""
Help content for CLI usage text.

Separates usage entries (what a command looks like, what it does) from
how they are laid out.
"""

from .core import HelpContent
from .formatters import ExampleFormatter

__all__ = [
    'HelpContent',
    'ExampleFormatter',
]
