"""
Formatters for help output.
"""

from typing import List
from .core import HelpContent


class ExampleFormatter:
    """Formats help content as aligned usage lines."""

    @staticmethod
    def format(item: HelpContent, prog: str = 'app', comment_column: int = 31,
               **kwargs) -> str:
        return item.format_as_example(prog, comment_column, **kwargs)

    @staticmethod
    def format_list(items: List[HelpContent],
                    prog: str = 'app',
                    indent: str = "  ",
                    comment_column: int = 31) -> List[str]:
        """
        Format items as usage lines, ordered by priority.

        Args:
            items: Help content items
            prog: Program name
            indent: Indentation string
            comment_column: Column (including indent) where '#' starts

        Returns:
            List of formatted lines
        """
        lines = []
        for item in sorted(items, key=lambda i: i.priority):
            text = item.format_as_example(prog, comment_column - len(indent))
            lines.extend(f"{indent}{line}" for line in text.split("\n"))
        return lines
