"""
Core help content type.
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class HelpContent:
    """
    One usage line: a command template and what it does.

    Rendered by ExampleFormatter as ``<command>  # <description>`` with
    the comments lined up in one column. A description may span several
    lines; continuation lines are printed under the comment column.
    """
    id: str                          # Unique identifier like "cmd.set"
    command: str                     # Command template like "set <context> <level>"
    description: str                 # What the command does
    category: str = 'commands'       # Category for grouping
    priority: int = 50               # Lower = listed first
    variables: Dict[str, str] = field(default_factory=dict)

    def get_command(self, prog: str = 'app', **kwargs) -> str:
        """
        Render the command with {prog} and variable substitutions.
        """
        values = dict(self.variables)
        values.update(kwargs)
        values['prog'] = prog

        result = self.command
        for key, value in values.items():
            result = result.replace(f'{{{key}}}', str(value))
        return result

    def format_as_example(self, prog: str = 'app', comment_column: int = 31,
                          **kwargs) -> str:
        """
        Format as usage line(s) with the comment aligned.

        Returns:
            e.g. "set <context> <level>        # set logging context level"
        """
        cmd = self.get_command(prog, **kwargs)
        first, *rest = self.description.split("\n")
        lines = []

        padding_needed = comment_column - len(cmd)
        if padding_needed >= 1:
            lines.append(f"{cmd}{' ' * padding_needed}# {first}")
        else:
            # Command too long: comment goes on its own line
            lines.append(cmd)
            lines.append(f"{' ' * comment_column}# {first}")

        for extra in rest:
            lines.append(f"{' ' * comment_column}# {extra}")
        return "\n".join(lines)
