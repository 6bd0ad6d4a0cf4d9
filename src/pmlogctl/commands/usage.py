"""pmlogctl help - print usage information.

The same text is printed for ``help``, ``-help`` and ``-h``.
"""

from pmlogctl.errors import Result
from pmlogctl.labels import LEVELS
from pmlogctl.lib.help_lib import ExampleFormatter, HelpContent

USAGE = [
    HelpContent(id="cmd.help", command="help",
                description="show usage info", priority=10),
]

SYNOPSIS = [
    HelpContent(id="synopsis", command="{prog} COMMAND [PARAM...]",
                description=""),
    HelpContent(id="synopsis.silent", command="{prog} -s COMMAND [PARAM...]",
                description="disable stdout messages"),
]

COMMENT_COLUMN = 31


def register(subparsers, parents):
    """Register the 'help' subcommand."""
    p = subparsers.add_parser(
        "help",
        parents=parents,
        help="Show usage info",
        description="Show usage info.",
    )
    p.set_defaults(func=run)


def usage_text(commands, prog="pmlogctl"):
    """Render the usage screen from each command module's USAGE."""
    lines = []
    for item in SYNOPSIS:
        if item.description:
            lines.append(ExampleFormatter.format(item, prog, COMMENT_COLUMN))
        else:
            lines.append(item.get_command(prog))

    entries = [entry for cmd in commands for entry in cmd.USAGE]
    lines.extend(ExampleFormatter.format_list(entries, prog,
                                              comment_column=COMMENT_COLUMN))
    lines.append("")
    lines.append("Contexts:")
    lines.append("  The global context can be specified as '.'")
    lines.append("")
    lines.append("Levels:")
    for label, code in LEVELS:
        lines.append(f"  {label:<10}  # {code}")
    return "\n".join(lines)


def run(args, out, registry):
    """Execute the help command."""
    from pmlogctl.cli import discover_commands
    out.info(usage_text(discover_commands()), plain=True)
    return Result.HELP
