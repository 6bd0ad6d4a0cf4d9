"""pmlogctl set - change the level of one or more logging contexts.

    pmlogctl set ui err           # exactly the "ui" context
    pmlogctl set 'network*' debug # every context starting with "network"
"""

import argparse

from pmlogctl.errors import ContextNotFoundError, ParamError, Result
from pmlogctl.labels import parse_level
from pmlogctl.lib.help_lib import HelpContent
from pmlogctl.matcher import resolve_alias
from pmlogctl.mutator import set_level_for_pattern
from pmlogctl.registry import ContextRegistryClient

USAGE = [
    HelpContent(id="cmd.set", command="set <context> <level>",
                description="set logging context level", priority=80),
]


def register(subparsers, parents):
    """Register the 'set' subcommand."""
    p = subparsers.add_parser(
        "set",
        parents=parents,
        help="Set logging context level",
        description=(
            "Set the active level of a logging context. A trailing '*'\n"
            "sets every context whose name starts with the text before it."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("context", nargs="?", metavar="<context>",
                   help="Context name or prefix pattern ('.' = global)")
    p.add_argument("level", nargs="?", metavar="<level>",
                   help="Level name (none, emerg, ... debug)")
    p.set_defaults(func=run)


def run(args, out, registry):
    """Execute the set command."""
    if args.context is None:
        raise ParamError("Context not specified.")
    if args.level is None:
        raise ParamError("Level not specified.")

    pattern = resolve_alias(args.context)
    level = parse_level(args.level)
    client = ContextRegistryClient(registry, out)

    try:
        changed = set_level_for_pattern(client, pattern, level, out=out)
    except ContextNotFoundError:
        out.hint('set.wildcard', 'error', example=f"{pattern}*")
        raise

    out.emit(1, "  [command] set {n} context(s) to {level_name}",
             channel='command', n=len(changed), level_name=args.level)
    return Result.OK
