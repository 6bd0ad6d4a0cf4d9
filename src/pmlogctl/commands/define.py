"""pmlogctl def - define a new logging context."""

import argparse

from pmlogctl.commands import call_registry
from pmlogctl.errors import ContextExistsError, ParamError, Result
from pmlogctl.labels import parse_level
from pmlogctl.lib.help_lib import HelpContent
from pmlogctl.matcher import resolve_alias
from pmlogctl.mutator import SET_ACTION
from pmlogctl.registry import ContextRegistryClient

USAGE = [
    HelpContent(id="cmd.def", command="def <context> [<level>]",
                description="define logging context", priority=20),
]

DEFINE_ACTION = "defining context"


def register(subparsers, parents):
    """Register the 'def' subcommand."""
    p = subparsers.add_parser(
        "def",
        parents=parents,
        help="Define logging context",
        description=(
            "Define a logging context. Without a level it gets the\n"
            "registry's default. Defining an existing context is an error."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("context", nargs="?", metavar="<context>")
    p.add_argument("level", nargs="?", metavar="<level>")
    p.set_defaults(func=run)


def run(args, out, registry):
    """Execute the def command."""
    if args.context is None:
        raise ParamError("Context not specified.")

    name = resolve_alias(args.context)
    client = ContextRegistryClient(registry, out)
    if client.exists(name):
        raise ContextExistsError(name)

    level = None if args.level is None else parse_level(args.level)

    handle = call_registry(DEFINE_ACTION, registry.get_context, name)
    if level is not None:
        call_registry(SET_ACTION, registry.set_context_level, handle, level)

    out.emit(1, "  [command] defined {name!r}", channel='command', name=name)
    return Result.OK
