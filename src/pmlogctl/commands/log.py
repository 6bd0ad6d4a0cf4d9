"""pmlogctl log - emit a plain log record on a context.

    pmlogctl log ui warning "disk almost full"
    pmlogctl log "hello"          # global context, notice level
"""

import argparse

from pmlogctl.commands import (
    LOG_ACTION, call_registry, lookup_context, parse_emit_level,
)
from pmlogctl.errors import ParamError, Result
from pmlogctl.labels import LEVEL_NOTICE
from pmlogctl.lib.help_lib import HelpContent
from pmlogctl.registry import GLOBAL_CONTEXT_NAME, ContextRegistryClient

USAGE = [
    HelpContent(id="cmd.log", command="log <context> <level> <message>",
                description="log a message", priority=30),
]


def register(subparsers, parents):
    """Register the 'log' subcommand."""
    p = subparsers.add_parser(
        "log",
        parents=parents,
        help="Log a message",
        description=(
            "Log a message on a context at a level. With a single argument\n"
            "the message is logged on the global context at 'notice'."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("context", nargs="?", metavar="<context>")
    p.add_argument("level", nargs="?", metavar="<level>")
    p.add_argument("message", nargs="?", metavar="<message>")
    p.set_defaults(func=run)


def run(args, out, registry):
    """Execute the log command."""
    client = ContextRegistryClient(registry, out)

    if args.context is not None and args.level is None and args.message is None:
        # One argument: it is the message
        handle = client.find(GLOBAL_CONTEXT_NAME)
        level = LEVEL_NOTICE
        message = args.context
    else:
        if args.context is None:
            raise ParamError("Context not specified.")
        handle = lookup_context(client, args.context)
        if args.level is None:
            raise ParamError("Level not specified.")
        level = parse_emit_level(args.level)
        if args.message is None:
            raise ParamError("Message not specified.")
        message = args.message

    call_registry(LOG_ACTION, registry.print_message, handle, level, message)
    return Result.OK
