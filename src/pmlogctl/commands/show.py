"""pmlogctl show - list logging contexts and their levels.

    pmlogctl show              # every context, sorted by name
    pmlogctl show .            # the global context
    pmlogctl show 'net*'       # contexts whose name starts with "net"
"""

import argparse

from pmlogctl.commands import call_registry
from pmlogctl.errors import ContextNotFoundError, NoContextsMatchedError, Result
from pmlogctl.lib.help_lib import HelpContent
from pmlogctl.lister import list_contexts
from pmlogctl.matcher import is_wildcard, resolve_alias
from pmlogctl.output import show_context
from pmlogctl.registry import GLOBAL_CONTEXT_NAME, ContextRegistryClient

USAGE = [
    HelpContent(id="cmd.show", command="show [<context>]",
                description="show logging context(s)", priority=90),
]


def register(subparsers, parents):
    """Register the 'show' subcommand."""
    p = subparsers.add_parser(
        "show",
        parents=parents,
        help="Show logging context(s)",
        description=(
            "Show the active level of every logging context, or of the\n"
            "contexts matching a name. A trailing '*' matches by prefix."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("context", nargs="?", metavar="<context>",
                   help="Context name or prefix pattern ('.' = global)")
    p.set_defaults(func=run)


def run(args, out, registry):
    """Execute the show command."""
    pattern = None
    if args.context is not None:
        pattern = resolve_alias(args.context)
        if args.context == GLOBAL_CONTEXT_NAME:
            out.hint('context.global_alias', 'verbose', name=GLOBAL_CONTEXT_NAME)

    client = ContextRegistryClient(registry, out)
    snapshot = list_contexts(client, pattern, out=out)

    for info in snapshot:
        level = call_registry("getting context level", client.level, info.handle)
        show_context(out, info.name, level)

    if pattern is not None and len(snapshot) == 0:
        if is_wildcard(pattern):
            raise NoContextsMatchedError(pattern)
        raise ContextNotFoundError(pattern)

    return Result.OK
