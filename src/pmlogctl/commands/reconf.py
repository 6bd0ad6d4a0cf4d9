"""pmlogctl reconf - make the logging library reload its configuration."""

from pmlogctl.commands import LOG_ACTION, call_registry
from pmlogctl.errors import Result
from pmlogctl.labels import LEVEL_EMERG
from pmlogctl.lib.help_lib import HelpContent
from pmlogctl.registry import (
    GLOBAL_CONTEXT_NAME, RELOAD_MESSAGE, ContextRegistryClient,
)

USAGE = [
    HelpContent(id="cmd.reconf", command="reconf",
                description="re-load lib options from conf", priority=70),
]


def register(subparsers, parents):
    """Register the 'reconf' subcommand."""
    p = subparsers.add_parser(
        "reconf",
        parents=parents,
        help="Re-load lib options from conf",
        description="Ask the logging library to reload its configuration.",
    )
    p.set_defaults(func=run)


def run(args, out, registry):
    """Execute the reconf command."""
    client = ContextRegistryClient(registry, out)
    handle = client.find(GLOBAL_CONTEXT_NAME)
    call_registry(LOG_ACTION, registry.print_message,
                  handle, LEVEL_EMERG, RELOAD_MESSAGE)
    return Result.OK
