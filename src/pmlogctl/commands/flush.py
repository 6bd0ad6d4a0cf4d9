"""pmlogctl flush - ask the logging library to flush its ring buffers."""

from pmlogctl.commands import LOG_ACTION, call_registry
from pmlogctl.errors import Result
from pmlogctl.kv import EMPTY_OBJECT
from pmlogctl.labels import LEVEL_INFO
from pmlogctl.lib.help_lib import HelpContent

USAGE = [
    HelpContent(id="cmd.flush", command="flush",
                description="flush all ring buffers", priority=25),
]

FLUSH_CONTEXT = "pmlogctl"
FLUSH_MSG_ID = "FLUSH_BUFFER"
FLUSH_TEXT = "Manually Flushing Buffers"


def register(subparsers, parents):
    """Register the 'flush' subcommand."""
    p = subparsers.add_parser(
        "flush",
        parents=parents,
        help="Flush all ring buffers",
        description="Log a FLUSH_BUFFER record, which flushes the ring buffers.",
    )
    p.set_defaults(func=run)


def run(args, out, registry):
    """Execute the flush command."""
    handle = call_registry(f"getting context {FLUSH_CONTEXT}",
                           registry.get_context, FLUSH_CONTEXT)
    call_registry(LOG_ACTION, registry.log_string, handle, LEVEL_INFO,
                  FLUSH_MSG_ID, EMPTY_OBJECT, FLUSH_TEXT)
    return Result.OK
