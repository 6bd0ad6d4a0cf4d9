"""pmlogctl logkv - emit a record with a message ID and structured data.

    pmlogctl logkv ui err UI_CRASH pid=42 'user="alice"' "window died"
    pmlogctl logkv ui debug "free text only at debug"

Everything between the message ID and the last argument is a
``key=value`` pair; the last argument is the free-text message. At
debug level the record carries only free text.
"""

import argparse

from pmlogctl.commands import (
    LOG_ACTION, call_registry, lookup_context, parse_emit_level,
)
from pmlogctl.errors import KVParseError, ParamError, Result
from pmlogctl.kv import KV_CAPACITY, encode_kv
from pmlogctl.labels import LEVEL_DEBUG
from pmlogctl.lib.help_lib import HelpContent
from pmlogctl.registry import ContextRegistryClient

USAGE = [
    HelpContent(
        id="cmd.logkv",
        command="logkv <context> <level> <msgID> <key1>=<value1> ... <message>",
        description=(
            "log a message include msgID and key-value pairs\n"
            "If you want value be a string, use quoting => <key>=<\\\"value\\\">\n"
            "Debug level message takes only freetext. msgID and key-value "
            "pairs are not needed"
        ),
        priority=40,
    ),
]

MIN_PARAMS = 3


def register(subparsers, parents):
    """Register the 'logkv' subcommand."""
    p = subparsers.add_parser(
        "logkv",
        parents=parents,
        help="Log a message with message ID and key-value pairs",
        description=(
            "Log a record carrying a message ID, a structured-data object\n"
            "built from key=value arguments, and a free-text message.\n"
            "Values are inserted verbatim: quote string values yourself."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("params", nargs=argparse.REMAINDER,
                   metavar="<context> <level> ...")
    p.set_defaults(func=run)


def split_params(params, level):
    """Split the arguments after the level into (msg_id, kv_tokens, message).

    At debug there is no message ID and no data: one argument, the
    message. Otherwise the first is the message ID, the last (if any
    follow it) the message, and the ones in between key=value pairs.
    """
    if level == LEVEL_DEBUG:
        if len(params) > 1:
            raise ParamError(f"Invalid parameter '{params[1]}'.")
        return None, None, params[0] if params else None

    msg_id, rest = params[0], params[1:]
    if not rest:
        return msg_id, [], None
    return msg_id, rest[:-1], rest[-1]


def run(args, out, registry):
    """Execute the logkv command."""
    params = list(args.params or [])
    if len(params) < MIN_PARAMS:
        raise ParamError(f"Minimum {MIN_PARAMS} parameters are expected. "
                         "Please see help for more details.")

    client = ContextRegistryClient(registry, out)
    handle = lookup_context(client, params[0])
    level = parse_emit_level(params[1])
    msg_id, tokens, message = split_params(params[2:], level)

    kv = None
    if level != LEVEL_DEBUG:
        capacity = getattr(args, "kv_capacity", None) or KV_CAPACITY
        try:
            kv = encode_kv(tokens, capacity=capacity, out=out)
        except KVParseError:
            out.hint('logkv.quoting', 'error', example='key=\\"value\\"')
            raise
        out.emit(1, "  [command] logkv {msg_id} {kv}",
                 channel='command', msg_id=msg_id, kv=kv)

    call_registry(LOG_ACTION, registry.log_string,
                  handle, level, msg_id, kv, message)
    return Result.OK
