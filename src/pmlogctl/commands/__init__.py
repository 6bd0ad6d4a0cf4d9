"""pmlogctl subcommands.

Each module exports:
  USAGE                       list of HelpContent usage lines
  register(subparsers, parents)  add itself to the subparser
  run(args, out, registry)    execute, returning a Result

Helpers shared by the commands that emit records live here.
"""

from pmlogctl.errors import ContextNotFoundError, ParamError, RegistryError
from pmlogctl.labels import LEVEL_NONE, parse_level
from pmlogctl.matcher import resolve_alias

LOG_ACTION = "logging"


def lookup_context(client, token):
    """Resolve a context token (``.`` allowed) to a handle for emitting.

    Raises:
        ParamError: No context has that name.
    """
    try:
        return client.find(resolve_alias(token))
    except ContextNotFoundError:
        raise ParamError(f"Invalid context '{token}'.") from None


def parse_emit_level(token):
    """Like parse_level(), but 'none' is not a level to log at."""
    level = parse_level(token)
    if level == LEVEL_NONE:
        raise ParamError(f"Invalid level '{token}'.")
    return level


def call_registry(action, call, *args):
    """Call into the registry, labelling a failure with ``action``."""
    try:
        return call(*args)
    except RegistryError as e:
        raise e.during(action) from e
