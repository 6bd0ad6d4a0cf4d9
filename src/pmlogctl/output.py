"""Output formatting for pmlogctl commands.

Formats the user-visible lines and routes them through the
OutputManager each command receives. Also re-exports the log_lib
public API so commands have one place to import from.
"""

from pmlogctl.errors import LogCtlError, Result
from pmlogctl.labels import level_str
from pmlogctl.lib.log_lib import (                  # noqa: F401
    OutputManager, init_output,
    Hint, register_hint, register_hints, get_hint,
)

UNKNOWN_LEVEL = "Unknown"


def format_context(name, level):
    """``Context 'ui' = err``; unknown codes read as Unknown."""
    return f"Context '{name}' = {level_str(level) or UNKNOWN_LEVEL}"


def show_context(out, name, level):
    out.info(format_context(name, level))


def report_error(out, err: LogCtlError) -> Result:
    """Print an error and any follow-up hint; return its Result."""
    out.error(str(err))
    if err.result is Result.PARAM_ERR:
        out.hint('cli.help', 'error')
    return err.result
