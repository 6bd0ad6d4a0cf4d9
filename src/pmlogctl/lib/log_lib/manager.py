"""
OutputManager: the reporter every pmlogctl command writes through.

The emit rule is: message shows when message.level <= threshold.
The threshold is either a per-channel override or the global verbosity.

THAC0 axis:
    <-- quieter ------------ default ------------ louder -->
    -4    -3     -2       -1       0      1       2      3
    wall  errors warnings silent   info   detail  steps  debug

    -v increments, -Q decrements, -s caps the result at -1.

Streams:
    info()   -> stdout (the command's actual output)
    error()  -> stderr
    emit()   -> stderr (diagnostics)
    hint()   -> stderr

cli.main() builds one with init_output() and passes it down to every
command; there is no module-level instance.
"""

import sys
from typing import Any, Dict, Set, TextIO

from . import channels as _channels
from .hints import get_hint
from .levels import NOTHING, ERROR, INFO, SILENT

PREFIX = "pmlogctl: "


class OutputManager:
    """Verbosity-gated reporter with per-channel overrides.

    Usage::

        out = OutputManager(verbosity=1)
        out.info("Context 'ui' = err")
        out.emit(2, "snapshot holds {n} contexts", channel='match', n=3)
        out.hint('cli.help', 'error')
        out.error("Context 'x' not found.")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
        err_file: TextIO = None,
        silent: bool = False,
        prefix: str = PREFIX,
    ):
        if silent:
            verbosity = min(verbosity, SILENT)
        self.verbosity = verbosity
        self.silent = silent
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stdout
        self.err_file = err_file if err_file is not None else sys.stderr
        self.prefix = prefix
        self._shown_hints: Set[str] = set()

    def threshold(self, channel: str) -> int:
        """Return the effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def _allowed(self, level: int, channel: str) -> bool:
        threshold = self.threshold(channel)
        if threshold <= NOTHING:
            return False
        return level <= threshold

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit a diagnostic line to stderr if level <= threshold.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (uses str.format with kwargs)
            channel: Output channel name
            **kwargs: Values for template placeholders
        """
        if not self._allowed(level, channel):
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.err_file)

    def info(self, message: str, plain: bool = False) -> None:
        """Print informational output on stdout (suppressed by -s).

        ``plain`` skips the prefix, for multi-line text like usage.
        """
        if not self._allowed(INFO, 'general'):
            return
        prefix = "" if plain else self.prefix
        print(f"{prefix}{message}", file=self.file)

    def error(self, message: str) -> None:
        """Print an error on stderr (level -3, shown unless at hard wall)."""
        if not self._allowed(ERROR, 'error'):
            return
        print(f"{self.prefix}{message}", file=self.err_file)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a hint if relevant for context, level, and not yet shown."""
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return
        if not self._allowed(h.min_level, 'hint'):
            return
        text = h.message.format(**kwargs) if kwargs else h.message
        print(text, file=self.err_file)
        self._shown_hints.add(hint_id)

    def channel_active(self, channel: str) -> bool:
        """True if a level-0 message on this channel would be shown."""
        return self._allowed(0, channel)

    @property
    def shown_hints(self) -> Set[str]:
        """Set of hint IDs that have been displayed this session."""
        return self._shown_hints.copy()


def init_output(verbosity: int = 0, silent: bool = False,
                channels: list = None, file: TextIO = None,
                err_file: TextIO = None) -> OutputManager:
    """Build an OutputManager from parsed CLI options.

    Args:
        verbosity: THAC0 verbosity (-v count minus -Q count)
        silent: The -s flag
        channels: Channel spec strings (e.g., ['match:2', 'registry'])
        file: Stream for informational output (default stdout)
        err_file: Stream for errors and diagnostics (default stderr)

    Returns:
        A new OutputManager
    """
    # Opt-in channels stay off unless named explicitly
    channel_overrides = {ch: SILENT for ch in _channels.OPT_IN_CHANNELS}
    for spec in channels or []:
        cfg = _channels.parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    return OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
        err_file=err_file,
        silent=silent,
    )
