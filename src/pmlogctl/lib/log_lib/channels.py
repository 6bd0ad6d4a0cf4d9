"""
Channel configuration and parsing for the THAC0 verbosity system.

Channels are named diagnostic categories. Each channel can carry its
own verbosity threshold that overrides the global level.

Channel spec syntax:
    CHANNEL[:LEVEL]

    Examples:
        match           # level 0
        registry:3      # every registry read
        encode:-4       # silence the encoder completely
"""

from dataclasses import dataclass


KNOWN_CHANNELS = {
    'registry',     # Registry queries (count, per-index reads)
    'match',        # Pattern matching and snapshot building
    'encode',       # Structured key=value encoding
    'config',       # Configuration resolution
    'command',      # Command dispatch
    'general',      # Informational output
    'hint',         # Hint messages
    'error',        # Error messages
}

CHANNEL_DESCRIPTIONS = {
    'registry': 'Registry queries and per-context reads',
    'match':    'Pattern matching and snapshot building',
    'encode':   'Structured key=value payload encoding',
    'config':   'Configuration loading and resolution',
    'command':  'Command dispatch',
    'general':  'Informational output',
    'hint':     'Contextual tips and suggestions',
    'error':    'Error messages',
}

# OFF by default; these get an override of -1 unless named explicitly.
OPT_IN_CHANNELS = {
    'registry',     # One line per enumerated context, noisy
}


@dataclass
class ChannelConfig:
    """Configuration for a single output channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse a ``CHANNEL[:LEVEL]`` string into a ChannelConfig.

    Raises:
        ValueError: If the level part is not an integer.
    """
    name, _, level = spec.partition(':')
    if level:
        return ChannelConfig(name=name, level=int(level))
    return ChannelConfig(name=name)


def format_channel_list() -> str:
    """Format the known channels for a bare ``--channel`` listing."""
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{max_name}}  {desc}{opt_in}")
    return "\n".join(lines)
