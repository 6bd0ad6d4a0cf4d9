"""
log_lib: THAC0 verbosity system with named channels.

Public API:
    OutputManager       reporter passed to every command
    init_output         build an OutputManager from CLI options
    Hint                hint dataclass
    register_hint       register a hint
    register_hints      register multiple hints
    get_hint            look up hint by ID
    ChannelConfig       channel configuration
    parse_channel_spec  parse CLI channel spec
    KNOWN_CHANNELS      set of recognized channel names
"""

from .manager import OutputManager, init_output, PREFIX
from .hints import (
    Hint, register_hint, register_hints, get_hint,
)
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS, format_channel_list,
)

__all__ = [
    'OutputManager', 'init_output', 'PREFIX',
    'Hint', 'register_hint', 'register_hints', 'get_hint',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'CHANNEL_DESCRIPTIONS', 'OPT_IN_CHANNELS', 'format_channel_list',
]
