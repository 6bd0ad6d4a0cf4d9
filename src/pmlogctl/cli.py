"""Main CLI entry point for pmlogctl.

Two-pass argument parsing:
  1. First pass: global flags, which must precede the command word,
     then the command word and everything after it, untouched
  2. Second pass: the command word and its arguments are parsed by
     that command's own sub-parser

  pmlogctl -s set 'net*' debug     # -s applies to the whole run
  pmlogctl -v -s show 'net*'       # flags combine, all before the command

Subcommands self-register via the register(subparsers, parents) convention.
"""

import argparse
import sys

from pmlogctl._version import BASE_VERSION, VERSION
from pmlogctl.errors import (
    HelpRequested, LogCtlError, ParamError, Result, exit_code,
)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports through LogCtlError instead of exiting."""

    def error(self, message):
        raise ParamError(message[:1].upper() + message[1:] + ".")

    def print_help(self, file=None):
        raise HelpRequested(self.format_help())


# ---------------------------------------------------------------------------
# Global flags (must precede the command word)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--silent": {"aliases": ["-s"], "action": "store_true", "default": False,
                 "help": "Disable stdout messages (errors still print)"},
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=nothing)"},
    "--channel": {"nargs": "?", "action": "append",
                  "metavar": "CHANNEL[:LEVEL]",
                  "help": "Show a diagnostic channel (bare --channel lists them)"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.pmlogctl/config.json)"},
    "--state-file": {"metavar": "PATH", "default": None,
                     "help": "Context state file of the local registry"},
    "--help": {"aliases": ["-h", "-help"], "action": "store_true",
               "default": False, "help": "Show usage info"},
}


def _build_global_parser():
    """Parser for pass 1: global flags, command word, raw parameters."""
    parser = _ArgumentParser(prog="pmlogctl", add_help=False,
                             allow_abbrev=False)
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"pmlogctl {BASE_VERSION} ({VERSION})",
    )
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    parser.add_argument("command", nargs="?", metavar="COMMAND")
    parser.add_argument("params", nargs=argparse.REMAINDER, metavar="PARAM")
    return parser


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def discover_commands():
    """Import and return all command modules.

    Each module in pmlogctl.commands must export:
      USAGE - list of HelpContent usage lines
      register(subparsers, parents) - add itself to the subparser
      run(args, out, registry) - execute the command, returning a Result
    """
    from pmlogctl.commands import (
        define, flush, klog, log, logkv, reconf, set_level, show, usage,
    )
    return [usage, define, flush, log, logkv, klog, reconf, set_level, show]


def _build_command_parser(commands):
    """Parser for pass 2. Returns (parser, {command word: sub-parser})."""
    parser = _ArgumentParser(
        prog="pmlogctl",
        description="pmlogctl - logging context control",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # Let each command register itself
    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser, subparsers.choices


# ---------------------------------------------------------------------------
# Output, config and registry setup
# ---------------------------------------------------------------------------
def _init_output(global_args, stdout, stderr):
    """Build the reporter from the global flags."""
    from pmlogctl.lib.log_lib import init_output

    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.channel or []) if s is not None]
    try:
        return init_output(verbosity=verbosity, silent=global_args.silent,
                           channels=channels, file=stdout, err_file=stderr)
    except ValueError:
        raise ParamError(f"Invalid channel spec in {channels!r}.") from None


def _open_registry(args):
    """The local file-backed registry described by the resolved config."""
    from pmlogctl.backend import FileRegistry
    from pmlogctl.labels import parse_level

    return FileRegistry(
        args.state_file,
        args.log_file,
        default_level=parse_level(args.default_level),
        max_contexts=args.max_contexts,
    )


def _dispatch(global_args, commands, out, registry):
    from pmlogctl.commands.usage import usage_text
    from pmlogctl.config import resolve_config

    if global_args.help:
        raise HelpRequested(usage_text(commands))
    if global_args.command is None:
        raise ParamError("No command specified.")

    parser, choices = _build_command_parser(commands)
    if global_args.command not in choices:
        raise ParamError(f"Invalid command '{global_args.command}'")

    args = parser.parse_args([global_args.command] + global_args.params)

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args):
            setattr(args, key, value)

    for key, value in resolve_config(args, out=out).items():
        setattr(args, key, value)

    if registry is None:
        registry = _open_registry(args)

    out.emit(1, "  [command] {command} {params}",
             channel='command', command=args.command,
             params=global_args.params)
    return args.func(args, out, registry)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None, registry=None, stdout=None, stderr=None):
    """Main entry point for pmlogctl CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].
        registry: Registry to run against. None opens the local
            file-backed registry named by the config.
        stdout: Stream for informational output (default sys.stdout).
        stderr: Stream for errors and diagnostics (default sys.stderr).

    Returns:
        Exit code: 0 only when the command succeeded.
    """
    from pmlogctl.lib.log_lib import format_channel_list, init_output
    from pmlogctl.output import report_error
    import pmlogctl.hints  # noqa: F401  registers the pmlogctl hints

    if argv is None:
        argv = sys.argv[1:]

    commands = discover_commands()

    try:
        # Pass 1: global flags up to the command word
        global_args = _build_global_parser().parse_args(argv)
        out = _init_output(global_args, stdout, stderr)
    except LogCtlError as e:
        fallback = init_output(file=stdout, err_file=stderr)
        return exit_code(report_error(fallback, e))
    except SystemExit as e:
        # --version
        return e.code if isinstance(e.code, int) else 1

    # Handle bare --channel (list channels and exit)
    if global_args.channel and None in global_args.channel:
        out.info(format_channel_list(), plain=True)
        return 0

    # Pass 2: dispatch to the command
    try:
        result = _dispatch(global_args, commands, out, registry)
    except HelpRequested as e:
        out.info(e.text.rstrip("\n"), plain=True)
        result = Result.HELP
    except LogCtlError as e:
        result = report_error(out, e)
    except KeyboardInterrupt:
        out.error("Interrupted.")
        return 130

    return exit_code(result)


if __name__ == "__main__":
    sys.exit(main())
