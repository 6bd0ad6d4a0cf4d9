"""pmlogctl klog - write a message to the kernel log.

    pmlogctl klog "resuming"               # <5>resuming
    pmlogctl klog -p err -f user "oops"    # <11>oops
    pmlogctl klog -p none "raw line"       # no priority prefix
"""

import argparse

from pmlogctl.errors import ErrCode, ParamError, RegistryError, Result
from pmlogctl.labels import (
    LEVEL_NOTICE, facility_str, level_str, parse_facility, parse_level,
)
from pmlogctl.lib.help_lib import HelpContent

USAGE = [
    HelpContent(id="cmd.klog", command="klog [-p <level>] [-f <facility>] <msg>",
                description="log a kernel message", priority=45),
]

KMSG_PATH = "/dev/kmsg"


def register(subparsers, parents):
    """Register the 'klog' subcommand."""
    p = subparsers.add_parser(
        "klog",
        parents=parents,
        help="Log a kernel message",
        description=(
            "Write a message to the kernel log device, prefixed with its\n"
            "syslog priority. Level 'none' writes the message unprefixed."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-p", dest="level", metavar="<level>", default=None,
                   help="Level name (default: notice)")
    p.add_argument("-f", dest="facility", metavar="<facility>", default=None,
                   help="Facility name (e.g. user, daemon, local0)")
    p.add_argument("message", nargs="?", metavar="<msg>")
    p.set_defaults(func=run)


def format_kmsg(message, level=LEVEL_NOTICE, facility=0):
    """Build the kernel log line: ``<priority>message\\n``.

    A negative level means no priority prefix.

    >>> format_kmsg("hi", 3, 8)
    '<11>hi\\n'
    """
    if level < 0:
        return f"{message}\n"
    return f"<{facility | level}>{message}\n"


def write_kmsg(line, path=KMSG_PATH):
    """Write one line to the kernel log device."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        raise RegistryError(ErrCode.IO_ERROR, action=f"writing {path}",
                            detail=e.strerror or str(e)) from e


def run(args, out, registry):
    """Execute the klog command."""
    level = LEVEL_NOTICE if args.level is None else parse_level(args.level)
    facility = 0 if args.facility is None else parse_facility(args.facility)
    if args.message is None:
        raise ParamError("Message not specified.")

    path = getattr(args, "kmsg_path", None) or KMSG_PATH
    line = format_kmsg(args.message, level, facility)
    out.emit(1, "  [command] klog {facility_name}.{level_name} -> {path}: "
             "{line!r}",
             channel='command', facility_name=facility_str(facility),
             level_name=level_str(level), path=path, line=line)
    write_kmsg(line, path)
    return Result.OK
