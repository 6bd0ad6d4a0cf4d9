"""Symbolic name <-> integer code tables for severities and facilities.

Lookups scan the pairs in definition order, so if two labels share a
code the first one is what ``label()`` returns.
"""

from typing import Iterable, Iterator, Optional, Tuple

from pmlogctl.errors import ParamError


class LabelTable:
    """Ordered, bidirectional label/code mapping."""

    def __init__(self, pairs: Iterable[Tuple[str, int]]):
        self._pairs = tuple(pairs)

    def label(self, code: int) -> Optional[str]:
        """Return the first label for ``code``, or None."""
        for label, n in self._pairs:
            if n == code:
                return label
        return None

    def code(self, label: str) -> Optional[int]:
        """Return the code for an exact (case-sensitive) label, or None."""
        for name, n in self._pairs:
            if name == label:
                return n
        return None

    def labels(self) -> list:
        return [label for label, _ in self._pairs]

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, label) -> bool:
        return self.code(label) is not None


# ---------------------------------------------------------------------------
# Severity levels
# ---------------------------------------------------------------------------
LEVEL_NONE = -1
LEVEL_EMERG = 0
LEVEL_ALERT = 1
LEVEL_CRIT = 2
LEVEL_ERR = 3
LEVEL_WARNING = 4
LEVEL_NOTICE = 5
LEVEL_INFO = 6
LEVEL_DEBUG = 7

LEVELS = LabelTable([
    ("none", LEVEL_NONE),
    ("emerg", LEVEL_EMERG),
    ("alert", LEVEL_ALERT),
    ("crit", LEVEL_CRIT),
    ("err", LEVEL_ERR),
    ("warning", LEVEL_WARNING),
    ("notice", LEVEL_NOTICE),
    ("info", LEVEL_INFO),
    ("debug", LEVEL_DEBUG),
])

# ---------------------------------------------------------------------------
# Syslog facilities (already shifted, as in <syslog.h>)
# ---------------------------------------------------------------------------
FACILITIES = LabelTable([
    ("kern", 0 << 3),
    ("user", 1 << 3),
    ("mail", 2 << 3),
    ("daemon", 3 << 3),
    ("auth", 4 << 3),
    ("syslog", 5 << 3),
    ("lpr", 6 << 3),
    ("news", 7 << 3),
    ("uucp", 8 << 3),
    ("cron", 9 << 3),
    ("authpriv", 10 << 3),
    ("ftp", 11 << 3),
] + [(f"local{i}", (16 + i) << 3) for i in range(8)])


def parse_level(s):
    """Parse a level name: "err" => LEVEL_ERR. ParamError if unknown."""
    n = LEVELS.code(s)
    if n is None:
        raise ParamError(f"Invalid level '{s}'.")
    return n


def parse_facility(s):
    """Parse a facility name: "user" => 8. ParamError if unknown."""
    n = FACILITIES.code(s)
    if n is None:
        raise ParamError(f"Invalid facility '{s}'.")
    return n


def level_str(level):
    """LEVEL_ERR => "err", etc. None if not recognized."""
    return LEVELS.label(level)


def facility_str(facility):
    """8 => "user", etc. None if not recognized."""
    return FACILITIES.label(facility)
