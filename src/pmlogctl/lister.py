"""Filtered, sorted snapshots of the context registry.

list_contexts() reads every context once, keeps the ones the pattern
selects, and sorts them by name ignoring ASCII case. It never changes
a context, so calling it twice in a row returns the same sequence.
"""

from typing import Iterator, List

from pmlogctl.errors import ErrCode, RegistryError, SnapshotCapacityError
from pmlogctl.matcher import matches
from pmlogctl.registry import ContextInfo

LIST_ACTION = "getting contexts info"

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz",
)


def casefold_key(name):
    """Sort key ordering names the way strcasecmp() does.

    Only ASCII letters are folded. The raw name breaks ties so that
    "Net" and "net" always come out in the same order.
    """
    return name.translate(_ASCII_FOLD), name


class ContextSnapshot:
    """Bounded sequence of ContextInfo captured at one point in time."""

    def __init__(self, capacity):
        self.capacity = capacity
        self._entries: List[ContextInfo] = []

    def add(self, info: ContextInfo) -> None:
        if len(self._entries) >= self.capacity:
            raise SnapshotCapacityError(
                ErrCode.TOO_MANY_CONTEXTS,
                detail=f"more than {self.capacity} contexts")
        self._entries.append(info)

    def sort(self) -> None:
        self._entries.sort(key=lambda info: casefold_key(info.name))

    @property
    def names(self) -> List[str]:
        return [info.name for info in self._entries]

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[ContextInfo]:
        return iter(self._entries)

    def __getitem__(self, index) -> ContextInfo:
        return self._entries[index]

    def __repr__(self):
        return f"ContextSnapshot({self.names!r})"


def list_contexts(client, pattern=None, out=None) -> ContextSnapshot:
    """Snapshot the contexts selected by ``pattern``, sorted by name.

    Args:
        client: ContextRegistryClient to read from.
        pattern: Match pattern (alias already resolved), None for all.
        out: Optional OutputManager for 'match' channel diagnostics.

    Returns:
        ContextSnapshot, possibly empty.

    Raises:
        RegistryError: The count query or any per-entry read failed.
        SnapshotCapacityError: The registry reports, or the pattern
            selects, more contexts than a snapshot holds.
    """
    snapshot = ContextSnapshot(client.max_contexts)
    try:
        n = client.count()
        if n > snapshot.capacity:
            raise SnapshotCapacityError(
                ErrCode.TOO_MANY_CONTEXTS,
                detail=f"registry reports {n}, limit is {snapshot.capacity}")

        for i in range(n):
            info = client.fetch(i)
            if not matches(info.name, pattern):
                continue
            snapshot.add(info)
    except RegistryError as e:
        if e.action is not None:
            raise
        raise e.during(LIST_ACTION) from e

    snapshot.sort()
    if out is not None:
        out.emit(2, "  [match] {count} of {n} contexts match {pattern!r}",
                 channel='match', count=len(snapshot), n=n, pattern=pattern)
    return snapshot
