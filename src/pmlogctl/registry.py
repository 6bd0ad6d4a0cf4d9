"""Logging context registry: the consumed interface and a client over it.

The registry itself (context storage, level filtering, sinks) belongs
to the logging library. ``Registry`` names the calls pmlogctl makes
into it; ``ContextRegistryClient`` is the read side the matcher, lister
and commands use.
"""

import abc
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from pmlogctl.errors import ContextNotFoundError, ErrCode, RegistryError
from pmlogctl.strbuf import BoundedBuffer


GLOBAL_CONTEXT_NAME = "<global>"
MAX_CONTEXTS = 128
MAX_CONTEXT_NAME_LEN = 31

# Printed on the global context at emerg to make the library reload
# its configuration.
RELOAD_MESSAGE = "!loglib loadconf"


class Registry(abc.ABC):
    """Calls consumed from the logging library.

    Handles are opaque; pmlogctl never creates or frees a context.
    Every method raises RegistryError on failure.
    """

    max_contexts = MAX_CONTEXTS
    max_name_len = MAX_CONTEXT_NAME_LEN

    @abc.abstractmethod
    def num_contexts(self) -> int:
        """Total number of registered contexts."""

    @abc.abstractmethod
    def context_at(self, index: int) -> Any:
        """Handle of the context at ``index`` (0-based)."""

    @abc.abstractmethod
    def context_name(self, handle: Any) -> str:
        """Name of a context."""

    @abc.abstractmethod
    def context_level(self, handle: Any) -> int:
        """Currently enabled level of a context."""

    @abc.abstractmethod
    def find_context(self, name: str) -> Any:
        """Handle for an exact name; CONTEXT_NOT_FOUND if absent."""

    @abc.abstractmethod
    def get_context(self, name: str) -> Any:
        """Handle for ``name``, creating the context if needed."""

    @abc.abstractmethod
    def set_context_level(self, handle: Any, level: int) -> None:
        """Change a context's enabled level."""

    @abc.abstractmethod
    def print_message(self, handle: Any, level: int, text: str) -> None:
        """Emit a plain log record."""

    @abc.abstractmethod
    def log_string(self, handle: Any, level: int, msg_id: Optional[str],
                   kv: Optional[str], text: Optional[str]) -> None:
        """Emit a record with message ID, structured data and free text."""


@dataclass(frozen=True)
class ContextInfo:
    """One captured (handle, name) pair."""
    handle: Any
    name: str


class ContextRegistryClient:
    """Read access to a Registry by count and index.

    Args:
        registry: The Registry to query.
        out: Optional OutputManager for 'registry' channel diagnostics.
    """

    def __init__(self, registry: Registry, out=None):
        self.registry = registry
        self.out = out

    def _debug(self, level, message, **kwargs):
        if self.out is not None:
            self.out.emit(level, message, channel='registry', **kwargs)

    @property
    def max_contexts(self) -> int:
        return self.registry.max_contexts

    def count(self) -> int:
        """Number of registered contexts.

        Raises:
            RegistryError: REGISTRY_UNAVAILABLE if the query fails or
                reports no contexts at all.
        """
        try:
            n = self.registry.num_contexts()
        except RegistryError as e:
            raise RegistryError(ErrCode.REGISTRY_UNAVAILABLE,
                                detail=e.code.description) from e
        self._debug(2, "  [registry] {n} contexts registered", n=n)
        if n <= 0:
            raise RegistryError(ErrCode.REGISTRY_UNAVAILABLE,
                                detail=f"registry reported {n} contexts")
        return n

    def fetch(self, index: int) -> ContextInfo:
        """Handle and bounded name of the context at ``index``."""
        handle = self.registry.context_at(index)
        raw = self.registry.context_name(handle)
        name = BoundedBuffer(self.registry.max_name_len)
        if not name.copy(raw):
            self._debug(1, "  [registry] name truncated: {raw!r} -> {name!r}",
                        raw=raw, name=name.value)
        self._debug(3, "  [registry] #{i} {name}", i=index, name=name.value)
        return ContextInfo(handle, name.value)

    def level(self, handle: Any) -> int:
        return self.registry.context_level(handle)

    def entries(self) -> Iterator[Tuple[Any, str, int]]:
        """Yield (handle, name, level) for every registered context."""
        for i in range(self.count()):
            info = self.fetch(i)
            yield info.handle, info.name, self.level(info.handle)

    def find(self, name: str) -> Any:
        """Handle for an exact name.

        Raises:
            ContextNotFoundError: If no context has that name.
        """
        try:
            return self.registry.find_context(name)
        except RegistryError as e:
            if e.code == ErrCode.CONTEXT_NOT_FOUND:
                raise ContextNotFoundError(name) from e
            raise

    def exists(self, name: str) -> bool:
        try:
            self.find(name)
        except ContextNotFoundError:
            return False
        return True
