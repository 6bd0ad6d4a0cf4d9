"""In-process registry backends.

The real context registry lives in the native logging library. These
implementations of ``Registry`` let pmlogctl run without it:

    MemoryRegistry   contexts and emitted records held in memory
    FileRegistry     the same, with contexts kept in a JSON state file
                     and records appended to a text log file
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pmlogctl.errors import ErrCode, RegistryError
from pmlogctl.labels import LEVEL_EMERG, LEVEL_INFO, level_str
from pmlogctl.registry import (
    GLOBAL_CONTEXT_NAME, MAX_CONTEXTS, RELOAD_MESSAGE, Registry,
)


@dataclass
class Context:
    """A registered logging context (the backend's handle type)."""
    name: str
    enabled_level: int = LEVEL_INFO


@dataclass
class LogRecord:
    """One emitted record."""
    context: str
    level: int
    text: Optional[str]
    msg_id: Optional[str] = None
    kv: Optional[str] = None
    created: datetime = field(default_factory=datetime.now)

    def format(self):
        parts = [self.created.isoformat(timespec="seconds"),
                 self.context, level_str(self.level) or str(self.level)]
        if self.msg_id is not None:
            parts.append(self.msg_id)
        if self.kv is not None:
            parts.append(self.kv)
        if self.text is not None:
            parts.append(self.text)
        return " ".join(parts)


class MemoryRegistry(Registry):
    """Registry kept entirely in memory.

    Contexts are indexed in registration order. The global context is
    always registered first.

    Args:
        contexts: Optional mapping of name -> level to pre-register.
        default_level: Level given to contexts created by get_context().
        max_contexts: Upper bound on registered contexts.
    """

    def __init__(self, contexts=None, default_level=LEVEL_INFO,
                 max_contexts=MAX_CONTEXTS):
        self.default_level = default_level
        self.max_contexts = max_contexts
        self.records: List[LogRecord] = []
        self._contexts: List[Context] = []
        self._reset(contexts or {})

    def _reset(self, contexts):
        self._contexts = [Context(GLOBAL_CONTEXT_NAME, self.default_level)]
        for name, level in contexts.items():
            if name == GLOBAL_CONTEXT_NAME:
                self._contexts[0].enabled_level = level
            else:
                self._add(name, level)

    def _add(self, name, level):
        if len(self._contexts) >= self.max_contexts:
            raise RegistryError(ErrCode.TOO_MANY_CONTEXTS, detail=name)
        ctx = Context(name, level)
        self._contexts.append(ctx)
        return ctx

    def _check(self, handle):
        if not any(c is handle for c in self._contexts):
            raise RegistryError(ErrCode.INVALID_PARAMETER,
                                detail="unknown context handle")
        return handle

    # -- Registry ----------------------------------------------------------

    def num_contexts(self):
        return len(self._contexts)

    def context_at(self, index):
        if not 0 <= index < len(self._contexts):
            raise RegistryError(ErrCode.INVALID_PARAMETER,
                                detail=f"context index {index}")
        return self._contexts[index]

    def context_name(self, handle):
        return self._check(handle).name

    def context_level(self, handle):
        return self._check(handle).enabled_level

    def find_context(self, name):
        for ctx in self._contexts:
            if ctx.name == name:
                return ctx
        raise RegistryError(ErrCode.CONTEXT_NOT_FOUND, detail=name)

    def get_context(self, name):
        if not name:
            raise RegistryError(ErrCode.INVALID_PARAMETER,
                                detail="empty context name")
        try:
            return self.find_context(name)
        except RegistryError:
            return self._add(name, self.default_level)

    def set_context_level(self, handle, level):
        if level_str(level) is None:
            raise RegistryError(ErrCode.INVALID_LEVEL, detail=str(level))
        self._check(handle).enabled_level = level

    def print_message(self, handle, level, text):
        self._emit(LogRecord(self._check(handle).name, level, text))

    def log_string(self, handle, level, msg_id, kv, text):
        self._emit(LogRecord(self._check(handle).name, level, text,
                             msg_id=msg_id, kv=kv))

    def _emit(self, record):
        self.records.append(record)

    # -- Convenience -------------------------------------------------------

    def snapshot(self):
        """Return {name: level} in registration order."""
        return {c.name: c.enabled_level for c in self._contexts}


class FileRegistry(MemoryRegistry):
    """MemoryRegistry whose contexts live in a JSON state file.

    The state file holds ``{"contexts": {"name": level, ...}}``. It is
    written after every change to the set of contexts or their levels.
    Emitted records are appended, one per line, to ``log_path``.
    """

    def __init__(self, state_path, log_path=None, default_level=LEVEL_INFO,
                 max_contexts=MAX_CONTEXTS):
        self.state_path = Path(state_path)
        self.log_path = Path(log_path) if log_path else None
        super().__init__(default_level=default_level,
                         max_contexts=max_contexts)
        self.reload()

    def reload(self):
        """Re-read the state file.

        A missing or unparseable file reads as empty. Valid JSON whose
        ``contexts`` is not a ``{name: level}`` object raises RegistryError.
        """
        try:
            with open(self.state_path, encoding="utf-8") as f:
                data = json.load(f)
        except (FileNotFoundError, NotADirectoryError, json.JSONDecodeError):
            data = {}
        contexts = data.get("contexts", {}) if isinstance(data, dict) else {}
        try:
            levels = {name: int(level) for name, level in contexts.items()}
        except (AttributeError, TypeError, ValueError) as e:
            raise RegistryError(ErrCode.IO_ERROR,
                                action=f"reading {self.state_path}",
                                detail=f"malformed contexts ({e})") from e
        self._reset(levels)

    def save(self):
        try:
            self.state_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.state_path, "w", encoding="utf-8") as f:
                json.dump({"contexts": self.snapshot()}, f, indent=2)
                f.write("\n")
        except OSError as e:
            raise RegistryError(ErrCode.IO_ERROR, detail=str(e)) from e

    def get_context(self, name):
        before = self.num_contexts()
        handle = super().get_context(name)
        if self.num_contexts() != before:
            self.save()
        return handle

    def set_context_level(self, handle, level):
        super().set_context_level(handle, level)
        self.save()

    def print_message(self, handle, level, text):
        super().print_message(handle, level, text)
        if (handle.name == GLOBAL_CONTEXT_NAME and level == LEVEL_EMERG
                and text == RELOAD_MESSAGE):
            self.reload()

    def _emit(self, record):
        super()._emit(record)
        if self.log_path is None:
            return
        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(record.format() + "\n")
        except OSError as e:
            raise RegistryError(ErrCode.IO_ERROR, detail=str(e)) from e
