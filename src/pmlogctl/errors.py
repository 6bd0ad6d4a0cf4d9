"""Error taxonomy and command results for pmlogctl.

Every failure a command can hit is a LogCtlError subclass. The class
decides which Result the dispatcher reports; the message is what the
user sees after the ``pmlogctl: `` prefix.
"""

from enum import Enum, IntEnum


class Result(Enum):
    """Outcome of one command."""
    OK = "ok"
    PARAM_ERR = "param_err"
    RUN_ERR = "run_err"
    HELP = "help"


EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def exit_code(result):
    """Map a Result to a process exit status (0 only for OK)."""
    return EXIT_SUCCESS if result is Result.OK else EXIT_FAILURE


class ErrCode(IntEnum):
    """Error codes reported by the logging registry."""
    NONE = 0
    UNKNOWN = 0x0001
    INVALID_PARAMETER = 0x0002
    CONTEXT_NOT_FOUND = 0x0003
    TOO_MANY_CONTEXTS = 0x0004
    REGISTRY_UNAVAILABLE = 0x0005
    INVALID_LEVEL = 0x0006
    IO_ERROR = 0x0007

    @property
    def description(self):
        return _DESCRIPTIONS.get(self, "Unknown error")


_DESCRIPTIONS = {
    ErrCode.NONE: "No error",
    ErrCode.UNKNOWN: "Unknown error",
    ErrCode.INVALID_PARAMETER: "Invalid parameter",
    ErrCode.CONTEXT_NOT_FOUND: "Context not found",
    ErrCode.TOO_MANY_CONTEXTS: "Too many contexts",
    ErrCode.REGISTRY_UNAVAILABLE: "Registry unavailable",
    ErrCode.INVALID_LEVEL: "Invalid level",
    ErrCode.IO_ERROR: "I/O error",
}


class LogCtlError(Exception):
    """Base class for every reported pmlogctl failure."""
    result = Result.RUN_ERR


class ParamError(LogCtlError):
    """Malformed or missing command-line parameters."""
    result = Result.PARAM_ERR


class HelpRequested(LogCtlError):
    """Usage text was requested; carries the text to print."""
    result = Result.HELP

    def __init__(self, text):
        super().__init__("help requested")
        self.text = text


# ---------------------------------------------------------------------------
# Lookup errors: both mean "nothing matched" but read differently
# ---------------------------------------------------------------------------
class ContextLookupError(LogCtlError):
    """A context name or pattern resolved to nothing."""

    def __init__(self, pattern):
        super().__init__(self.template.format(pattern))
        self.pattern = pattern


class ContextNotFoundError(ContextLookupError):
    template = "Context '{}' not found."


class NoContextsMatchedError(ContextLookupError):
    template = "No contexts matched '{}'."


class ContextExistsError(ContextLookupError):
    template = "Context '{}' is already defined."


# ---------------------------------------------------------------------------
# Registry / runtime errors
# ---------------------------------------------------------------------------
class RegistryError(LogCtlError):
    """A call into the logging registry failed.

    ``action`` describes what was being attempted and is filled in by
    the layer that knows (e.g. "getting contexts info").
    """

    def __init__(self, code, action=None, detail=None):
        self.code = ErrCode(code)
        self.action = action
        self.detail = detail
        super().__init__(self._format())

    def _format(self):
        text = f"0x{int(self.code):08X} ({self.code.description})"
        if self.detail:
            text = f"{text}: {self.detail}"
        if self.action:
            return f"Error {self.action}: {text}"
        return text

    def during(self, action):
        """Return a copy of this error labelled with ``action``."""
        return type(self)(self.code, action, self.detail)


class SnapshotCapacityError(RegistryError):
    """More contexts than a snapshot can hold."""

    def __init__(self, code=ErrCode.TOO_MANY_CONTEXTS, action=None, detail=None):
        super().__init__(code, action, detail)


# ---------------------------------------------------------------------------
# Structured data encoding errors
# ---------------------------------------------------------------------------
class EncodeError(LogCtlError):
    """The key=value arguments could not be encoded."""


class KVParseError(EncodeError):
    """A token was not of the form key=value."""
    result = Result.PARAM_ERR

    def __init__(self, token):
        super().__init__(f"key and value pair is wrong : {token}")
        self.token = token


class KVCapacityError(EncodeError):
    """The encoded object would not fit the payload buffer.

    Capacity counts characters, not encoded bytes.
    """

    def __init__(self, capacity):
        super().__init__(f"Structured data exceeds {capacity} characters.")
        self.capacity = capacity
