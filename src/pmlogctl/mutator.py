"""Setting the level of every context a pattern selects."""

from pmlogctl.errors import NoContextsMatchedError, RegistryError
from pmlogctl.lister import list_contexts
from pmlogctl.matcher import is_wildcard

SET_ACTION = "setting context log level"


def _apply(client, handle, name, level, out):
    if out is not None:
        out.info(f"Setting context level for '{name}'.")
    try:
        client.registry.set_context_level(handle, level)
    except RegistryError as e:
        raise e.during(SET_ACTION) from e


def set_level_for_pattern(client, pattern, level, out=None):
    """Set ``level`` on the context(s) selected by ``pattern``.

    An exact name is looked up directly. A wildcard pattern is expanded
    with list_contexts() and applied in ascending name order; a failure
    part way leaves the earlier contexts changed.

    Args:
        client: ContextRegistryClient.
        pattern: Exact name or wildcard pattern (alias already resolved).
        level: Severity code to set.
        out: Optional OutputManager; receives one "Setting context
            level" line per context.

    Returns:
        Names of the contexts changed, in the order they were changed.

    Raises:
        ContextNotFoundError: Exact name not registered.
        NoContextsMatchedError: Wildcard selected nothing.
        RegistryError: Listing or a level change failed.
    """
    if not is_wildcard(pattern):
        handle = client.find(pattern)
        _apply(client, handle, pattern, level, out)
        return [pattern]

    snapshot = list_contexts(client, pattern, out=out)
    if len(snapshot) == 0:
        raise NoContextsMatchedError(pattern)

    changed = []
    for info in snapshot:
        _apply(client, info.handle, info.name, level, out)
        changed.append(info.name)
    return changed
