"""Context name matching.

A pattern is either None (match everything), an exact name, or a name
with a ``*``. Only the first ``*`` counts: the text before it must be a
prefix of the candidate and everything from the ``*`` on is ignored, so
``net*`` and ``net*wifi*`` match the same names.
"""

from pmlogctl.registry import GLOBAL_CONTEXT_NAME

WILDCARD = "*"
GLOBAL_ALIAS = "."


def resolve_alias(token, global_name=GLOBAL_CONTEXT_NAME):
    """Rewrite the ``.`` shorthand to the global context's name."""
    if token == GLOBAL_ALIAS:
        return global_name
    return token


def is_wildcard(pattern):
    return pattern is not None and WILDCARD in pattern


def wildcard_prefix(pattern):
    """Text before the first ``*``, or None if there is no wildcard."""
    k = pattern.find(WILDCARD)
    if k < 0:
        return None
    return pattern[:k]


def matches(name, pattern):
    """True if context ``name`` is selected by ``pattern``.

    >>> matches("network.wifi", "network*")
    True
    >>> matches("network", "net")
    False
    >>> matches("anything", None)
    True
    """
    if pattern is None:
        return True
    prefix = wildcard_prefix(pattern)
    if prefix is None:
        return name == pattern
    return name.startswith(prefix)
