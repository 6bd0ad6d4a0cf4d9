"""Encoding ``key=value`` arguments into a structured-data object.

    encode_kv(["user=\\"alice\\"", "count=3"])
    -> '{"user":"alice","count":3}'

Keys are always quoted. Values go in exactly as given, unquoted and
unescaped: a caller that wants a string value passes it already quoted.
Nothing here checks that the result is valid JSON.

The payload is built in a BoundedBuffer. If it would not fit, encoding
fails with KVCapacityError instead of emitting a cut-off object.
"""

from pmlogctl.errors import KVCapacityError, KVParseError
from pmlogctl.strbuf import BoundedBuffer

# characters; the 1024-byte buffer less the terminator, for ASCII payloads
KV_CAPACITY = 1023

EMPTY_OBJECT = "{}"


def split_kv_token(token):
    """Split ``key=value`` on the first ``=``.

    Returns:
        (key, value); the value may itself contain ``=``.

    Raises:
        KVParseError: No ``=``, or an empty key or value.
    """
    key, sep, value = token.partition("=")
    if not sep or not key or not value:
        raise KVParseError(token)
    return key, value


def encode_kv(tokens, capacity=KV_CAPACITY, out=None):
    """Encode ``key=value`` tokens as ``{"key":value,...}``.

    Args:
        tokens: Ordered sequence of ``key=value`` strings.
        capacity: Maximum payload length in characters.
        out: Optional OutputManager for 'encode' channel diagnostics.

    Returns:
        The payload string; ``{}`` when there are no tokens.

    Raises:
        KVParseError: At the first malformed token; nothing is returned.
        KVCapacityError: The payload would exceed ``capacity``.
    """
    payload = BoundedBuffer(capacity)
    payload.copy("{")
    for i, token in enumerate(tokens):
        key, value = split_kv_token(token)
        if out is not None:
            out.emit(3, "  [encode] {key!r} -> {value!r}",
                     channel='encode', key=key, value=value)
        if i:
            payload.append(",")
        payload.format('%s"%s":%s', payload.value, key, value)
        if payload.truncated:
            raise KVCapacityError(capacity)
    if not payload.append("}"):
        raise KVCapacityError(capacity)

    if out is not None:
        out.emit(2, "  [encode] {n} pair(s), {size} chars",
                 channel='encode', n=len(tokens), size=len(payload))
    return payload.value
