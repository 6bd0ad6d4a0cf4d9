"""Bounded string buffers.

A BoundedBuffer never holds more than ``capacity`` characters. Every
write reports whether the whole text fit, and the buffer remembers if
any write was cut short, so callers decide what truncation means for
them instead of finding out from a mangled string later.
"""


class BoundedBuffer:
    """Fixed-capacity text buffer with an explicit truncation signal.

    ``capacity`` counts characters of content. It corresponds to a C
    buffer of ``capacity + 1`` bytes, the extra one being the terminator.

    Usage::

        buf = BoundedBuffer(8)
        buf.copy("network")       # True
        buf.append(".wifi")       # False, buf.value == "network."
        buf.truncated             # True
    """

    def __init__(self, capacity, initial=""):
        if capacity < 0:
            raise ValueError(f"invalid buffer capacity {capacity}")
        self.capacity = capacity
        self._text = ""
        self.truncated = False
        if initial:
            self.copy(initial)

    @property
    def value(self):
        return self._text

    def _store(self, text):
        fits = len(text) <= self.capacity
        if not fits:
            text = text[:self.capacity]
            self.truncated = True
        self._text = text
        return fits

    def copy(self, src):
        """Replace the contents with ``src``. False if truncated."""
        return self._store(src or "")

    def append(self, src):
        """Append ``src`` to the contents. False if truncated."""
        if not src:
            return True
        return self._store(self._text + src)

    def format(self, fmt, *args):
        """Replace the contents with ``fmt % args``. False if truncated."""
        return self._store(fmt % args if args else fmt)

    def __len__(self):
        return len(self._text)

    def __str__(self):
        return self._text

    def __repr__(self):
        return (f"BoundedBuffer(capacity={self.capacity}, "
                f"value={self._text!r}, truncated={self.truncated})")
