"""Tests for pmlogctl.strbuf - bounded string buffers."""

import pytest

from pmlogctl.strbuf import BoundedBuffer


class TestCopy:
    """copy() replaces the contents."""

    def test_fits(self):
        buf = BoundedBuffer(8)
        assert buf.copy("network") is True
        assert buf.value == "network"
        assert buf.truncated is False

    def test_exact_capacity_fits(self):
        buf = BoundedBuffer(3)
        assert buf.copy("abc") is True
        assert len(buf) == 3

    def test_truncates(self):
        buf = BoundedBuffer(3)
        assert buf.copy("abcdef") is False
        assert buf.value == "abc"
        assert buf.truncated is True

    def test_copy_replaces(self):
        buf = BoundedBuffer(8, "old")
        buf.copy("new")
        assert str(buf) == "new"

    def test_copy_none_is_empty(self):
        buf = BoundedBuffer(4, "x")
        assert buf.copy(None) is True
        assert buf.value == ""


class TestAppend:
    """append() extends the contents."""

    def test_append(self):
        buf = BoundedBuffer(8, "net")
        assert buf.append("work") is True
        assert buf.value == "network"
        assert len(buf) == 7

    def test_append_truncates_and_stays_truncated(self):
        buf = BoundedBuffer(8)
        buf.copy("network")
        assert buf.append(".wifi") is False
        assert buf.value == "network."
        assert buf.append("") is True
        assert buf.truncated is True

    def test_append_empty_is_noop(self):
        buf = BoundedBuffer(0)
        assert buf.append("") is True
        assert buf.truncated is False


class TestFormat:
    """format() replaces the contents with printf-style output."""

    def test_format(self):
        buf = BoundedBuffer(16)
        assert buf.format('"%s":%s', "a", "1") is True
        assert buf.value == '"a":1'

    def test_format_truncates(self):
        buf = BoundedBuffer(4)
        assert buf.format("%d-%d", 100, 200) is False
        assert buf.value == "100-"

    def test_format_without_args_is_literal(self):
        buf = BoundedBuffer(8)
        buf.format("100%")
        assert buf.value == "100%"


class TestMisc:

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError):
            BoundedBuffer(-1)

    def test_repr_mentions_state(self):
        assert "truncated=True" in repr(BoundedBuffer(1, "ab"))
