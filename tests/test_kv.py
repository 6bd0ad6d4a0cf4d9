"""Tests for pmlogctl.kv - key=value structured data encoding."""

import pytest

from pmlogctl.errors import KVCapacityError, KVParseError, Result
from pmlogctl.kv import KV_CAPACITY, encode_kv, split_kv_token
from pmlogctl.lib.log_lib import OutputManager


class TestSplitToken:

    def test_split_on_first_equals(self):
        assert split_kv_token("url=a=b") == ("url", "a=b")

    @pytest.mark.parametrize("token", ["badtoken", "=1", "key=", "="])
    def test_malformed(self, token):
        with pytest.raises(KVParseError) as exc:
            split_kv_token(token)
        assert str(exc.value) == f"key and value pair is wrong : {token}"
        assert exc.value.result is Result.PARAM_ERR


class TestEncode:
    """Payload construction."""

    def test_empty(self):
        assert encode_kv([]) == "{}"

    def test_two_pairs(self):
        assert encode_kv(["a=1", "b=2"]) == '{"a":1,"b":2}'

    def test_values_verbatim(self):
        assert encode_kv(['user="alice"', "count=3"]) == \
            '{"user":"alice","count":3}'

    def test_unquoted_string_value_not_fixed(self):
        assert encode_kv(["user=alice"]) == '{"user":alice}'

    def test_order_preserved(self):
        assert encode_kv(["z=1", "a=2"]) == '{"z":1,"a":2}'

    def test_bad_token_fails_whole_encode(self):
        with pytest.raises(KVParseError):
            encode_kv(["a=1", "badtoken", "c=3"])

    def test_default_capacity(self):
        assert KV_CAPACITY == 1023


class TestCapacity:
    """Overflow is a hard failure, never a cut-off object."""

    def test_exactly_full_fits(self):
        # {"k":123} is 9 characters
        assert encode_kv(["k=123"], capacity=9) == '{"k":123}'

    def test_closing_brace_overflow(self):
        with pytest.raises(KVCapacityError) as exc:
            encode_kv(["k=123"], capacity=8)
        assert str(exc.value) == "Structured data exceeds 8 characters."
        assert exc.value.result is Result.RUN_ERR

    def test_pair_overflow(self):
        with pytest.raises(KVCapacityError):
            encode_kv(["a=1", "b=" + "x" * 50], capacity=20)

    def test_large_payload_under_default(self):
        tokens = [f"k{i}={i}" for i in range(100)]
        payload = encode_kv(tokens)
        assert payload.startswith('{"k0":0,')
        assert payload.endswith('"k99":99}')

    def test_large_payload_over_default(self):
        with pytest.raises(KVCapacityError):
            encode_kv([f"key{i}={'v' * 20}" for i in range(50)])


class TestDiagnostics:

    def test_encode_channel(self, stderr):
        out = OutputManager(verbosity=0, channel_overrides={'encode': 3},
                            err_file=stderr)
        encode_kv(["a=1"], out=out)
        text = stderr.getvalue()
        assert "'a' -> '1'" in text
        assert "1 pair(s), 7 chars" in text
