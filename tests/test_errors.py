"""Tests for pmlogctl.errors - error messages and result mapping."""

import pytest

from pmlogctl.errors import (
    ContextExistsError, ContextNotFoundError, ErrCode, HelpRequested,
    KVCapacityError, KVParseError, LogCtlError, NoContextsMatchedError,
    ParamError, RegistryError, Result, SnapshotCapacityError, exit_code,
)


class TestExitCode:

    def test_only_ok_succeeds(self):
        assert exit_code(Result.OK) == 0
        assert exit_code(Result.PARAM_ERR) == 1
        assert exit_code(Result.RUN_ERR) == 1
        assert exit_code(Result.HELP) == 1


class TestResults:
    """Each error class knows the Result it maps to."""

    @pytest.mark.parametrize("err,result", [
        (ParamError("x"), Result.PARAM_ERR),
        (KVParseError("x"), Result.PARAM_ERR),
        (ContextNotFoundError("x"), Result.RUN_ERR),
        (NoContextsMatchedError("x*"), Result.RUN_ERR),
        (ContextExistsError("x"), Result.RUN_ERR),
        (RegistryError(ErrCode.UNKNOWN), Result.RUN_ERR),
        (KVCapacityError(10), Result.RUN_ERR),
        (HelpRequested("usage"), Result.HELP),
    ])
    def test_result(self, err, result):
        assert isinstance(err, LogCtlError)
        assert err.result is result


class TestMessages:

    def test_lookup_messages_differ(self):
        assert str(ContextNotFoundError("net")) == "Context 'net' not found."
        assert str(NoContextsMatchedError("net*")) == "No contexts matched 'net*'."
        assert str(ContextExistsError("ui")) == "Context 'ui' is already defined."

    def test_registry_error_format(self):
        err = RegistryError(ErrCode.CONTEXT_NOT_FOUND, action="setting context log level")
        assert str(err) == ("Error setting context log level: "
                            "0x00000003 (Context not found)")

    def test_registry_error_detail(self):
        err = RegistryError(ErrCode.IO_ERROR, detail="disk full")
        assert str(err) == "0x00000007 (I/O error): disk full"

    def test_during_keeps_type_and_code(self):
        err = SnapshotCapacityError(detail="too many").during("listing")
        assert isinstance(err, SnapshotCapacityError)
        assert err.code == ErrCode.TOO_MANY_CONTEXTS
        assert str(err) == "Error listing: 0x00000004 (Too many contexts): too many"

    def test_help_carries_text(self):
        assert HelpRequested("usage text").text == "usage text"

    def test_errcode_descriptions(self):
        assert ErrCode.NONE.description == "No error"
        assert ErrCode.REGISTRY_UNAVAILABLE.description == "Registry unavailable"
