"""Tests for pmlogctl.hints - hint registration and display."""

import pytest

from pmlogctl.lib.log_lib import (
    Hint, OutputManager, get_hint, register_hint,
)


class TestHintsRegistered:
    """All pmlogctl hints are registered in the global registry."""

    @pytest.mark.parametrize("hint_id", [
        'cli.help',
        'logkv.quoting',
        'context.global_alias',
        'set.wildcard',
    ])
    def test_hint_exists(self, hint_id):
        assert get_hint(hint_id) is not None, f"Hint '{hint_id}' not registered"

    def test_unknown_hint(self):
        assert get_hint('no.such.hint') is None


class TestHintDisplay:
    """OutputManager.hint() gating."""

    def test_error_hint_at_default_verbosity(self, stderr):
        out = OutputManager(err_file=stderr)
        out.hint('cli.help', 'error')
        assert stderr.getvalue() == "pmlogctl: Use -help for usage information.\n"

    def test_shown_once(self, stderr):
        out = OutputManager(err_file=stderr)
        out.hint('cli.help', 'error')
        out.hint('cli.help', 'error')
        assert stderr.getvalue().count("Use -help") == 1
        assert out.shown_hints == {'cli.help'}

    def test_wrong_context_not_shown(self, stderr):
        out = OutputManager(err_file=stderr)
        out.hint('cli.help', 'result')
        assert stderr.getvalue() == ""

    def test_silent_hides_hints(self, stderr):
        out = OutputManager(silent=True, err_file=stderr)
        out.hint('cli.help', 'error')
        assert stderr.getvalue() == ""

    def test_verbose_hint_needs_verbosity(self, stderr):
        out = OutputManager(verbosity=0, err_file=stderr)
        out.hint('context.global_alias', 'verbose', name='<global>')
        assert stderr.getvalue() == ""
        out = OutputManager(verbosity=1, err_file=stderr)
        out.hint('context.global_alias', 'verbose', name='<global>')
        assert "'<global>' can be given as '.'" in stderr.getvalue()

    def test_template_filled(self, stderr):
        out = OutputManager(err_file=stderr)
        out.hint('set.wildcard', 'error', example='net*')
        assert "(e.g. 'net*')" in stderr.getvalue()

    def test_register_custom_hint(self, stderr):
        register_hint(Hint(id='test.custom', message='custom tip',
                           context={'result'}, min_level=0, category='test'))
        out = OutputManager(err_file=stderr)
        out.hint('test.custom', 'result')
        assert stderr.getvalue() == "custom tip\n"
