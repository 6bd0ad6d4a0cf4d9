"""Tests for pmlogctl._version."""

import re

import pmlogctl
from pmlogctl import _version


class TestVersion:

    def test_package_exports_version(self):
        assert pmlogctl.__version__ == _version.__version__
        assert pmlogctl.__app_name__ == "pmlogctl"

    def test_base_version(self):
        assert _version.get_base_version() == "0.1.0-alpha"
        assert _version.BASE_VERSION == "0.1.0-alpha"

    def test_pip_version_is_pep440(self):
        assert re.fullmatch(r"\d+\.\d+\.\d+(a0|b0|rc\d+)?(\.dev\d+)?",
                            _version.get_pip_version())

    def test_full_version_starts_with_base(self):
        assert _version.get_version().startswith(_version.get_base_version())
