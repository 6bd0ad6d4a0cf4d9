"""Tests for pmlogctl.cli - argument parsing and dispatch."""

import json

import pytest

from pmlogctl.backend import MemoryRegistry
from pmlogctl.cli import (
    _build_command_parser, _build_global_parser, discover_commands, main,
)
from pmlogctl.errors import HelpRequested, ParamError


@pytest.fixture(autouse=True)
def _isolate(tmp_config_home, isolated_cwd):
    """No real ~/.pmlogctl or project config leaks into these tests."""


class TestGlobalParser:
    """Pass 1: global flags stop at the command word."""

    def test_silent_before_command(self):
        args = _build_global_parser().parse_args(["-s", "show", "net*"])
        assert args.silent is True
        assert args.command == "show"
        assert args.params == ["net*"]

    def test_flags_after_command_are_parameters(self):
        args = _build_global_parser().parse_args(["log", "ui", "info", "-v"])
        assert args.verbose == 0
        assert args.params == ["ui", "info", "-v"]

    def test_verbosity_counts(self):
        args = _build_global_parser().parse_args(["-vv", "-Q", "show"])
        assert (args.verbose, args.quiet) == (2, 1)

    def test_dash_help(self):
        assert _build_global_parser().parse_args(["-help"]).help is True

    def test_state_file(self):
        args = _build_global_parser().parse_args(
            ["--state-file", "/tmp/s.json", "show"])
        assert args.state_file == "/tmp/s.json"

    def test_empty(self):
        args = _build_global_parser().parse_args([])
        assert args.command is None
        assert args.params == []

    def test_unknown_flag_is_param_error(self):
        with pytest.raises(ParamError, match="Unrecognized arguments: -x"):
            _build_global_parser().parse_args(["-x", "show"])


class TestCommandParser:
    """Pass 2: every command registers itself."""

    def test_all_commands_registered(self):
        _, choices = _build_command_parser(discover_commands())
        assert set(choices) == {
            "show", "set", "log", "logkv", "klog", "def", "reconf",
            "flush", "help",
        }

    def test_every_command_has_usage(self):
        for cmd in discover_commands():
            assert cmd.USAGE, cmd.__name__

    def test_subcommand_help_raises(self):
        parser, _ = _build_command_parser(discover_commands())
        with pytest.raises(HelpRequested) as exc:
            parser.parse_args(["klog", "-h"])
        assert "-p <level>" in exc.value.text


class TestMainEntryPoint:
    """main() with various argv inputs."""

    @pytest.fixture
    def run(self, stdout, stderr):
        def _run(*argv, registry=None):
            reg = registry if registry is not None else MemoryRegistry({"ui": 2})
            return main(list(argv), registry=reg, stdout=stdout, stderr=stderr)
        return _run

    def test_no_command(self, run, stderr):
        assert run() == 1
        assert stderr.getvalue().splitlines() == [
            "pmlogctl: No command specified.",
            "pmlogctl: Use -help for usage information.",
        ]

    def test_silent_without_command(self, run, stderr):
        assert run("-s") == 1
        assert "No command specified." in stderr.getvalue()

    def test_invalid_command(self, run, stderr):
        assert run("bogus") == 1
        assert "pmlogctl: Invalid command 'bogus'" in stderr.getvalue()
        assert "Use -help" in stderr.getvalue()

    def test_version_exits_zero(self, run, capsys):
        assert run("--version") == 0
        assert "pmlogctl 0.1.0" in capsys.readouterr().out

    def test_bare_channel_lists_channels(self, run, stdout):
        assert run("--channel") == 0
        text = stdout.getvalue()
        assert text.startswith("Available channels:")
        assert "(opt-in)" in text

    def test_bad_channel_spec(self, run, stderr):
        assert run("--channel", "match:x", "show") == 1
        assert "Invalid channel spec" in stderr.getvalue()

    def test_config_channel(self, run, stderr):
        assert run("--channel", "config:1", "show") == 0
        assert "[config] kv_capacity = 1023 (default)" in stderr.getvalue()

    def test_hard_wall_hides_errors(self, run, stderr):
        assert run("-QQQQ", "show", "zz*") == 1
        assert stderr.getvalue() == ""

    def test_keyboard_interrupt(self, run):
        class Interrupted(MemoryRegistry):
            def num_contexts(self):
                raise KeyboardInterrupt
        assert run("show", registry=Interrupted()) == 130


class TestFileBackedRun:
    """main() without an injected registry uses the file-backed one."""

    def test_state_file_flag(self, tmp_path, stdout, stderr):
        state = tmp_path / "state.json"
        assert main(["--state-file", str(state), "def", "audio", "debug"],
                    stdout=stdout, stderr=stderr) == 0
        assert json.loads(state.read_text())["contexts"]["audio"] == 7

        assert main(["--state-file", str(state), "show", "audio"],
                    stdout=stdout, stderr=stderr) == 0
        assert stdout.getvalue() == "pmlogctl: Context 'audio' = debug\n"

    def test_project_config(self, isolated_cwd, tmp_path, stdout, stderr):
        state = tmp_path / "project-state.json"
        (isolated_cwd / ".pmlogctl.json").write_text(json.dumps({
            "state_file": str(state),
            "default_level": "err",
        }))
        assert main(["def", "audio"], stdout=stdout, stderr=stderr) == 0
        assert json.loads(state.read_text())["contexts"]["audio"] == 3

    def test_default_state_under_home(self, tmp_config_home, stdout, stderr):
        assert main(["def", "audio"], stdout=stdout, stderr=stderr) == 0
        assert (tmp_config_home / ".pmlogctl" / "contexts.json").is_file()

    def test_log_written_to_log_file(self, tmp_config_home, stdout, stderr):
        assert main(["log", "hello"], stdout=stdout, stderr=stderr) == 0
        log = tmp_config_home / ".pmlogctl" / "messages.log"
        assert log.read_text().rstrip().endswith("<global> notice hello")

    def test_reconf_against_file_state(self, tmp_path, stdout, stderr):
        state = tmp_path / "state.json"
        state.write_text(json.dumps({"contexts": {"ui": 1}}))
        assert main(["--state-file", str(state), "reconf"],
                    stdout=stdout, stderr=stderr) == 0

    @pytest.mark.parametrize("contexts", [{"ui": "err"}, ["ui"], None])
    def test_malformed_contexts_reported(self, tmp_path, stdout, stderr,
                                         contexts):
        state = tmp_path / "state.json"
        state.write_text(json.dumps({"contexts": contexts}))
        assert main(["--state-file", str(state), "show"],
                    stdout=stdout, stderr=stderr) != 0
        text = stderr.getvalue()
        assert f"pmlogctl: Error reading {state}: 0x00000007 (I/O error)" in text
        assert "malformed contexts" in text
        assert stdout.getvalue() == ""
