"""Configuration management for pmlogctl.

Layered config resolution (highest priority wins):
  1. CLI flags: explicit on the command line
  2. Project config: .pmlogctl.json in cwd or a parent directory
  3. Global config: ~/.pmlogctl/config.json (or --config PATH)
  4. Built-in defaults

Keys:
  state_file      JSON state of the local registry backend
  log_file        where the local backend appends emitted records
  kmsg_path       kernel log device written by ``klog``
  kv_capacity     max characters of a ``logkv`` structured-data object
  max_contexts    registry / snapshot capacity
  default_level   level given to newly defined contexts
"""

import json
import os
from pathlib import Path

from pmlogctl.errors import ParamError
from pmlogctl.kv import KV_CAPACITY
from pmlogctl.registry import MAX_CONTEXTS

PROJECT_CONFIG_NAME = ".pmlogctl.json"
CONFIG_KEYS = ["state_file", "log_file", "kmsg_path", "kv_capacity",
               "max_contexts", "default_level"]
INT_KEYS = {"kv_capacity", "max_contexts"}


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.pmlogctl/)."""
    return Path.home() / ".pmlogctl"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def get_defaults():
    """Built-in values for every config key."""
    base = get_global_config_dir()
    return {
        "state_file": str(base / "contexts.json"),
        "log_file": str(base / "messages.log"),
        "kmsg_path": "/dev/kmsg",
        "kv_capacity": KV_CAPACITY,
        "max_contexts": MAX_CONTEXTS,
        "default_level": "info",
    }


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .pmlogctl.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning {} on any read error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, IsADirectoryError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file (or an explicit --config file)."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .pmlogctl.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def _lookup(cfg, key):
    """JSON files may spell keys with either '_' or '-'."""
    value = cfg.get(key)
    if value is None:
        value = cfg.get(key.replace("_", "-"))
    return value


def _positive_int(key, value, source):
    """Convert a count-like setting; ParamError unless it is an integer >= 1."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        n = None
    if isinstance(value, bool) or n is None or n < 1:
        raise ParamError(f"Invalid {key} {value!r} in {source} config.")
    return n


def resolve_config(args, keys=None, start_dir=None, out=None):
    """Resolve config values using layered precedence.

    Args:
        args: argparse namespace; attributes named like the keys win.
            ``args.config`` selects the global config file.
        keys: Keys to resolve (default: all of CONFIG_KEYS).
        start_dir: Where to start looking for .pmlogctl.json.
        out: Optional OutputManager for 'config' channel diagnostics.

    Returns:
        Dict of resolved values; integer keys are converted to int.
    """
    if keys is None:
        keys = CONFIG_KEYS

    project_cfg, project_path = load_project_config(start_dir)
    global_cfg = load_global_config(getattr(args, "config", None))
    defaults = get_defaults()

    resolved = {}
    for key in keys:
        for source, layer in (("cli", vars(args)),
                              ("project", project_cfg),
                              ("global", global_cfg),
                              ("default", defaults)):
            value = _lookup(layer, key)
            if value is not None:
                break
        if key in INT_KEYS and value is not None:
            value = _positive_int(key, value, source)
        resolved[key] = value
        if out is not None:
            out.emit(1, "  [config] {key} = {value!r} ({source})",
                     channel='config', key=key, value=value, source=source)

    if out is not None and project_path:
        out.emit(2, "  [config] project config: {path}",
                 channel='config', path=project_path)
    return resolved

