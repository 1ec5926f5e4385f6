"""Load toolkit configuration from CLI values, an optional YAML file and the environment."""

import os
from dataclasses import fields
from typing import Optional

import yaml

from .errors import ConfigError
from .types import ToolkitConfig


ROOT_ENV_VAR = "SKILLKIT_ROOT"
DEFAULT_ROOT = "skills"

_FILE_KEYS = {"root", "descriptor_filename", "definition_filename",
              "rule_filename", "reference_filename"}


def _read_config_file(config_path: str) -> dict:
    if not os.path.isfile(config_path):
        raise ConfigError(f"Config file not found: {config_path}")
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    unknown = sorted(set(data) - _FILE_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")
    return {k: str(v) for k, v in data.items() if v is not None}


def load_config(config_path: Optional[str] = None, root: Optional[str] = None,
                json_logs: bool = False, verbose: bool = False) -> ToolkitConfig:
    """Build a ToolkitConfig.

    Root precedence: explicit ``root`` argument, ``root`` in the YAML file,
    the SKILLKIT_ROOT environment variable, then ``./skills``. Relative roots
    in a config file resolve against the file's directory.
    """
    values = {}
    if config_path:
        values = _read_config_file(config_path)
        if "root" in values and not os.path.isabs(values["root"]):
            base = os.path.dirname(os.path.abspath(config_path))
            values["root"] = os.path.join(base, values["root"])

    if root:
        values["root"] = root
    elif "root" not in values:
        values["root"] = os.environ.get(ROOT_ENV_VAR) or DEFAULT_ROOT

    values["root"] = os.path.abspath(os.path.expanduser(values["root"]))

    known = {f.name for f in fields(ToolkitConfig)}
    return ToolkitConfig(
        json_logs=json_logs,
        verbose=verbose,
        **{k: v for k, v in values.items() if k in known},
    )
