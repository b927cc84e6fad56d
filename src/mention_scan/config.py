"""Scanner configuration persisted as JSON in the user config directory.

The configuration file lives at ``~/.config/mention_scan/mention_scan.json``
by default (overridable through ``MENTION_SCAN_CONFIG``) and stores the
trigger prefixes, their delimiter sets and the whitespace tolerance.

Delimiter sets are written as a predefined set name (``"whitespaces"``,
``"punctuation"``...), a string of literal characters, or a list mixing both.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from jsonschema import Draft202012Validator
from loguru import logger

CONFIG_ENV_VAR = "MENTION_SCAN_CONFIG"

SetValue = Union[str, List[str]]

_SET_VALUE_SCHEMA = {
    "oneOf": [
        {"type": "string"},
        {"type": "array", "items": {"type": "string"}},
    ]
}

CONFIG_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "prefixes": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "delimiter_sets": {
            "type": "object",
            "additionalProperties": _SET_VALUE_SCHEMA,
        },
        "global_delimiter_set": {
            "oneOf": [_SET_VALUE_SCHEMA, {"type": "null"}],
        },
        "max_space_count_allowed": {"type": "integer", "minimum": 0},
    },
    "additionalProperties": False,
}


class ConfigError(ValueError):
    """Raised when a configuration file does not match :data:`CONFIG_SCHEMA`."""


def default_config_path() -> Path:
    """Return the config file path, honouring ``MENTION_SCAN_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "mention_scan" / "mention_scan.json"


@dataclass
class ScanConfig:
    """Scanner configuration backed by a JSON file.

    Attributes:
        config_path: Absolute path to the JSON configuration file.
        prefixes: Trigger prefixes.
        delimiter_sets: Delimiter set per prefix, as written in the file.
        global_delimiter_set: Delimiter set for prefixes without their
            own, or ``None``.
        max_space_count_allowed: Contiguous whitespace tolerated in a word.
    """

    config_path: Path
    prefixes: List[str] = field(default_factory=lambda: ["@", "#"])
    delimiter_sets: Dict[str, SetValue] = field(default_factory=dict)
    global_delimiter_set: Optional[SetValue] = "whitespaces_and_newlines"
    max_space_count_allowed: int = 0

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "ScanConfig":
        """Load the configuration from a JSON file.

        If the file does not exist a ``ScanConfig`` with default values is
        returned.

        Args:
            path: Explicit config file path.  Falls back to
                :func:`default_config_path` when ``None``.

        Raises:
            ConfigError: If the file is not valid JSON or violates the schema.
        """
        path = path or default_config_path()

        if not path.exists():
            logger.debug("No config at {}, using defaults", path)
            return cls(config_path=path)

        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: invalid JSON ({e})") from e

        validate_config(data, source=str(path))

        defaults = cls(config_path=path)
        return cls(
            config_path=path,
            prefixes=data.get("prefixes", defaults.prefixes),
            delimiter_sets=data.get("delimiter_sets", {}),
            global_delimiter_set=data.get("global_delimiter_set", defaults.global_delimiter_set),
            max_space_count_allowed=data.get("max_space_count_allowed", 0),
        )

    def to_dict(self) -> dict:
        return {
            "prefixes": list(self.prefixes),
            "delimiter_sets": dict(self.delimiter_sets),
            "global_delimiter_set": self.global_delimiter_set,
            "max_space_count_allowed": self.max_space_count_allowed,
        }

    def save(self) -> None:
        """Persist the current configuration to disk as pretty-printed JSON.

        Parent directories are created automatically when they do not exist.
        """
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False))
        logger.info("Saved config to {}", self.config_path)


def validate_config(data: object, source: str = "<config>") -> None:
    """Validate *data* against :data:`CONFIG_SCHEMA`.

    Raises:
        ConfigError: Listing every violation found.
    """
    validator = Draft202012Validator(CONFIG_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        details = "; ".join(
            f"{'/'.join(str(p) for p in e.path) or '(root)'}: {e.message}" for e in errors
        )
        raise ConfigError(f"{source}: {details}")
