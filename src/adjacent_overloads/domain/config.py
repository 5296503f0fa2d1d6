"""Configuration for the CLI. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from adjacent_overloads.domain.constants import DEFAULT_ESTREE_SUFFIXES, DEFAULT_LOG_LEVEL
from adjacent_overloads.domain.exceptions import ConfigurationError

KNOWN_KEYS: frozenset[str] = frozenset(
    {"exclude_paths", "estree_suffixes", "check_python", "log_level"}
)


class ConfigurationLoader:
    """
    Immutable configuration from [tool.adjacent-overloads].

    Domain does not read the filesystem; Infrastructure calls
    ConfigFileLoader.load_config_from_fs() and constructs ConfigurationLoader(config_dict) at composition root.
    The rule itself takes no options; these settings only steer file discovery
    and logging.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn on unknown keys; raise ConfigurationError on wrong value types."""
        for key in sorted(set(config) - KNOWN_KEYS):
            logging.warning(
                "Configuration Warning: unknown key '%s' in [tool.adjacent-overloads] is ignored.",
                key,
            )
        for key in ("exclude_paths", "estree_suffixes"):
            raw = config.get(key)
            if raw is not None and not (
                isinstance(raw, list) and all(isinstance(x, str) for x in raw)
            ):
                raise ConfigurationError(f"'{key}' must be a list of strings")
        if "check_python" in config and not isinstance(config["check_python"], bool):
            raise ConfigurationError("'check_python' must be a boolean")
        level = config.get("log_level")
        if level is not None and (
            not isinstance(level, str)
            or not isinstance(logging.getLevelName(level.upper()), int)
        ):
            raise ConfigurationError(f"'log_level' must be a logging level name, got {level!r}")

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments skipped during file discovery (e.g. node_modules, tests/bait/)."""
        raw = self._config.get("exclude_paths", [])
        if isinstance(raw, list):
            return [str(x) for x in raw if isinstance(x, str)]
        return []

    @property
    def estree_suffixes(self) -> list[str]:
        """File name endings that mark a serialised ESTree document."""
        raw = self._config.get("estree_suffixes")
        if isinstance(raw, list) and raw:
            return [str(x) for x in raw if isinstance(x, str)]
        return list(DEFAULT_ESTREE_SUFFIXES)

    @property
    def check_python(self) -> bool:
        return bool(self._config.get("check_python", True))

    @property
    def log_level(self) -> str:
        raw = self._config.get("log_level", DEFAULT_LOG_LEVEL)
        return str(raw).upper()

    def is_excluded(self, path: str) -> bool:
        normalized = path.replace("\\", "/")
        return any(fragment in normalized for fragment in self.exclude_paths)
