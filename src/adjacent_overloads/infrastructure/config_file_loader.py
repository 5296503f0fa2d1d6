"""Load [tool.adjacent-overloads] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)

TOOL_KEY = "adjacent-overloads"


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml, walking up from a start directory."""

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """The [tool.adjacent-overloads] table; empty when missing or unreadable."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except OSError as exc:
                logger.warning("Could not read %s: %s", config_file, exc)
                continue
            except toml_lib.TOMLDecodeError as exc:
                logger.warning("Ignoring invalid %s: %s", config_file, exc)
                return {}
            tool_section = data.get("tool", {}) or {}
            logger.debug("Loaded configuration from %s", config_file)
            return dict(tool_section.get(TOOL_KEY, {}) or {})
        return {}
