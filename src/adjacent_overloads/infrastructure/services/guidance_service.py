"""GuidanceService: loads the rule registry and provides message tuples and manual instructions."""

import logging
from pathlib import Path
from typing import cast

import yaml

from adjacent_overloads.domain.constants import RULE_PREFIX
from adjacent_overloads.domain.protocols import GuidanceServiceProtocol
from adjacent_overloads.domain.registry_types import RuleRegistryEntry
from adjacent_overloads.domain.rule_msgs import RuleMsgBuilder

logger = logging.getLogger(__name__)


class GuidanceService(GuidanceServiceProtocol):
    """Loads rule_registry.yaml and answers registry lookups by code or symbol."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logger.warning("Rule registry not found at %s", self._path)
            self._registry = {}
            return
        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        self._registry = (
            cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
        )

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry for use by domain/use_cases."""
        return dict(self._registry)

    def get_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        """Return the full registry entry for a rule by code or symbol; never the _default entry."""
        entry = RuleMsgBuilder.entry_for(self._registry, rule_code)
        if entry:
            return entry
        for rid, e in self._registry.items():
            if not rid.startswith(RULE_PREFIX) or rid == f"{RULE_PREFIX}_default":
                continue
            if isinstance(e, dict) and e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    def iter_rules(self) -> list[tuple[str, RuleRegistryEntry]]:
        """(code, entry) for every rule, sorted by code; the _default entry is skipped."""
        return sorted(
            (
                (rid[len(RULE_PREFIX):], cast(RuleRegistryEntry, dict(entry)))
                for rid, entry in self._registry.items()
                if rid.startswith(RULE_PREFIX) and rid != f"{RULE_PREFIX}_default"
            ),
            key=lambda item: item[0],
        )

    def get_manual_instructions(self, rule_code: str) -> str:
        """Return manual fix instructions; falls back to the _default entry."""
        entry = self.get_entry(rule_code)
        if entry and "manual_instructions" in entry:
            return str(entry["manual_instructions"])
        default_entry = self._registry.get(f"{RULE_PREFIX}_default")
        if default_entry and "manual_instructions" in default_entry:
            return str(default_entry["manual_instructions"])
        return "Fix the violation at the reported location."

    def get_proactive_guidance(self, rule_code: str) -> str:
        """How to write code that never triggers the rule; empty when the entry has none."""
        entry = self.get_entry(rule_code)
        return str(entry.get("proactive_guidance", "")) if entry else ""
