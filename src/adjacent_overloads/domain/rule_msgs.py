"""Pylint `msgs` for W9401: registry text where present, built-in text otherwise."""

from collections.abc import Mapping
from typing import cast

from adjacent_overloads.domain.constants import (
    ADJACENT_SIGNATURE_CODE,
    ADJACENT_SIGNATURE_DISPLAY_NAME,
    ADJACENT_SIGNATURE_SYMBOL,
    ADJACENT_SIGNATURE_TEMPLATE,
    RULE_PREFIX,
)
from adjacent_overloads.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Reads rule entries out of a registry mapping. No I/O."""

    @staticmethod
    def entry_for(registry: Mapping[str, object], rule_code: str) -> RuleRegistryEntry:
        """Copy of the entry keyed `overloads.<rule_code>`; empty if absent, malformed or `_default`."""
        if rule_code.startswith("_"):
            return {}
        entry = registry.get(f"{RULE_PREFIX}{rule_code}")
        if not isinstance(entry, Mapping):
            return {}
        return cast(RuleRegistryEntry, dict(entry))

    @staticmethod
    def checker_msgs(registry: Mapping[str, object]) -> dict[str, tuple[str, str, str]]:
        """
        `{W9401: (template, symbol, description)}` for AdjacentOverloadChecker.msgs.

        A registry without a W9401 entry (or with a partial one) still yields a
        complete tuple, so the checker always registers its message.
        """
        entry = RuleMsgBuilder.entry_for(registry, ADJACENT_SIGNATURE_CODE)
        template = entry.get("message_template") or ADJACENT_SIGNATURE_TEMPLATE
        symbol = entry.get("symbol") or ADJACENT_SIGNATURE_SYMBOL
        description = (
            entry.get("display_name")
            or entry.get("short_description")
            or ADJACENT_SIGNATURE_DISPLAY_NAME
        )
        return {ADJACENT_SIGNATURE_CODE: (str(template), str(symbol), str(description))}
