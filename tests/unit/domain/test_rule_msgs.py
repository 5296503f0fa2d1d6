"""Unit tests for RuleMsgBuilder (domain/rule_msgs.py)."""

import unittest

from adjacent_overloads.domain.constants import RULE_PREFIX
from adjacent_overloads.domain.rule_msgs import RuleMsgBuilder

W9401 = {
    "symbol": "adjacent-overload-signatures",
    "display_name": "Adjacent overload signatures",
    "message_template": "All '%s' signatures should be adjacent.",
}

DEFAULT_TUPLE = (
    "All '%s' signatures should be adjacent.",
    "adjacent-overload-signatures",
    "Adjacent overload signatures",
)


class TestEntryFor(unittest.TestCase):
    def test_prefixed_code(self) -> None:
        entry = RuleMsgBuilder.entry_for({f"{RULE_PREFIX}W9401": W9401}, "W9401")
        self.assertEqual(entry["symbol"], "adjacent-overload-signatures")

    def test_default_entry_is_never_returned(self) -> None:
        registry = {f"{RULE_PREFIX}_default": {"manual_instructions": "generic"}}
        self.assertEqual(RuleMsgBuilder.entry_for(registry, "_default"), {})

    def test_missing_or_malformed(self) -> None:
        self.assertEqual(RuleMsgBuilder.entry_for({}, "W9401"), {})
        self.assertEqual(RuleMsgBuilder.entry_for({f"{RULE_PREFIX}W9401": "nope"}, "W9401"), {})

    def test_entry_is_a_copy(self) -> None:
        registry = {f"{RULE_PREFIX}W9401": dict(W9401)}
        RuleMsgBuilder.entry_for(registry, "W9401")["symbol"] = "changed"
        self.assertEqual(registry[f"{RULE_PREFIX}W9401"]["symbol"], "adjacent-overload-signatures")


class TestCheckerMsgs(unittest.TestCase):
    def test_registry_entry(self) -> None:
        self.assertEqual(
            RuleMsgBuilder.checker_msgs({f"{RULE_PREFIX}W9401": W9401}),
            {"W9401": DEFAULT_TUPLE},
        )

    def test_registry_text_wins(self) -> None:
        registry = {
            f"{RULE_PREFIX}W9401": {
                "message_template": "Group every '%s' overload.",
                "short_description": "Keep overloads together",
            }
        }
        self.assertEqual(
            RuleMsgBuilder.checker_msgs(registry)["W9401"],
            ("Group every '%s' overload.", "adjacent-overload-signatures", "Keep overloads together"),
        )

    def test_empty_registry_falls_back_to_built_in_text(self) -> None:
        self.assertEqual(RuleMsgBuilder.checker_msgs({}), {"W9401": DEFAULT_TUPLE})

    def test_default_entry_is_ignored(self) -> None:
        registry = {f"{RULE_PREFIX}_default": {"message_template": "generic %s", "symbol": "x"}}
        self.assertEqual(RuleMsgBuilder.checker_msgs(registry), {"W9401": DEFAULT_TUPLE})
