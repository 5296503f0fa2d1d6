"""Adjacent overload signatures check (W9401)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from adjacent_overloads.domain.registry_types import RuleRegistryEntry
from adjacent_overloads.domain.rule_msgs import RuleMsgBuilder
from adjacent_overloads.domain.rules.adjacent_signatures import (
    AdjacentOverloadSignaturesRule,
)


class AdjacentOverloadChecker(BaseChecker):
    """W9401: overloads split across a module or class body. Thin: delegates to AdjacentOverloadSignaturesRule."""

    name: str = "adjacent-overloads"

    def __init__(
        self,
        linter: "PyLinter",
        registry: Mapping[str, RuleRegistryEntry],
        rule: AdjacentOverloadSignaturesRule | None = None,
    ) -> None:
        self.msgs = RuleMsgBuilder.checker_msgs(registry)
        super().__init__(linter)
        self._rule = rule or AdjacentOverloadSignaturesRule()

    def visit_module(self, node: astroid.nodes.Module) -> None:
        self._report(node)

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        self._report(node)

    def _report(self, node: astroid.nodes.NodeNG) -> None:
        for v in self._rule.check(node):
            self.add_message(
                v.code,
                node=v.node,
                args=v.message_args or (),
            )
