"""Locate the scope bodies of an ESTree document, in the order a linter would visit them."""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from adjacent_overloads.domain.constants import ESTREE_SCOPE_KINDS, ESTREE_SKIPPED_KEYS


@dataclass(frozen=True)
class EstreeScope:
    """One container node and its ordered member list."""

    node: Mapping[str, Any]
    members: Sequence[object]

    @property
    def kind(self) -> str:
        return str(self.node.get("type"))


class EstreeScopeWalker:
    """Pre-order traversal yielding every Program, module block, type literal, interface and class body."""

    @staticmethod
    def members_of(node: Mapping[str, Any]) -> Sequence[object] | None:
        body = node.get("body")
        if isinstance(body, list):
            return body
        members = node.get("members")
        return members if isinstance(members, list) else None

    def iter_scopes(self, root: object) -> Iterator[EstreeScope]:
        stack: list[object] = [root]
        while stack:
            current = stack.pop()
            if isinstance(current, list):
                stack.extend(reversed(current))
                continue
            if not isinstance(current, Mapping):
                continue
            if current.get("type") in ESTREE_SCOPE_KINDS:
                members = self.members_of(current)
                if members is not None:
                    yield EstreeScope(current, members)
            children = [
                value
                for key, value in current.items()
                if key not in ESTREE_SKIPPED_KEYS and isinstance(value, (list, Mapping))
            ]
            stack.extend(reversed(children))
