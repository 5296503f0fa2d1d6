"""Domain models for rules and violations."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

import astroid

__all__ = [
    "Checkable",
    "Violation",
]


@dataclass(frozen=True)
class Violation:
    """A rule violation with code, message and location."""

    code: str
    message: str
    location: str
    node: object
    """astroid node for Python sources, ESTree mapping for TypeScript documents."""
    message_args: tuple[str, ...] | None = None
    """Args for Pylint add_message, e.g. (name,)."""

    @staticmethod
    def _location_from_node(node: astroid.nodes.NodeNG, path: str | None = None) -> str:
        """path:lineno:col_offset; path defaults to the module file astroid recorded."""
        if path is None:
            path = getattr(node.root(), "file", "") or ""
        lineno = getattr(node, "lineno", 0) or 0
        col_offset = getattr(node, "col_offset", 0) or 0
        return f"{path}:{lineno}:{col_offset}"

    @staticmethod
    def _location_from_estree(node: Mapping[str, object], path: str) -> str:
        """path:line:column from an ESTree `loc`; 0:0 when the parser omitted locations."""
        loc = node.get("loc")
        start = loc.get("start") if isinstance(loc, Mapping) else None
        line = start.get("line", 0) if isinstance(start, Mapping) else 0
        column = start.get("column", 0) if isinstance(start, Mapping) else 0
        return f"{path}:{line}:{column}"

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        message: str,
        node: astroid.nodes.NodeNG,
        message_args: tuple[str, ...] | None = None,
        path: str | None = None,
    ) -> "Violation":
        """Build a Violation with location derived from node. Prefer over manual location=."""
        return cls(
            code=code,
            message=message,
            location=cls._location_from_node(node, path),
            node=node,
            message_args=message_args,
        )

    @classmethod
    def from_estree(
        cls,
        *,
        code: str,
        message: str,
        node: Mapping[str, object],
        path: str,
        message_args: tuple[str, ...] | None = None,
    ) -> "Violation":
        return cls(
            code=code,
            message=message,
            location=cls._location_from_estree(node, path),
            node=node,
            message_args=message_args,
        )

    @property
    def path(self) -> str:
        return self.location.rsplit(":", 2)[0]

    @property
    def line(self) -> int:
        return int(self.location.rsplit(":", 2)[1])

    @property
    def column(self) -> int:
        return int(self.location.rsplit(":", 2)[2])


class Checkable(Protocol):
    """One-and-done check: given a node, return violations."""

    code: str
    description: str

    def check(self, node: astroid.nodes.NodeNG) -> list[Violation]:
        """Interrogate a node for breaches."""
        ...
