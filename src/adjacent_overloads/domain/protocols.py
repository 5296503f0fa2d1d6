"""Ports implemented by infrastructure. No infrastructure imports here."""

from collections.abc import Mapping
from typing import Any, Protocol

import astroid

from adjacent_overloads.domain.registry_types import RuleRegistryEntry


class AstroidProtocol(Protocol):
    """Parses Python sources into astroid modules."""

    def parse_file(self, file_path: str) -> astroid.nodes.Module:
        """Parse a file; raises SourceLoadError when unreadable or invalid."""
        ...


class EstreeGatewayProtocol(Protocol):
    """Loads ESTree documents serialised as JSON by an external parser."""

    def load_document(self, file_path: str) -> Mapping[str, Any]:
        """Return the root node; raises SourceLoadError when unreadable or not an ESTree root."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def collect_files(self, path: str, suffixes: list[str]) -> list[str]:
        """Files under path (recursive if directory) whose name ends with a suffix, sorted."""
        ...


class GuidanceServiceProtocol(Protocol):
    """Rule registry access."""

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        ...

    def get_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        ...

    def get_manual_instructions(self, rule_code: str) -> str:
        ...

    def get_proactive_guidance(self, rule_code: str) -> str:
        ...

    def iter_rules(self) -> list[tuple[str, RuleRegistryEntry]]:
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
