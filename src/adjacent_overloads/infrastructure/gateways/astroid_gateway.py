"""Astroid Gateway - parses Python sources for the standalone CLI."""

from pathlib import Path

import astroid

from adjacent_overloads.domain.exceptions import SourceLoadError
from adjacent_overloads.domain.protocols import AstroidProtocol


class AstroidGateway(AstroidProtocol):
    """Infrastructure implementation of AstroidProtocol."""

    def parse_file(self, file_path: str) -> astroid.nodes.Module:
        """Parse a file and return the astroid Module node."""
        try:
            source = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceLoadError(file_path, str(exc)) from exc
        try:
            return astroid.parse(source, path=file_path)
        except astroid.AstroidSyntaxError as exc:
            raise SourceLoadError(file_path, f"syntax error: {exc}") from exc
