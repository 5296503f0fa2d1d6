"""ESTree Gateway - reads syntax trees produced by an external TypeScript parser.

The documents are the JSON serialisation of `@typescript-eslint/typescript-estree`
output (`parse(code, {loc: true, range: true})`), one Program per file.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from adjacent_overloads.domain.exceptions import SourceLoadError
from adjacent_overloads.domain.protocols import EstreeGatewayProtocol


class EstreeGateway(EstreeGatewayProtocol):
    """Infrastructure implementation of EstreeGatewayProtocol using json."""

    def load_document(self, file_path: str) -> Mapping[str, Any]:
        try:
            text = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceLoadError(file_path, str(exc)) from exc
        return self.loads(text, file_path)

    @staticmethod
    def loads(text: str, file_path: str = "<string>") -> Mapping[str, Any]:
        """Decode an in-memory document, e.g. piped from a parser process."""
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SourceLoadError(file_path, f"invalid JSON: {exc}") from exc
        if not isinstance(document, dict) or not isinstance(document.get("type"), str):
            raise SourceLoadError(file_path, "not an ESTree node (missing 'type')")
        return document
