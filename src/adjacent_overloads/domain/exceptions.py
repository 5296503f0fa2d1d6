"""Domain exceptions. The resolver and scanner never raise; these cover I/O and config."""


class AdjacencyError(Exception):
    """Base class for errors raised by adjacent-overloads."""


class SourceLoadError(AdjacencyError):
    """A source file could not be read, decoded or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigurationError(AdjacencyError):
    """A [tool.adjacent-overloads] value has the wrong type."""
