from dataclasses import dataclass, field

from adjacent_overloads.domain.rules import Violation


@dataclass(frozen=True)
class SourceFailure:
    """A file that could not be loaded, with the reason."""

    path: str
    reason: str


@dataclass
class AuditResult:
    """Result of checking a set of files."""

    violations: list[Violation] = field(default_factory=list)
    failures: list[SourceFailure] = field(default_factory=list)
    files_checked: int = 0

    def has_violations(self) -> bool:
        """Check if any violations were found."""
        return bool(self.violations)

    def has_failures(self) -> bool:
        return bool(self.failures)

    @property
    def exit_code(self) -> int:
        """0 clean, 1 violations found, 2 only load failures."""
        if self.has_violations():
            return 1
        if self.has_failures():
            return 2
        return 0

    def to_dict(self) -> dict[str, object]:
        return {
            "files_checked": self.files_checked,
            "violations": [
                {
                    "path": v.path,
                    "line": v.line,
                    "column": v.column,
                    "code": v.code,
                    "name": v.message_args[0] if v.message_args else "",
                    "message": v.message,
                }
                for v in self.violations
            ],
            "failures": [{"path": f.path, "reason": f.reason} for f in self.failures],
        }
