"""Protocol for audit reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from adjacent_overloads.domain.entities import AuditResult


class AuditReporter(Protocol):
    """Protocol for reporting audit results."""

    def report_audit(self, audit_result: "AuditResult", format: str = "text") -> None:
        """Report audit results to the user. format: 'text' (default) or 'json'."""
        ...
