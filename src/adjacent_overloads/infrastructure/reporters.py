"""Terminal reporter implementation - lives in infrastructure."""

import json
from typing import TYPE_CHECKING

import typer

if TYPE_CHECKING:
    from adjacent_overloads.domain.entities import AuditResult
    from adjacent_overloads.domain.protocols import GuidanceServiceProtocol, TelemetryPort


class TerminalAuditReporter:
    """Prints one line per violation (or a JSON document) on stdout. Implements AuditReporter."""

    def __init__(
        self,
        guidance_service: "GuidanceServiceProtocol",
        telemetry: "TelemetryPort",
    ) -> None:
        self._guidance = guidance_service
        self._telemetry = telemetry

    def _symbol(self, code: str) -> str:
        entry = self._guidance.get_entry(code)
        return str(entry.get("symbol") or code) if entry else code

    def report_audit(self, audit_result: "AuditResult", format: str = "text") -> None:
        if format == "json":
            typer.echo(json.dumps(audit_result.to_dict(), indent=2))
            return
        for v in audit_result.violations:
            typer.echo(f"{v.location}: {v.code} {self._symbol(v.code)} {v.message}")
        for failure in audit_result.failures:
            self._telemetry.warning(f"Could not check {failure.path}: {failure.reason}")
        summary = (
            f"{len(audit_result.violations)} violation(s) in "
            f"{audit_result.files_checked} file(s)"
        )
        if audit_result.has_violations():
            self._telemetry.error(summary)
        else:
            self._telemetry.step(summary)
