"""CLI entry points for adjacent-overloads - Thin Controller using Typer."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from adjacent_overloads.domain.config import ConfigurationLoader
from adjacent_overloads.domain.protocols import (
    AstroidProtocol,
    EstreeGatewayProtocol,
    FileSystemProtocol,
    GuidanceServiceProtocol,
    TelemetryPort,
)
from adjacent_overloads.domain.rules.adjacent_signatures import (
    AdjacentOverloadSignaturesRule,
)
from adjacent_overloads.interface.reporters import AuditReporter
from adjacent_overloads.use_cases.check_files import CheckFilesUseCase

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    reporter: AuditReporter
    guidance_service: GuidanceServiceProtocol
    astroid_gateway: AstroidProtocol
    estree_gateway: EstreeGatewayProtocol
    filesystem: FileSystemProtocol
    rule: AdjacentOverloadSignaturesRule


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_paths(paths: Optional[list[Path]]) -> list[str]:
        """Explicit paths as given, else src/ if it exists, else '.'."""
        if paths:
            return [str(p) for p in paths]
        src_dir = Path.cwd() / "src"
        if src_dir.is_dir():
            return ["src"]
        return ["."]

    @staticmethod
    def configure_logging(level_name: str) -> None:
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise typer.BadParameter(f"unknown log level {level_name!r}", param_hint="--log-level")
        logging.basicConfig(
            level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr
        )
        logging.getLogger().setLevel(level)

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="adjacent-overloads",
            help="Require that member overloads be consecutive.",
            add_completion=False,
        )

        @app.command()
        def check(
            paths: Optional[list[Path]] = typer.Argument(None, help="Files or directories (default: src/ or .)"),  # noqa: B008
            output_format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
            log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (default from config, WARNING)"),
        ) -> None:
            """Report overloads that are not declared next to each other."""
            if output_format not in OUTPUT_FORMATS:
                raise typer.BadParameter(
                    f"expected one of {', '.join(OUTPUT_FORMATS)}", param_hint="--format"
                )
            CLIAppFactory.configure_logging(log_level or deps.config_loader.log_level)
            use_case = CheckFilesUseCase(
                rule=deps.rule,
                astroid_gateway=deps.astroid_gateway,
                estree_gateway=deps.estree_gateway,
                filesystem=deps.filesystem,
                config_loader=deps.config_loader,
                telemetry=deps.telemetry,
            )
            audit_result = use_case.execute(CLIAppFactory.resolve_target_paths(paths))
            deps.reporter.report_audit(audit_result, format=output_format)
            sys.exit(audit_result.exit_code)

        @app.command()
        def rules() -> None:
            """Describe the rules this tool enforces."""
            for code, entry in deps.guidance_service.iter_rules():
                typer.secho(f"{code} {entry.get('symbol', '')}", bold=True)
                typer.echo(f"  {entry.get('short_description', '')}")
                typer.echo(f"  message: {entry.get('message_template', '')}")
                typer.echo(f"  fix: {deps.guidance_service.get_manual_instructions(code)}")
                guidance = deps.guidance_service.get_proactive_guidance(code)
                if guidance:
                    typer.echo(f"  guidance: {guidance}")

        return app
