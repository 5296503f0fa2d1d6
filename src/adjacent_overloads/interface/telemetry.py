"""Console telemetry: status lines on stderr via Typer, mirrored to the project logger at DEBUG."""

import logging

import typer

from adjacent_overloads.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Prefixes every line with the project tag."""

    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        self.logger = logging.getLogger(project_name)

    def step(self, message: str) -> None:
        self.logger.debug(message)
        typer.secho(f"[{self.project_name}] {message}", err=True)

    def warning(self, message: str) -> None:
        self.logger.debug(message)
        typer.secho(f"[{self.project_name}] {message}", fg=typer.colors.YELLOW, err=True)

    def error(self, message: str) -> None:
        self.logger.debug(message)
        typer.secho(f"[{self.project_name}] {message}", fg=typer.colors.RED, err=True)
