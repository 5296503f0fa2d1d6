"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import sys

import typer

from adjacent_overloads.domain.exceptions import ConfigurationError
from adjacent_overloads.infrastructure.di.container import AdjacencyContainer
from adjacent_overloads.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    try:
        container = AdjacencyContainer()
    except ConfigurationError as exc:
        typer.secho(f"Invalid [tool.adjacent-overloads] configuration: {exc}", fg=typer.colors.RED, err=True)
        sys.exit(2)

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        reporter=container.get_reporter(),
        guidance_service=container.get_guidance_service(),
        astroid_gateway=container.get_astroid_gateway(),
        estree_gateway=container.get_estree_gateway(),
        filesystem=container.get_filesystem_gateway(),
        rule=container.get_rule(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
