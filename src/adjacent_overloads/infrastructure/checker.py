"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

Enable with `pylint --load-plugins=adjacent_overloads.infrastructure.checker`.
"""

from pylint.lint import PyLinter

from adjacent_overloads.infrastructure.di.container import AdjacencyContainer
from adjacent_overloads.use_cases.checks.adjacency import AdjacentOverloadChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = AdjacencyContainer.get_instance()
    registry = container.get_guidance_service().get_registry()
    linter.register_checker(
        AdjacentOverloadChecker(linter, registry=registry, rule=container.get_rule())
    )
