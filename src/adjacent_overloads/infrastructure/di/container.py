from typing import TYPE_CHECKING, Any, Optional, cast

from adjacent_overloads.domain.config import ConfigurationLoader
from adjacent_overloads.domain.rules.adjacent_signatures import (
    AdjacentOverloadSignaturesRule,
)
from adjacent_overloads.infrastructure.config_file_loader import ConfigFileLoader
from adjacent_overloads.infrastructure.gateways.astroid_gateway import AstroidGateway
from adjacent_overloads.infrastructure.gateways.estree_gateway import EstreeGateway
from adjacent_overloads.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from adjacent_overloads.infrastructure.reporters import TerminalAuditReporter
from adjacent_overloads.infrastructure.services.guidance_service import GuidanceService
from adjacent_overloads.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from adjacent_overloads.domain.protocols import (
        AstroidProtocol,
        EstreeGatewayProtocol,
        FileSystemProtocol,
        TelemetryPort,
    )
    from adjacent_overloads.interface.reporters import AuditReporter


class AdjacencyContainer:
    """Dependency Injection Container for adjacent-overloads."""

    _instance: Optional["AdjacencyContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))
        telemetry = ProjectTelemetry("adjacent-overloads")
        self.register_singleton("TelemetryPort", telemetry)
        guidance_service = GuidanceService()
        self.register_singleton("GuidanceService", guidance_service)
        self.register_singleton("AstroidGateway", AstroidGateway())
        self.register_singleton("EstreeGateway", EstreeGateway())
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("AdjacentOverloadSignaturesRule", AdjacentOverloadSignaturesRule())
        self.register_singleton(
            "AuditReporter",
            TerminalAuditReporter(guidance_service=guidance_service, telemetry=telemetry),
        )

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_guidance_service(self) -> GuidanceService:
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_astroid_gateway(self) -> "AstroidProtocol":
        return cast("AstroidProtocol", self.get("AstroidGateway"))

    def get_estree_gateway(self) -> "EstreeGatewayProtocol":
        return cast("EstreeGatewayProtocol", self.get("EstreeGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_rule(self) -> AdjacentOverloadSignaturesRule:
        return cast(AdjacentOverloadSignaturesRule, self.get("AdjacentOverloadSignaturesRule"))

    def get_reporter(self) -> "AuditReporter":
        return cast("AuditReporter", self.get("AuditReporter"))

    @classmethod
    def get_instance(cls) -> "AdjacencyContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = AdjacencyContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
