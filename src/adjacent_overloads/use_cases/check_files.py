"""Check files on disk: discover sources, load them, run the rule, collect an AuditResult."""

import logging

from adjacent_overloads.domain.config import ConfigurationLoader
from adjacent_overloads.domain.entities import AuditResult, SourceFailure
from adjacent_overloads.domain.exceptions import SourceLoadError
from adjacent_overloads.domain.protocols import (
    AstroidProtocol,
    EstreeGatewayProtocol,
    FileSystemProtocol,
    TelemetryPort,
)
from adjacent_overloads.domain.rules import Violation
from adjacent_overloads.domain.rules.adjacent_signatures import (
    AdjacentOverloadSignaturesRule,
)

logger = logging.getLogger(__name__)

PYTHON_SUFFIX = ".py"


class CheckFilesUseCase:
    """Runs W9401 over Python sources and ESTree documents."""

    def __init__(
        self,
        rule: AdjacentOverloadSignaturesRule,
        astroid_gateway: AstroidProtocol,
        estree_gateway: EstreeGatewayProtocol,
        filesystem: FileSystemProtocol,
        config_loader: ConfigurationLoader,
        telemetry: TelemetryPort,
    ) -> None:
        self.rule = rule
        self.astroid_gateway = astroid_gateway
        self.estree_gateway = estree_gateway
        self.filesystem = filesystem
        self.config_loader = config_loader
        self.telemetry = telemetry

    def discover(self, paths: list[str]) -> list[str]:
        """Candidate files in the given order of paths, deduplicated, excluded fragments dropped."""
        suffixes = list(self.config_loader.estree_suffixes)
        if self.config_loader.check_python:
            suffixes.append(PYTHON_SUFFIX)
        found: list[str] = []
        seen: set[str] = set()
        for path in paths:
            for file_path in self.filesystem.collect_files(path, suffixes):
                if file_path in seen or self.config_loader.is_excluded(file_path):
                    continue
                seen.add(file_path)
                found.append(file_path)
        return found

    def execute(self, paths: list[str]) -> AuditResult:
        result = AuditResult()
        files = self.discover(paths)
        self.telemetry.step(f"Checking {len(files)} file(s)...")
        for file_path in files:
            try:
                violations = self.check_file(file_path)
            except SourceLoadError as exc:
                logger.info("Skipping %s", exc)
                result.failures.append(SourceFailure(exc.path, exc.reason))
                continue
            result.files_checked += 1
            result.violations.extend(violations)
        logger.info(
            "Checked %d file(s): %d violation(s), %d failure(s)",
            result.files_checked,
            len(result.violations),
            len(result.failures),
        )
        return result

    def check_file(self, file_path: str) -> list[Violation]:
        if any(file_path.endswith(s) for s in self.config_loader.estree_suffixes):
            document = self.estree_gateway.load_document(file_path)
            return self.rule.check_estree(document, file_path)
        return self.rule.check_tree(self.astroid_gateway.parse_file(file_path), file_path)
