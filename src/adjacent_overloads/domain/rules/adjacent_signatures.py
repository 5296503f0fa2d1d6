"""Adjacent overload signatures rule (W9401)."""

from collections.abc import Mapping

import astroid

from adjacent_overloads.domain.adjacency import AdjacencyScanner, SignatureBreak
from adjacent_overloads.domain.constants import (
    ADJACENT_SIGNATURE_CODE,
    ADJACENT_SIGNATURE_SYMBOL,
    ADJACENT_SIGNATURE_TEMPLATE,
)
from adjacent_overloads.domain.declarations import (
    EstreeIdentityResolver,
    PythonIdentityResolver,
)
from adjacent_overloads.domain.rules import Checkable, Violation
from adjacent_overloads.domain.scopes import EstreeScope, EstreeScopeWalker


class AdjacentOverloadSignaturesRule(Checkable):
    """
    Rule for W9401: all overloads of a member must be written as one block.

    Python: the body of every module and class is checked; each `def` groups
    by name regardless of decorators. ESTree: every Program, module block,
    type literal, interface body and class body is checked.
    Stateless: each scope body is scanned independently.
    """

    code: str = ADJACENT_SIGNATURE_CODE
    symbol: str = ADJACENT_SIGNATURE_SYMBOL
    description: str = "Require that member overloads be consecutive."

    def __init__(self) -> None:
        self._python_scanner: AdjacencyScanner[astroid.nodes.NodeNG] = AdjacencyScanner(
            PythonIdentityResolver.resolve
        )
        self._estree_scanner: AdjacencyScanner[object] = AdjacencyScanner(
            EstreeIdentityResolver.resolve
        )
        self._walker = EstreeScopeWalker()

    @staticmethod
    def format_message(name: str) -> str:
        return ADJACENT_SIGNATURE_TEMPLATE % name

    def check(self, node: astroid.nodes.NodeNG, path: str | None = None) -> list[Violation]:
        """
        Scan a Module or ClassDef body; other nodes have no scope body to check.

        `path` is the file name to report; without it the module file astroid
        recorded is used (absolute under astroid 4).
        """
        if not isinstance(node, (astroid.nodes.Module, astroid.nodes.ClassDef)):
            return []
        return [
            Violation.from_node(
                code=self.code,
                message=self.format_message(found.name),
                node=found.node,
                message_args=(found.name,),
                path=path,
            )
            for found in self._python_scanner.scan(node.body)
        ]

    def check_tree(
        self, module: astroid.nodes.Module, path: str | None = None
    ) -> list[Violation]:
        """Module body first, then every class body in pylint's visit order."""
        violations = self.check(module, path)
        for class_node in module.nodes_of_class(astroid.nodes.ClassDef):
            violations.extend(self.check(class_node, path))
        return violations

    def check_estree_scope(self, scope: EstreeScope, path: str) -> list[Violation]:
        return [
            self._estree_violation(found, path)
            for found in self._estree_scanner.scan(scope.members)
        ]

    def check_estree(self, document: Mapping[str, object], path: str) -> list[Violation]:
        """Scan every scope body of an ESTree document in visit order."""
        violations: list[Violation] = []
        for scope in self._walker.iter_scopes(document):
            violations.extend(self.check_estree_scope(scope, path))
        return violations

    def _estree_violation(self, found: SignatureBreak[object], path: str) -> Violation:
        node = found.node if isinstance(found.node, Mapping) else {}
        return Violation.from_estree(
            code=self.code,
            message=self.format_message(found.name),
            node=node,
            path=path,
            message_args=(found.name,),
        )
