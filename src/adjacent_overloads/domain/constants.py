"""Rule identifiers, fixed identity tokens and scope kinds shared across layers."""

RULE_PREFIX: str = "overloads."

ADJACENT_SIGNATURE_CODE: str = "W9401"
ADJACENT_SIGNATURE_SYMBOL: str = "adjacent-overload-signatures"
ADJACENT_SIGNATURE_MESSAGE_ID: str = "adjacentSignature"
ADJACENT_SIGNATURE_TEMPLATE: str = "All '%s' signatures should be adjacent."
ADJACENT_SIGNATURE_DISPLAY_NAME: str = "Adjacent overload signatures"

# Identity of unnamed `(...)` and `new (...)` signatures in interfaces/type literals.
CALL_SIGNATURE_TOKEN: str = "call"
CONSTRUCT_SIGNATURE_TOKEN: str = "new"

# ESTree containers whose member list is checked. Program is the top-level body.
ESTREE_SCOPE_KINDS: frozenset[str] = frozenset(
    {
        "Program",
        "TSModuleBlock",
        "TSTypeLiteral",
        "TSInterfaceBody",
        "ClassBody",
    }
)

# Keys never walked: back-references and positional metadata.
ESTREE_SKIPPED_KEYS: frozenset[str] = frozenset(
    {"parent", "loc", "range", "tokens", "comments"}
)

DEFAULT_ESTREE_SUFFIXES: tuple[str, ...] = (".estree.json",)
DEFAULT_LOG_LEVEL: str = "WARNING"
