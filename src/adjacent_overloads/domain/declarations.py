"""Declaration kinds and overload identity resolution for ESTree and astroid members."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

import astroid

from adjacent_overloads.domain.constants import (
    CALL_SIGNATURE_TOKEN,
    CONSTRUCT_SIGNATURE_TOKEN,
)


class DeclarationKind(Enum):
    """Closed set of ESTree member kinds that carry an overload identity."""

    EXPORT_DEFAULT = "ExportDefaultDeclaration"
    EXPORT_NAMED = "ExportNamedDeclaration"
    DECLARE_FUNCTION = "TSDeclareFunction"
    FUNCTION = "FunctionDeclaration"
    NAMESPACE_FUNCTION = "TSNamespaceFunctionDeclaration"
    METHOD_SIGNATURE = "TSMethodSignature"
    CALL_SIGNATURE = "TSCallSignatureDeclaration"
    CONSTRUCT_SIGNATURE = "TSConstructSignatureDeclaration"
    METHOD_DEFINITION = "MethodDefinition"
    OTHER = "*"

    @classmethod
    def of(cls, node: object) -> "DeclarationKind":
        """Return the kind tag of an ESTree node; OTHER for anything unrecognised."""
        if not isinstance(node, Mapping):
            return cls.OTHER
        tag = node.get("type")
        if not isinstance(tag, str):
            return cls.OTHER
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


EXPORT_KINDS: frozenset[DeclarationKind] = frozenset(
    {DeclarationKind.EXPORT_DEFAULT, DeclarationKind.EXPORT_NAMED}
)
FUNCTION_KINDS: frozenset[DeclarationKind] = frozenset(
    {
        DeclarationKind.DECLARE_FUNCTION,
        DeclarationKind.FUNCTION,
        DeclarationKind.NAMESPACE_FUNCTION,
    }
)


@dataclass(frozen=True)
class MemberIdentity:
    """
    Overload group of a member.

    `signature` is True for unnamed call/construct signatures, so a call
    signature never groups with a method literally named `call`.
    """

    name: str
    signature: bool = False

    def __str__(self) -> str:
        return self.name


class EstreeIdentityResolver:
    """Maps an ESTree member node to its MemberIdentity, or None when not applicable."""

    @staticmethod
    def resolve(member: object) -> MemberIdentity | None:
        """Total and side-effect free: malformed shapes resolve to None."""
        kind = DeclarationKind.of(member)
        while kind in EXPORT_KINDS:
            # `export { a };` has no declaration
            member = member.get("declaration")  # type: ignore[union-attr]
            kind = DeclarationKind.of(member)
        if not isinstance(member, Mapping):
            return None

        if kind in FUNCTION_KINDS:
            name = EstreeIdentityResolver.identifier_name(member.get("id"))
        elif kind is DeclarationKind.METHOD_SIGNATURE:
            name = EstreeIdentityResolver.key_name(
                member.get("key"), member.get("computed")
            ) or EstreeIdentityResolver.key_name(member.get("name"))
        elif kind is DeclarationKind.CALL_SIGNATURE:
            return MemberIdentity(CALL_SIGNATURE_TOKEN, signature=True)
        elif kind is DeclarationKind.CONSTRUCT_SIGNATURE:
            return MemberIdentity(CONSTRUCT_SIGNATURE_TOKEN, signature=True)
        elif kind is DeclarationKind.METHOD_DEFINITION:
            name = EstreeIdentityResolver.key_name(
                member.get("key"), member.get("computed")
            )
        else:
            return None
        return MemberIdentity(name) if name else None

    @staticmethod
    def identifier_name(node: object) -> str | None:
        if not isinstance(node, Mapping):
            return None
        name = node.get("name")
        return name if isinstance(name, str) and name else None

    @staticmethod
    def key_name(key: object, computed: object = False) -> str | None:
        """
        Static name of a property key: identifier name, else literal value.

        A computed key only has a static name when it is a literal
        (`['foo']()`); `[foo]()` and `[Symbol.iterator]()` resolve to None.
        """
        if not isinstance(key, Mapping):
            return None
        if not computed:
            name = EstreeIdentityResolver.identifier_name(key)
            if name:
                return name
        value = key.get("value")
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            return value or None
        if isinstance(value, (int, float)):
            return EstreeIdentityResolver.number_text(value)
        return None

    @staticmethod
    def number_text(value: int | float) -> str | None:
        """
        Property name of a numeric key, spelled the way JavaScript prints numbers.

        Shortest round-trip digits, positional for exponents -7 < e < 21
        (`1e20` is `100000000000000000000`, `0.000001` stays positional) and
        exponent form outside it (`1e+21`, `1e-7`).
        """
        try:
            number = float(value)
        except OverflowError:
            return None
        if not math.isfinite(number):
            return None
        if number == 0:
            return "0"
        decimal = Decimal(repr(number))
        exponent = decimal.adjusted()
        if -7 < exponent < 21:
            text = format(decimal, "f")
            return text.rstrip("0").rstrip(".") if "." in text else text
        sign, digits, _ = decimal.as_tuple()
        mantissa = "".join(str(d) for d in digits).rstrip("0") or "0"
        if len(mantissa) > 1:
            mantissa = f"{mantissa[0]}.{mantissa[1:]}"
        return f"{'-' if sign else ''}{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


class PythonIdentityResolver:
    """Maps an astroid statement to its MemberIdentity: every `def` groups by name."""

    @staticmethod
    def resolve(member: object) -> MemberIdentity | None:
        if isinstance(member, (astroid.nodes.FunctionDef, astroid.nodes.AsyncFunctionDef)):
            return MemberIdentity(member.name) if member.name else None
        return None
