"""Single-pass detection of overload groups that are split across a scope body."""

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

N = TypeVar("N")


@dataclass(frozen=True)
class SignatureBreak(Generic[N]):
    """A member that reopens an overload group after a different member closed it."""

    node: N
    name: str
    index: int


class AdjacencyScanner(Generic[N]):
    """
    Walks a scope body once, left to right.

    Keeps the set of identities seen so far and the identity of the previous
    member. A member is reported when its identity was seen before and the
    previous member had a different identity. Members without an identity
    (None) are never reported, but they still end the previous member's run:
    `[A, None, A]` reports the second `A`.
    """

    def __init__(self, resolve: Callable[[N], Hashable | None]) -> None:
        self._resolve = resolve

    def scan(self, members: Iterable[N]) -> list[SignatureBreak[N]]:
        breaks: list[SignatureBreak[N]] = []
        seen: set[Hashable] = set()
        last: Hashable | None = None
        for index, member in enumerate(members):
            identity = self._resolve(member)
            if identity is not None and identity in seen and identity != last:
                breaks.append(SignatureBreak(member, str(identity), index))
            elif identity is not None:
                seen.add(identity)
            last = identity
        return breaks
