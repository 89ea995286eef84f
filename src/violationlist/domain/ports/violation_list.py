"""Violation list protocol: contract for violation containers.

Users extend violationlist by implementing this Protocol.
ViolationList is the built-in implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from violationlist.domain.ports.violation import ViolationProtocol


class ViolationListProtocol(Protocol):
    """Contract for ordered, offset-indexed violation containers.

    Offsets are stable: removing a violation does not renumber the rest.
    """

    def add(self, violation: ViolationProtocol) -> None:
        """Append violation at the next free offset."""
        ...

    def add_all(self, other: Iterable[ViolationProtocol]) -> None:
        """Append all violations of other, in its iteration order."""
        ...

    def get(self, offset: int) -> ViolationProtocol:
        """Get violation at offset. Raises OffsetNotFoundError if absent."""
        ...

    def has(self, offset: int) -> bool:
        """Check if offset holds a violation."""
        ...

    def set(self, offset: int, violation: ViolationProtocol) -> None:
        """Store violation at offset, overwriting any existing one."""
        ...

    def remove(self, offset: int) -> None:
        """Remove violation at offset. No-op if absent."""
        ...

    def count(self) -> int:
        """Number of stored violations."""
        ...

    def find_by_codes(self, codes: str | Iterable[str]) -> Self:
        """New list with violations whose code is one of codes."""
        ...

    def __iter__(self) -> Iterator[ViolationProtocol]: ...

    def __len__(self) -> int: ...
