"""Ordered, offset-indexed list of violations.

Offsets are stable keys, not positions:
- add() stores at the next free offset (one past the highest offset ever used)
- remove() leaves a gap, later offsets are NOT renumbered
- set() writes any offset, including past the end
- iteration follows ascending offset order of present violations
"""

from __future__ import annotations

import logging
from operator import itemgetter
from typing import TYPE_CHECKING, Self

from violationlist.domain.exceptions.offset import OffsetNotFoundError
from violationlist.domain.model.violation import ConstraintViolation

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from violationlist.domain.ports.violation import ViolationProtocol

logger = logging.getLogger(__name__)


class ViolationList:
    """Mutable container of violations keyed by integer offset.

    Not thread-safe. Callers serialize access.

    Container protocol:
        len(lst)        -> count()
        offset in lst   -> has(offset)
        lst[offset]     -> get(offset)
        lst[offset] = v -> set(offset, v)
        lst[None] = v   -> add(v)
        del lst[offset] -> remove(offset)
        str(lst)        -> to_display_string()
    """

    __slots__ = ("_next_offset", "_violations")

    def __init__(self, violations: Iterable[ViolationProtocol] = ()) -> None:
        """Initialize list.

        Args:
            violations: Initial violations, added in order via add()
        """
        self._violations: dict[int, ViolationProtocol] = {}
        self._next_offset = 0
        for violation in violations:
            self.add(violation)

    @classmethod
    def create_from_message(cls, message: str) -> Self:
        """Create single-violation list from a bare message.

        All other violation fields are empty (code is None).
        """
        return cls._from_violations((ConstraintViolation(message=message),))

    @classmethod
    def _from_violations(cls, violations: Iterable[ViolationProtocol]) -> Self:
        """Build new list of this class. Override if __init__ signature differs."""
        return cls(violations)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add(self, violation: ViolationProtocol) -> None:
        """Append violation at the next free offset."""
        self._violations[self._next_offset] = violation
        self._next_offset += 1

    def add_all(self, other: Iterable[ViolationProtocol]) -> None:
        """Append all violations of other, in its iteration order.

        other is not modified. Adding a list to itself is allowed.
        """
        for violation in tuple(other):
            self.add(violation)

    def set(self, offset: int, violation: ViolationProtocol) -> None:
        """Store violation at offset, overwriting any existing one."""
        self._violations[offset] = violation
        if offset >= self._next_offset:
            self._next_offset = offset + 1

    def remove(self, offset: int) -> None:
        """Remove violation at offset. No-op if absent."""
        if offset not in self._violations:
            logger.debug("remove: offset %d is empty", offset)
            return
        del self._violations[offset]

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, offset: int) -> ViolationProtocol:
        """Get violation at offset.

        Raises:
            OffsetNotFoundError: offset never assigned or removed
        """
        try:
            return self._violations[offset]
        except KeyError:
            raise OffsetNotFoundError(offset) from None

    def has(self, offset: int) -> bool:
        """Check if offset holds a violation. O(1)."""
        return offset in self._violations

    def count(self) -> int:
        """Number of stored violations (not highest offset + 1)."""
        return len(self._violations)

    def offsets(self) -> tuple[int, ...]:
        """Present offsets in ascending order."""
        return tuple(sorted(self._violations))

    def find_by_codes(self, codes: str | Iterable[str]) -> Self:
        """Create list with violations whose code is one of codes.

        Matching is strict equality: None and "" are different codes.
        Result has fresh offsets 0, 1, 2, ... and the receiver's class.

        Args:
            codes: Single code or iterable of codes

        Returns:
            New list, receiver unchanged
        """
        wanted = frozenset((codes,) if isinstance(codes, str) else codes)
        found = self._from_violations(v for v in self if v.code in wanted)
        logger.debug(
            "find_by_codes: %d of %d violations match %s",
            len(found),
            len(self),
            set(wanted),
        )
        return found

    def to_display_string(self) -> str:
        """Render each violation followed by a newline. Empty list -> ""."""
        return "".join(f"{violation}\n" for violation in self)

    # =========================================================================
    # Container protocol
    # =========================================================================

    def __iter__(self) -> Iterator[ViolationProtocol]:
        """Iterate violations in ascending offset order.

        Each call snapshots the current contents, so the list may be
        mutated while a traversal is in progress.
        """
        snapshot = sorted(self._violations.items(), key=itemgetter(0))
        for _, violation in snapshot:
            yield violation

    def __len__(self) -> int:
        return len(self._violations)

    def __contains__(self, offset: object) -> bool:
        """Offset presence. Non-int keys (e.g. violations) are never present."""
        return isinstance(offset, int) and offset in self._violations

    def __getitem__(self, offset: int) -> ViolationProtocol:
        return self.get(offset)

    def __setitem__(self, offset: int | None, violation: ViolationProtocol) -> None:
        if offset is None:
            self.add(violation)
        else:
            self.set(offset, violation)

    def __delitem__(self, offset: int) -> None:
        self.remove(offset)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={len(self)}, offsets={list(self.offsets())})"
