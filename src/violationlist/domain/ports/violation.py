"""Violation protocol: the shape ViolationList relies on.

Validators may produce any object matching this Protocol.
ConstraintViolation is the built-in implementation.
"""

from __future__ import annotations

from typing import Protocol


class ViolationProtocol(Protocol):
    """Contract for a single failed validation rule.

    Only `code` is inspected by ViolationList (find_by_codes).
    `__str__` is used by ViolationList.to_display_string().
    """

    @property
    def message(self) -> str:
        """Human-readable message."""
        ...

    @property
    def code(self) -> str | None:
        """Machine-readable error code. None = no code."""
        ...

    def __str__(self) -> str: ...
