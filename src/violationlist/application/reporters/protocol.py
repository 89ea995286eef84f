"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from violationlist.domain.model.violation_list import ViolationList


class ReporterProtocol(Protocol):
    """Protocol for violation list reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, violations: ViolationList) -> str:
        """Format violations as string.

        Args:
            violations: Violations to format.

        Returns:
            Formatted string representation.
        """
        ...
