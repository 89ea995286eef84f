"""Console reporter: ViolationList → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from violationlist.domain.model.violation_list import ViolationList
    from violationlist.domain.ports.violation import ViolationProtocol

NO_CODE = "-"


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_summary: Show per-code counts section.
        max_violations: Max violations in table. None = unlimited.
        codes: Only report violations with these codes. None = all.
        width: Console width in characters.
    """

    show_summary: bool = True
    max_violations: int | None = None
    codes: frozenset[str] | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_violations is not None and self.max_violations < 0:
            raise ValueError(f"max_violations must be >= 0, got {self.max_violations}")
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, violations: ViolationList) -> str:
        """Format violations as rich formatted string.

        Args:
            violations: Violations to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output, force_terminal=True, highlight=False, width=self._config.width
        )

        if self._config.codes is not None:
            violations = violations.find_by_codes(self._config.codes)

        self._render_header(console, violations)

        if violations:
            self._render_table(console, violations)
            if self._config.show_summary:
                self._render_summary(console, violations)

        return output.getvalue()

    def _render_header(self, console: Console, violations: ViolationList) -> None:
        """Render header with count."""
        console.print()
        console.rule("[bold]VIOLATIONS[/bold]")
        console.print()
        console.print(f"[bold]Violations:[/bold] {len(violations)}")
        console.print()

    def _render_table(self, console: Console, violations: ViolationList) -> None:
        """Render one row per violation, offset order."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Code")
        table.add_column("Path")
        table.add_column("Message")

        limit = self._config.max_violations
        for offset in violations.offsets()[:limit]:
            violation = violations[offset]
            table.add_row(
                str(offset),
                escape(violation.code or NO_CODE),
                escape(_property_path(violation)),
                escape(violation.message),
            )
        console.print(table)

        if limit is not None and len(violations) > limit:
            console.print(f"[dim]... {len(violations) - limit} more[/dim]")
        console.print()

    def _render_summary(self, console: Console, violations: ViolationList) -> None:
        """Render per-code counts."""
        by_code: dict[str, int] = {}
        for violation in violations:
            key = violation.code or NO_CODE
            by_code[key] = by_code.get(key, 0) + 1

        console.print("[bold]BY CODE[/bold]")
        for code, count in sorted(by_code.items()):
            console.print(f"  [yellow]{escape(code)}[/yellow]: {count}")
        console.print()


def _property_path(violation: ViolationProtocol) -> str:
    """Property path if the violation has one. Protocol does not require it."""
    return getattr(violation, "property_path", "") or ""
