"""Constraint violation entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class ConstraintViolation:
    """Failed validation rule.

    Attributes:
        message: Human-readable message (already rendered)
        message_template: Raw message before parameter substitution
        parameters: Template parameters, e.g. {"{{ limit }}": "10"}
        root: Value validation started from
        property_path: Path from root to the invalid value, e.g. "address.zip"
        invalid_value: The value that failed validation
        plural: Plural form selector for message translation
        code: Machine-readable error code. None = no code
        constraint: Constraint that was violated
        cause: Underlying reason (e.g. caught exception)
    """

    message: str
    message_template: str = ""
    # Excluded from hash: may hold unhashable values
    parameters: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    root: object = field(default=None, hash=False)
    property_path: str = ""
    invalid_value: object = field(default=None, hash=False)
    plural: int | None = None
    code: str | None = None
    constraint: object = field(default=None, hash=False)
    cause: object = field(default=None, hash=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.message, str):
            raise TypeError(f"message must be str, got {type(self.message).__name__}")
        if not isinstance(self.message_template, str):
            raise TypeError(
                f"message_template must be str, got {type(self.message_template).__name__}"
            )
        if not isinstance(self.property_path, str):
            raise TypeError(
                f"property_path must be str, got {type(self.property_path).__name__}"
            )
        if self.code is not None and not isinstance(self.code, str):
            raise TypeError(f"code must be str or None, got {type(self.code).__name__}")
        if self.plural is not None and (
            not isinstance(self.plural, int) or isinstance(self.plural, bool)
        ):
            raise TypeError(f"plural must be int or None, got {type(self.plural).__name__}")
        if self.plural is not None and self.plural < 0:
            raise ValueError(f"plural must be >= 0, got {self.plural}")
        # Freeze caller's dict
        if not isinstance(self.parameters, MappingProxyType):
            object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def root_label(self) -> str:
        """Short description of root for display."""
        if self.root is None:
            return ""
        if isinstance(self.root, str):
            return self.root
        return f"Object({type(self.root).__qualname__})"

    def __str__(self) -> str:
        """Format violation for debugging.

        Example:
            Object(User).email:
                This value is not a valid email address. (code bd79c0ab)
        """
        label = self.root_label
        if label and self.property_path and not self.property_path.startswith("["):
            label += "."
        code = f" (code {self.code})" if self.code else ""
        return f"{label}{self.property_path}:\n    {self.message}{code}"
