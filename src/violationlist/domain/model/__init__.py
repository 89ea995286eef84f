"""Domain model entities."""

from violationlist.domain.model.violation import ConstraintViolation
from violationlist.domain.model.violation_list import ViolationList

__all__ = [
    "ConstraintViolation",
    "ViolationList",
]
