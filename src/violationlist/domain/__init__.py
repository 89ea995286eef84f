"""violationlist domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, types, operator, logging, collections.abc
"""

from violationlist.domain.exceptions import OffsetNotFoundError, ViolationListError
from violationlist.domain.model import ConstraintViolation, ViolationList
from violationlist.domain.ports import ViolationListProtocol, ViolationProtocol

__all__ = [
    # Exceptions
    "ViolationListError",
    "OffsetNotFoundError",
    # Entities
    "ConstraintViolation",
    "ViolationList",
    # Ports
    "ViolationProtocol",
    "ViolationListProtocol",
]
