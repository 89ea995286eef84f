"""violationlist - ordered, indexable collections of validation violations."""

__version__ = "0.1.0"

from violationlist.domain.exceptions import OffsetNotFoundError, ViolationListError
from violationlist.domain.model import ConstraintViolation, ViolationList

__all__ = [
    "ConstraintViolation",
    "OffsetNotFoundError",
    "ViolationList",
    "ViolationListError",
    "__version__",
]
