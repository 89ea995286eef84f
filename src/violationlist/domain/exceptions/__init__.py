"""Domain exceptions."""

from violationlist.domain.exceptions.base import ViolationListError
from violationlist.domain.exceptions.offset import OffsetNotFoundError

__all__ = [
    "ViolationListError",
    "OffsetNotFoundError",
]
