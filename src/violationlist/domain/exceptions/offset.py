"""Offset lookup exception."""

from violationlist.domain.exceptions.base import ViolationListError


class OffsetNotFoundError(ViolationListError, IndexError):
    """No violation stored at the requested offset.

    Raised by ViolationList.get() and ViolationList.__getitem__().
    Inherits IndexError so generic sequence code can catch it.

    Attributes:
        offset: Requested offset (never assigned or already removed)
    """

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f'The offset "{offset}" does not exist.')
