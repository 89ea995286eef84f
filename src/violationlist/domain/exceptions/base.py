"""Base exceptions for violationlist domain."""


class ViolationListError(Exception):
    """Root exception for all violationlist errors.

    All domain exceptions inherit from this.
    Allows catching all violationlist-specific errors.
    """
