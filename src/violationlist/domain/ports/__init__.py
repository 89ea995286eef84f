"""Domain ports: Protocols for pluggable violations and containers."""

from violationlist.domain.ports.violation import ViolationProtocol
from violationlist.domain.ports.violation_list import ViolationListProtocol

__all__ = [
    "ViolationProtocol",
    "ViolationListProtocol",
]
