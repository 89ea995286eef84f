"""violationlist application layer: consumers of ViolationList."""
