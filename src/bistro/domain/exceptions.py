"""Domain-level exceptions.

Rule violations are expressed as subclasses of DomainException so the
entry point can catch them uniformly and display a friendly message.
Unknown menu codes are *not* errors: factories fall back to a default item.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""
