"""Domain-level exceptions.

Rejected business requests (not found, negative quantity, not enough
stock) are *not* exceptions — they come back from the inventory engine
as ``Rejected`` results carrying an ``ErrorReason``.  The exceptions
here cover faults: corrupt records and store misuse.  All of them
subclass DomainException so the CLI layer can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A product invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
