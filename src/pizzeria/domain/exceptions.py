"""Domain-level exceptions.

Every rejected pizza operation is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A precondition on a pizza or catalog option was violated."""


class EntityNotFoundError(DomainException):
    """A name lookup in a size, type or extras catalog found no option."""
