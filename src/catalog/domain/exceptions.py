"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Deletion refusals are not exceptions: the guard reports them as a
``DeletionDecision`` value.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidValueError(ValidationError):
    """A monetary value is negative or not a number."""


class NonMonotonicTimeError(ValidationError):
    """A price entry is dated before the latest entry in its ledger."""


class UnknownFacetIdError(ValidationError):
    """A facet id does not exist in the reference data."""

    def __init__(self, kind: str, facet_id: str) -> None:
        self.kind = kind
        self.facet_id = facet_id
        super().__init__(f"Unknown {kind} id '{facet_id}'")


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class EmptyLedgerError(DomainException):
    """A price ledger has no entries. Never expected on a created product."""


class PersistenceError(DomainException):
    """A storage collaborator failed while performing *operation*."""

    def __init__(self, operation: str, detail: str) -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed: {detail}")
