"""Domain-level exceptions.

Everything that can go wrong while loading a food or placing an order is
expressed as a subclass of DomainException, so the application handlers can
turn failures into typed results and the CLI can display them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or payload does not satisfy the domain rules."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class GatewayError(DomainException):
    """The backend could not be reached or answered with an error status."""
