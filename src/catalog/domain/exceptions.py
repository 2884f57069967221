"""Domain-level exceptions.

Request-shape violations are expressed as subclasses of DomainException
so the HTTP layer can catch them uniformly and answer with a 400.
Failures raised by the document store are deliberately not part of this
hierarchy; they propagate to the hosting runtime untouched.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object invariant was violated."""


class MalformedRequestError(ValidationError):
    """The request body is not a JSON object."""
