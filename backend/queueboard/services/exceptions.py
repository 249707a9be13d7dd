"""Queue service exceptions.

Each exception carries the HTTP status the API layer answers with, so
routes can convert any ServiceError without a per-type mapping. The
message becomes the ``error`` field of the response body.
"""


class ServiceError(Exception):
    """Base service exception; unexpected service failures answer 500."""

    status_code = 500


class NotFoundError(ServiceError):
    status_code = 404


class ValidationError(ServiceError):
    """Caller must correct the request."""

    status_code = 400


class StoreUnavailable(ServiceError):
    """Ledger read or write failed (network, auth, quota, missing credentials).

    Not retried. A status write that succeeded before a later failure stays applied.
    """

    status_code = 500


class InvalidAction(ValidationError):
    """Unrecognised queue action, or an action missing its ticket id."""
