"""Domain errors raised by the access and authentication layers.

Access layers signal absence with ``None``/``False``; these exceptions are
for outcomes the caller must turn into a failure response. Each carries the
HTTP status the route layer answers with.
"""


class TuiterError(Exception):
    """Base class for tuiter domain errors."""

    status_code = 500


class NotFoundError(TuiterError):
    """Lookup yielded nothing (e.g. no user bound to the session)."""

    status_code = 404


class ForbiddenError(TuiterError):
    """Credentials missing or wrong, or the caller may not touch the record."""

    status_code = 403


class ConflictError(TuiterError):
    """Username or record id already taken."""

    status_code = 409
