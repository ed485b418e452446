class DaoError(Exception):
    """Base class for failures surfaced by the data-access layer."""


class InvalidArgument(DaoError, ValueError):
    """Malformed or missing input. Raised before any request reaches the store."""


class WriteConflict(DaoError):
    """A write violated a unique index (duplicate comment id, duplicate email)."""
