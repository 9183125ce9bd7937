"""Error taxonomy for gocost.

Every error raised by the store layer derives from GocostError, so the
command layer can report any of them with a single except clause.
"""


class GocostError(Exception):
    """Base class for all gocost errors."""

    kind = "Error"


class NotFoundError(GocostError, LookupError):
    """A referenced entity, month, or source month has no record."""

    kind = "NotFound"


class AlreadyExistsError(GocostError):
    """An add collided with an existing unique key."""

    kind = "AlreadyExists"


class InUseError(GocostError):
    """A category group is still referenced by categories."""

    kind = "InUse"


class MalformedDocumentError(GocostError, ValueError):
    """The data document could not be parsed."""

    kind = "MalformedDocument"


class StorageError(GocostError):
    """A filesystem operation failed."""

    kind = "IOError"


class ConfigError(GocostError):
    """The configuration document could not be read or parsed."""

    kind = "Config"
