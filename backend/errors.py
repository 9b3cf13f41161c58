"""Error kinds raised by stores and services.

Controllers translate these into HTTP responses. ``RemoteUnavailableError``
never reaches a controller: the persistence layer answers it by falling back
to the local store.
"""


class AtlasError(Exception):
    """Base class for all application errors."""


class RemoteUnavailableError(AtlasError):
    """The record store is unreachable or its tables are not provisioned."""


class RecordNotFoundError(AtlasError):
    """No store holds a record with the requested id."""


class DuplicateRecordError(AtlasError):
    """A record with the same id already exists in the store."""


class StorageUnavailableError(AtlasError):
    """Neither the record store nor the local fallback store accepted the operation."""


class ValidationError(AtlasError):
    """Input rejected before any store was touched."""


class FileTooLargeError(ValidationError):
    pass


class TransportError(AtlasError):
    """The blob upload failed; no record was created."""
