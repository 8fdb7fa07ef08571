class ContentError(Exception):
    """Base class for failures surfaced by the content layer."""


class StoreUnavailable(ContentError):
    """The record store rejected or could not serve a request."""


class RecordNotFound(StoreUnavailable):
    """An update targeted an id the store does not hold."""


class ValidationFailed(ContentError):
    """A payload is missing required fields or holds out-of-range values."""

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = errors or []


class UploadFailed(ContentError):
    """Image persistence failed; the dependent record write is aborted."""
