class RssFilterError(Exception):
    """Base class for errors that end a filter request."""


class ValidationError(RssFilterError):
    """Request parameters are missing or malformed. Raised before any fetch."""


class FetchError(RssFilterError):
    """The source feed could not be downloaded or parsed."""


class EncodingError(RssFilterError):
    """The filtered document could not be serialized to XML."""
