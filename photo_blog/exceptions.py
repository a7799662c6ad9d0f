"""
Errors raised by the blog lifecycle operations.

Every error carries the HTTP status the views answer with: client faults
(bad input, undecodable image, unknown post) map to 4xx, storage faults
(asset I/O, database) map to 500.
"""


class BlogError(Exception):
    """Base class for all photo_blog errors."""

    status_code = 500
    default_message = "Blog operation failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogError):
    """Input did not match the operation's schema."""

    status_code = 400
    default_message = "Invalid input"

    def __init__(self, message=None, fields=None):
        super().__init__(message)
        self.fields = fields or {}


class DecodeError(BlogError):
    """Inline image payload could not be decoded."""

    status_code = 400
    default_message = "Malformed image payload"


class NotFound(BlogError):
    status_code = 404
    default_message = "Blog not found"


class AssetWriteError(BlogError):
    default_message = "Could not store image"


class AssetDeleteError(BlogError):
    default_message = "Could not delete image"


class PersistenceError(BlogError):
    default_message = "Database operation failed"
