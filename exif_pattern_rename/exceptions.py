"""
Exceptions raised while resolving tags and rendering file names.
"""


class RenameError(Exception):
    """Base class for errors raised by exif_pattern_rename."""
    pass


class TagResolutionError(RenameError):
    """A single tag alternative could not be resolved for a file."""
    pass


class MetadataUnavailable(TagResolutionError):
    """
    Raised when a metadata field cannot be read for a file.

    Covers a field that is absent, a file that cannot be decoded, and a
    timestamp value that does not parse.
    """

    def __init__(self, path, field, message=None):
        self.path = path
        self.field = field

        if message:
            super().__init__(message)
        else:
            super().__init__(f"Metadata field {field!r} unavailable for {path}")


class CaptureTimeUnavailable(RenameError):
    """Raised when none of the capture timestamp fields resolve for a file."""

    def __init__(self, path, fields=()):
        self.path = path
        self.fields = tuple(fields)
        super().__init__(
            f"No capture timestamp for {path} (tried: {', '.join(self.fields) or 'nothing'})"
        )
