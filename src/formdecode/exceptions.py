class MultipartError(ValueError):
    """Base class for errors raised while decoding a form body."""


class MissingBoundary(MultipartError):
    """The ``Content-Type`` value has no ``boundary=`` parameter."""


class MalformedPart(MultipartError):
    """
    A part could not be split into a header block and content.

    The offending part is available as :attr:`segment` for diagnostics.
    """

    def __init__(self, message, segment=b""):
        super().__init__(message, segment)
        self.message = message
        self.segment = segment

    def __str__(self):
        return "%s: %r" % (self.message, self.segment[:64])


class NotMultipart(MultipartError):
    """The request body is not ``multipart/form-data``."""
