"""
Decode uploads straight from a WSGI environment, the way a test fixture
server handles a form submission.
"""

import logging

from multipart import parse_options_header

from formdecode.decoder import decode, extract_boundary
from formdecode.exceptions import MultipartError, NotMultipart
from formdecode.util import read_body

__all__ = ["parse_request"]

log = logging.getLogger(__name__)


def parse_request(environ, charset="utf8"):
    """Read the request body from ``environ`` and decode it.

    :param environ: A WSGI environment dictionary.
    :param charset: Default charset for part headers and text fields. A
        ``charset`` option on the Content-Type header takes precedence.
    :raises NotMultipart: if the request is not ``multipart/form-data``.
    :raises MultipartError: on a bad Content-Length or a truncated body,
        and for every decoding error.
    """
    content_type = environ.get("CONTENT_TYPE", "")
    if not content_type:
        raise NotMultipart("Missing Content-Type header")

    media_type, options = parse_options_header(content_type)
    if media_type != "multipart/form-data":
        raise NotMultipart("Unsupported Content-Type: %s" % media_type)
    charset = options.get("charset", charset)
    boundary = extract_boundary(content_type)

    try:
        content_length = int(environ.get("CONTENT_LENGTH") or "-1")
    except ValueError:
        raise MultipartError("Invalid Content-Length header")

    stream = environ.get("wsgi.input")
    body = read_body(stream, content_length) if stream is not None else b""
    if content_length > len(body):
        raise MultipartError("Unexpected end of data stream")

    log.debug("decoding %d byte multipart body", len(body))
    form = decode(body, boundary, charset)
    log.debug("decoded %d fields", len(form))
    return form
