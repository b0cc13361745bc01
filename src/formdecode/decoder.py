"""
Decoder for fully-buffered ``multipart/form-data`` request bodies.

The body is scanned as bytes: parts are cut at the boundary delimiters,
each part is split once at its blank line into a header block and the
content, and the content is kept verbatim apart from the line break that
precedes the next delimiter. Only header lines are decoded to text.
"""

import re

from formdecode.exceptions import MalformedPart, MissingBoundary
from formdecode.formdata import Field, FormData
from formdecode.util import to_bytes

__all__ = ["extract_boundary", "decode"]

_CRLF = b"\r\n"
_BLANK_LINE = b"\r\n\r\n"
_BOUNDARY_PARAM = "boundary="

_re_filename = re.compile(
    r'^content-disposition:.*filename="([^"]+)"', re.IGNORECASE
)


def extract_boundary(content_type: str) -> str:
    """Return the boundary token of a ``Content-Type`` header value.

    Everything after ``boundary=`` up to the end of the value is the
    boundary; trailing parameters are not stripped. The media type itself
    is not checked.

    :raises MissingBoundary: if there is no ``boundary=`` parameter.
    """
    _, sep, boundary = content_type.partition(_BOUNDARY_PARAM)
    if not sep or not boundary:
        raise MissingBoundary("Boundary not found in %r" % content_type)
    return boundary


def _delimiter_pattern(boundary):
    # "--B", "--B--" and the CRLF after them. The closing delimiter may
    # end the body without a line break.
    return re.compile(
        b"--" + re.escape(boundary) + b"(?:--)?(?:\r\n|\\Z)"
    )


def _split_part(segment):
    pieces = segment.split(_BLANK_LINE)
    if len(pieces) != 2:
        raise MalformedPart(
            "Expected exactly one blank line between headers and content",
            segment,
        )
    return pieces


def _parse_headers(block, charset):
    try:
        lines = block.decode(charset).split("\r\n")
    except UnicodeDecodeError:
        raise MalformedPart("Part headers failed to decode", block)

    headerlist = []
    filename = None
    for line in lines:
        match = _re_filename.search(line)
        if match:
            filename = match.group(1)
        name, col, value = line.partition(":")
        name = name.strip()
        if col and name:
            headerlist.append((name.title(), value.strip()))
    return headerlist, filename


def _parse_part(segment, charset):
    header_block, content = _split_part(segment)
    if not content.endswith(_CRLF):
        raise MalformedPart("Missing line break before delimiter", segment)
    headerlist, filename = _parse_headers(header_block, charset)
    content = content[: -len(_CRLF)]
    if filename is None:
        try:
            content.decode(charset)
        except UnicodeDecodeError:
            raise MalformedPart("Field value failed to decode", segment)
    return Field(
        content,
        filename=filename,
        headerlist=headerlist,
        charset=charset,
    )


def decode(body, boundary, charset="utf8") -> FormData:
    """Decode a ``multipart/form-data`` body into :class:`FormData`.

    :param body: The complete request body. Text is encoded with
        ``charset`` first.
    :param boundary: The boundary token, as returned by
        :func:`extract_boundary`.
    :param charset: Charset for part headers and plain-value fields.
    :raises MalformedPart: if any part lacks a single blank line between
        its headers and content. No partial result is returned.
    """
    body = to_bytes(body, charset)
    delimiter = _delimiter_pattern(to_bytes(boundary, charset))

    fields = []
    for segment in delimiter.split(body):
        if not segment.strip():
            continue
        fields.append(_parse_part(segment, charset))
    return FormData(fields)
