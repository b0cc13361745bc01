"""
Build ``multipart/form-data`` bodies that :func:`formdecode.decode` reads
back. Test servers use this to replay or fabricate uploads.
"""

import binascii
import os

from formdecode.util import to_bytes

__all__ = ["encode", "content_type_header", "make_boundary"]


def make_boundary():
    return "----FormDecodeBoundary" + binascii.hexlify(os.urandom(12)).decode("ascii")


def content_type_header(boundary):
    return "multipart/form-data; boundary=%s" % boundary


def _disposition(field):
    line = "Content-Disposition: form-data"
    if field.name is not None:
        line += '; name="%s"' % field.name
    if field.filename is not None:
        line += '; filename="%s"' % field.filename
    return line


def encode(form, boundary, charset="utf8"):
    """Encode ``form`` (a :class:`~formdecode.FormData` or any iterable of
    :class:`~formdecode.Field`) into a request body delimited by
    ``boundary``."""
    delimiter = b"--" + to_bytes(boundary, charset)
    chunks = []
    for field in form:
        chunks.append(delimiter + b"\r\n")
        chunks.append(to_bytes(_disposition(field), charset) + b"\r\n")
        content_type = field.header("Content-Type")
        if content_type:
            chunks.append(to_bytes("Content-Type: " + content_type, charset) + b"\r\n")
        chunks.append(b"\r\n")
        chunks.append(field.raw + b"\r\n")
    chunks.append(delimiter + b"--\r\n")
    return b"".join(chunks)
