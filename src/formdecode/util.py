from io import BytesIO

from multipart import copy_file, to_bytes

__all__ = ["to_bytes", "read_body"]


def read_body(stream, length=-1, buffer_size=2 ** 16):
    """Read ``length`` bytes from ``stream``, or everything up to EOF if
    ``length`` is negative."""
    body = BytesIO()
    copy_file(stream, body, maxread=length, buffer_size=buffer_size)
    return body.getvalue()
