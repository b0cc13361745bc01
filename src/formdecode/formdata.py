"""
Decoded form data: :class:`Field` for a single part and :class:`FormData`
for the ordered collection returned by :func:`formdecode.decode`.
"""

from collections.abc import Sequence
from typing import List, Optional, Tuple
from wsgiref.headers import Headers

from multipart import parse_options_header

from formdecode.util import to_bytes

__all__ = ["Field", "FormData"]


class Field(object):
    """A single part of a ``multipart/form-data`` body.

    A field is either a plain form value (``filename is None``) or a file
    upload. ``content`` follows that distinction: text for plain values,
    raw bytes for files. ``raw`` is always the undecoded payload.
    """

    #: List of headers as name/value pairs with normalized (Title-Case) names.
    headerlist: List[Tuple[str, str]]
    #: The 'filename' option of the Content-Disposition header, if present.
    filename: Optional[str]
    #: The payload without the trailing line break.
    raw: bytes

    def __init__(self, content, filename=None, name=None, headerlist=None,
                 charset="utf8"):
        self.raw = to_bytes(content, charset)
        self.filename = filename
        self.charset = charset
        self.headerlist = [(h.title(), v) for h, v in headerlist or ()]
        if name is None:
            name = self._disposition_option("name")
        self.name = name

    def _disposition_option(self, key):
        value = None
        for header, val in self.headerlist:
            if header == "Content-Disposition":
                value = parse_options_header(val)[1].get(key, value)
        return value

    @property
    def is_file(self) -> bool:
        return self.filename is not None

    @property
    def content(self):
        """Bytes for file uploads, decoded text for plain values."""
        if self.is_file:
            return self.raw
        return self.value

    @property
    def value(self) -> str:
        """Return the entire payload as decoded text."""
        return self.raw.decode(self.charset)

    @property
    def size(self) -> int:
        return len(self.raw)

    @property
    def headers(self) -> Headers:
        return Headers(self.headerlist)

    def header(self, name, default=None):
        """Return the value of the last header called ``name``, or a default
        value."""
        compare = name.title()
        value = default
        for header, val in self.headerlist:
            if header == compare:
                value = val
        return value

    @property
    def disposition(self) -> Optional[str]:
        return self.header("Content-Disposition")

    @property
    def content_type(self) -> Optional[str]:
        """The media type of the Content-Type header, without options."""
        value = self.header("Content-Type")
        if value is None:
            return None
        return parse_options_header(value)[0]

    def __eq__(self, other):
        if not isinstance(other, Field):
            return NotImplemented
        return (self.name, self.filename, self.raw) == (
            other.name, other.filename, other.raw)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "<%s name=%r filename=%r size=%d>" % (
            self.__class__.__name__, self.name, self.filename, self.size)


class FormData(Sequence):
    """An immutable, ordered sequence of :class:`Field` objects.

    Fields keep the order in which their parts occur in the body. Nothing
    is merged or deduplicated; lookups by name scan the sequence.
    """

    def __init__(self, fields=()):
        self._fields = tuple(fields)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._fields[index])
        return self._fields[index]

    def __len__(self):
        return len(self._fields)

    def __iter__(self):
        return iter(self._fields)

    def __eq__(self, other):
        if isinstance(other, FormData):
            return self._fields == other._fields
        if isinstance(other, (list, tuple)):
            return self._fields == tuple(other)
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, list(self._fields))

    def get(self, name, default=None):
        """Return the first field with that name or a default value."""
        for field in self._fields:
            if field.name == name:
                return field
        return default

    def getall(self, name):
        """Return a list of all fields with that name."""
        return [f for f in self._fields if f.name == name]

    @property
    def files(self):
        """Return a list of the file upload fields."""
        return [f for f in self._fields if f.is_file]
