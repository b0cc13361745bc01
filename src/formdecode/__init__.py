from formdecode.decoder import decode, extract_boundary
from formdecode.encoder import content_type_header, encode, make_boundary
from formdecode.exceptions import (
    MalformedPart,
    MissingBoundary,
    MultipartError,
    NotMultipart,
)
from formdecode.formdata import Field, FormData
from formdecode.wsgi import parse_request

__all__ = [
    'decode', 'extract_boundary', 'parse_request',
    'encode', 'content_type_header', 'make_boundary',
    'Field', 'FormData',
    'MultipartError', 'MissingBoundary', 'MalformedPart', 'NotMultipart',
]

__version__ = '1.0.0'
