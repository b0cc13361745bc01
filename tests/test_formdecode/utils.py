from contextlib import contextmanager
import unittest

from io import BytesIO

import formdecode
from formdecode.util import to_bytes

class BaseParserTest(unittest.TestCase):
    def setUp(self):
        self.data = BytesIO()
        self.boundary = 'foo'
        self.environ = {
            'REQUEST_METHOD':'POST',
            'CONTENT_TYPE':'multipart/form-data; boundary=%s' % self.boundary
        }

    def reset(self):
        self.data.seek(0)
        self.data.truncate()
        return self

    def write(self, *chunks):
        for chunk in chunks:
            self.data.write(to_bytes(chunk))
        return self

    def write_boundary(self):
        self.write(b'--', to_bytes(self.boundary), b'\r\n')

    def write_end(self):
        self.write(b'--', to_bytes(self.boundary), b'--\r\n')

    def write_header(self, header, value, **opts):
        line = to_bytes(header) + b': ' + to_bytes(value)
        for opt, val in opts.items():
            if val is not None:
                line += b'; ' + to_bytes(opt) + b'="' + to_bytes(val) + b'"'
        self.write(line + b'\r\n')

    def write_field(self, name, data, filename=None, content_type=None):
        self.write_boundary()
        self.write_header("Content-Disposition", "form-data", name=name, filename=filename)
        if content_type:
            self.write_header("Content-Type", content_type)
        self.write(b"\r\n")
        self.write(data)
        self.write(b"\r\n")

    def get_buffer_copy(self):
        return BytesIO(self.data.getvalue())

    def parse(self, *lines, **kwargs):
        if lines:
            self.reset()
            self.write(*lines)
        kwargs.setdefault("boundary", self.boundary)
        return formdecode.decode(self.data.getvalue(), **kwargs)

    def parse_request(self, *lines, **kwargs):
        if lines:
            self.reset()
            self.write(*lines)

        environ = self.environ.copy()
        environ.setdefault('wsgi.input', self.get_buffer_copy())
        environ.setdefault('CONTENT_LENGTH', str(len(self.data.getvalue())))
        for key, value in list(kwargs.pop('environ', {}).items()):
            if value is None:
                environ.pop(key, None)
            else:
                environ[key] = value
        return formdecode.parse_request(environ, **kwargs)

    def assertParserFails(self, *a, **ka):
        self.assertRaises(formdecode.MultipartError, self.parse, *a, **ka)

    @contextmanager
    def assertMultipartError(self, message=None, error=formdecode.MultipartError):
        with self.assertRaises(error) as ex:
            yield
        if message:
            self.assertIn(message, str(ex.exception))
