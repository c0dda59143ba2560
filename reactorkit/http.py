"""Writing HTTP/1.1 requests and responses and looking up header fields."""

from dataclasses import dataclass

from reactorkit.utility import u32_toa

SERVER_NAME = b"reactor"


@dataclass(frozen=True)
class Field:
    """A header field name and value."""

    name: bytes
    value: bytes

    def encode(self):
        """Return the field as a header line."""
        return bytes(self.name) + b": " + bytes(self.value) + b"\r\n"


def field_lookup(fields, name):
    """Return the value of the first field named ``name`` (case-insensitive), or None."""
    name = bytes(name).lower()
    for field in fields:
        if bytes(field.name).lower() == name:
            return field.value
    return None


def write_request(method, target, host, content_type=b"", body=b""):
    """Return an encoded request; a non-empty body gets type and length fields."""
    body = bytes(body)
    parts = [bytes(method), b" ", bytes(target), b" HTTP/1.1\r\n",
             Field(b"Host", bytes(host)).encode()]
    if body:
        parts.append(Field(b"Content-Type", bytes(content_type or b"")).encode())
        parts.append(Field(b"Content-Length", u32_toa(len(body)).encode()).encode())
    parts.append(b"\r\n")
    parts.append(body)
    return b"".join(parts)


def write_response(status, date, content_type=b"", body=b""):
    """Return an encoded response with server, date, optional type and length fields."""
    body = bytes(body)
    parts = [b"HTTP/1.1 ", bytes(status), b"\r\n",
             Field(b"Server", SERVER_NAME).encode(),
             Field(b"Date", bytes(date)).encode()]
    if content_type:
        parts.append(Field(b"Content-Type", bytes(content_type)).encode())
    parts.append(Field(b"Content-Length", u32_toa(len(body)).encode()).encode())
    parts.append(b"\r\n")
    parts.append(body)
    return b"".join(parts)