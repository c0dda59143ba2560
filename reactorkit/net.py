"""Address resolution, non-blocking socket creation and TLS server contexts."""

import socket
import ssl
from dataclasses import dataclass


@dataclass(frozen=True)
class _AddressInfo:
    family: int
    socktype: int
    proto: int
    address: tuple
    passive: bool


def resolve(host, service, family=0, socktype=0, flags=0):
    """Resolve ``host`` and ``service`` to the first matching address.

    Raises socket.gaierror when the name cannot be resolved.
    """
    results = socket.getaddrinfo(host, service, family, socktype, 0, flags)
    if not results:
        raise OSError(f"no address found for {host!r} {service!r}")
    family, socktype, proto, _, address = results[0]
    return _AddressInfo(family, socktype, proto, address, bool(flags & socket.AI_PASSIVE))


def open_socket(addrinfo):
    """Return a non-blocking socket: listening if the address was resolved as passive, else connecting."""
    sock = socket.socket(addrinfo.family, addrinfo.socktype, addrinfo.proto)
    sock.setblocking(False)
    if addrinfo.passive:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            if hasattr(socket, "SO_REUSEPORT"):
                try:
                    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
                except OSError:
                    pass
            sock.bind(addrinfo.address)
            sock.listen(socket.SOMAXCONN)
        except OSError:
            sock.close()
            raise
    else:
        sock.connect_ex(addrinfo.address)
    return sock


def ssl_server_context(certificate, private_key):
    """Return a TLS server context loaded with a PEM certificate and private key."""
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
    context.load_cert_chain(certificate, private_key)
    return context