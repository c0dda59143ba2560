"""Containers, HTTP message writing, sockets and byte strings for event-driven network programs."""

__version__ = "3.0.0"
__all__ = [
    "http",
    "keyedmaps",
    "linkedlist",
    "net",
    "openmap",
    "pointer",
    "text",
    "utility",
    "vector",
]