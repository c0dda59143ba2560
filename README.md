# reactorkit

Small building blocks for event-driven network programs. The package needs nothing outside the
standard library.

## Modules

- `reactorkit.utility`
  - `u32_len(n)` gives the number of decimal digits in an unsigned 32-bit integer.
  - `u32_toa(n)` gives its decimal text.
  - Both raise `ValueError` for values outside 0 to 4294967295.
  - `tsc()` returns a high-resolution timestamp in nanoseconds from `time.perf_counter_ns`.
- `reactorkit.pointer`
  - `Cursor(buffer, position=0)` writes into a `bytearray` at a moving position.
  - `push` writes bytes and grows the buffer when needed. `push_byte` writes a single byte.
  - `move` shifts the position and may take a negative amount.
- `reactorkit.linkedlist`
  - `LinkedList` is a circular doubly linked list with a sentinel `end()` node. Its `Node`
    handles stay valid while other nodes are added or removed.
  - It offers `push_front`, `push_back`, `insert`, `splice` (which can also move a node across
    lists), `erase`, `clear` and `find`.
  - `erase` and `clear` accept a release callback.
  - Iteration and `reversed()` yield the values.
- `reactorkit.openmap`
  - `OpenMap(hash_function=hash)` is an open-addressing hash set. It uses linear probing and
    backward-shift deletion.
  - Its table size is a power of two, at least 16, and is kept no more than half full.
- `reactorkit.keyedmaps`
  - `IntMap` maps non-zero integer keys to values. Key 0 is reserved.
  - `StrMap` maps string keys to values.
  - Both store `Entry(key, value)` records, which compare by key. Iterating a map yields its
    entries.
  - `insert` keeps the existing value when the key is already present, and hands the rejected
    entry to `release`.
  - `at` returns `None` for a missing key.
- `reactorkit.vector`
  - `Vector` is a growable sequence with a tracked `capacity()`.
  - It offers positional `insert`, `insert_range` and `insert_fill`, and `erase`,
    `erase_range`, `push_back`, `pop_back` and `clear`.
  - The removing methods accept a release callback.
- `reactorkit.text`
  - `Text` is a mutable byte string. It offers `find`, `insert`, `prepend`, `append`, `erase`,
    `replace` and `replace_all`.
  - `Text.load(path)` returns an empty text when the file cannot be opened.
  - `save(path)` writes over the start of a file that must already exist.
  - `read` and `write` work on binary streams.
- `reactorkit.http`
  - `write_request(method, target, host, content_type, body)` returns an HTTP/1.1 request as
    `bytes`.
  - `write_response(status, date, content_type, body)` does the same for a response.
  - `field_lookup(fields, name)` finds the value of a `Field` by name, ignoring case, or returns
    `None`.
- `reactorkit.net`
  - `resolve(host, service, family, socktype, flags)` returns the first address found. It raises
    `socket.gaierror` on failure.
  - `open_socket(addrinfo)` returns a non-blocking socket. An address resolved with
    `socket.AI_PASSIVE` gives a listening socket; any other address gives a connecting one.
  - `ssl_server_context(certificate, private_key)` loads PEM files into a TLS server context.

## Example

```python
from reactorkit.http import write_response
from reactorkit.keyedmaps import IntMap

message = write_response(b"200 OK", b"Wed, 05 Jan 2022 14:12:35 GMT", b"text/plain", b"hello")
assert message.startswith(b"HTTP/1.1 200 OK\r\nServer: reactor\r\n")

counts = IntMap()
counts.insert(1, 42)
assert counts.at(1) == 42
```

## What it does not do

- There is no event loop, no timers and no file-change notification.
- There is no HTTP server and no HTTP parser. The `http` module writes messages and looks up
  fields in ones you have already split into `Field` objects.
- `resolve` runs synchronously.

## Testing

```
pip install -e .[test]
pytest
```