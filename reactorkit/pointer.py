"""A write cursor over a mutable byte buffer."""


class Cursor:
    """Writes bytes into a ``bytearray`` at a moving position."""

    def __init__(self, buffer, position=0):
        if not 0 <= position <= len(buffer):
            raise IndexError(f"position {position} outside buffer of size {len(buffer)}")
        self.buffer = buffer
        self.position = position

    def move(self, size):
        """Move the position by ``size`` bytes, which may be negative."""
        position = self.position + size
        if position < 0:
            raise IndexError(f"cannot move to negative position {position}")
        self.position = position

    def push(self, data):
        """Write ``data`` at the position and advance past it, growing the buffer if needed."""
        data = bytes(data)
        if self.position > len(self.buffer):
            raise IndexError(f"position {self.position} is past the end of the buffer")
        self.buffer[self.position:self.position + len(data)] = data
        self.position += len(data)

    def push_byte(self, byte):
        """Write a single byte value and advance by one."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"{byte} is not a byte value")
        self.push(bytes((byte,)))