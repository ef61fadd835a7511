from __future__ import annotations


class CursorError(ValueError):
    pass


class Overread(CursorError):
    def __init__(self, position: int, length: int):
        super().__init__(f"buf overread at position {position} (length {length})")
        self.position = position
        self.length = length


class BufferTooShort(CursorError):
    def __init__(self):
        super().__init__("buf too short")


class InvalidRange(CursorError):
    def __init__(self, start: int, end: int, length: int):
        super().__init__(f"invalid range [{start}:{end}] for packet of length {length}")
        self.start = start
        self.end = end
        self.length = length


class Cursor:
    """Read position over a shared, read-only packet buffer.

    Sub-cursors view a slice of the same memory and keep their own position;
    a single cursor is not meant to be shared between threads.
    """
    __slots__ = ("buf", "pos")

    def __init__(self, data: bytes | bytearray | memoryview):
        self.buf = memoryview(data).toreadonly()
        self.pos = 0

    def __len__(self) -> int: return len(self.buf)
    def length(self) -> int: return len(self.buf)
    def remaining(self) -> int: return len(self.buf) - self.pos
    def tell(self) -> int: return self.pos
    def has_remaining(self) -> bool: return self.pos < len(self.buf)

    def sub_range(self, start: int, end: int) -> Cursor:
        # empty ranges are allowed, including [len:len]
        n = len(self.buf)
        if not (0 <= start <= end <= n):
            raise InvalidRange(start, end, n)
        return Cursor(self.buf[start:end])

    def sub_range_from_current(self) -> Cursor:
        return self.sub_range(self.pos, len(self.buf))

    def read_byte(self) -> int:
        if self.pos >= len(self.buf):
            raise Overread(self.pos, len(self.buf))
        b = self.buf[self.pos]
        self.pos += 1
        return b

