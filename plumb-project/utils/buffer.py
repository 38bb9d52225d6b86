# What it does: A growable byte buffer used to accumulate codec output and object payloads
# How it does: Keeps a preallocated bytearray plus a separate `size`. When an append does not fit, capacity is doubled until it does, so repeated appends cost amortized O(1)
# What data structure it uses: Dynamic array (bytearray with explicit size/capacity bookkeeping)

import struct

from .errors import OutOfMemory

INITIAL_CAPACITY = 8192
MAX_CAPACITY = 2 ** (struct.calcsize('P') * 8) - 1  # SIZE_MAX of the platform


class ByteBuffer:
    """
    Owned byte sequence with size/capacity bookkeeping.

    The zero state (no storage, size and capacity 0) is valid and can be
    released any number of times. Use it as a context manager to make sure the
    storage is dropped on every exit path.
    """

    def __init__(self, initial_capacity=0):
        self.data = bytearray()
        self.size = 0
        self.capacity = 0
        if initial_capacity:
            self._reserve(initial_capacity)

    def __len__(self):
        return self.size

    def __bytes__(self):
        return self.getvalue()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def getvalue(self):  # Returns a copy of the used part of the buffer
        return bytes(self.data[:self.size])

    def append_bytes(self, chunk):
        needed = len(chunk)
        if needed == 0:
            return
        if needed > self.capacity - self.size:
            self._grow(needed)
        self.data[self.size:self.size + needed] = chunk
        self.size += needed

    def append_formatted(self, fmt, *args):
        self.append_bytes((fmt % args).encode('utf-8'))

    def release(self):
        self.data = bytearray()
        self.size = 0
        self.capacity = 0

    def _grow(self, pending):
        if pending > MAX_CAPACITY - self.size:
            raise OutOfMemory(f"buffer cannot hold {self.size} + {pending} bytes")
        new_cap = self.capacity or 1
        while new_cap < self.size + pending:
            if new_cap > MAX_CAPACITY // 2:
                new_cap = MAX_CAPACITY
                break
            new_cap *= 2
        self._reserve(new_cap)

    def _reserve(self, new_cap):
        try:
            self.data.extend(bytes(new_cap - len(self.data)))
        except (MemoryError, OverflowError) as e:
            raise OutOfMemory(f"cannot grow buffer to {new_cap} bytes") from e
        self.capacity = new_cap
