# Unit tests for utils/buffer.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'plumb-project'))

from utils import buffer as buffer_module
from utils.buffer import ByteBuffer
from utils.errors import OutOfMemory


class TestAppendBytes:
    # Tests for ByteBuffer.append_bytes()

    def test_starts_in_zero_state(self):
        buf = ByteBuffer()
        assert buf.size == 0
        assert buf.capacity == 0
        assert buf.getvalue() == b''

    def test_appends_accumulate(self):
        buf = ByteBuffer()
        buf.append_bytes(b'hello ')
        buf.append_bytes(b'world')
        assert buf.getvalue() == b'hello world'
        assert len(buf) == 11
        assert buf.size <= buf.capacity

    def test_capacity_doubles_until_append_fits(self):
        buf = ByteBuffer(4)
        buf.append_bytes(b'abc')
        assert buf.capacity == 4
        buf.append_bytes(b'de')
        assert buf.capacity == 8
        buf.append_bytes(b'x' * 20)  # needs 25: 8 -> 16 -> 32
        assert buf.capacity == 32
        assert buf.getvalue() == b'abcde' + b'x' * 20

    def test_empty_append_does_not_allocate(self):
        buf = ByteBuffer()
        buf.append_bytes(b'')
        assert buf.capacity == 0

    def test_growth_past_limit_is_out_of_memory(self, monkeypatch):
        monkeypatch.setattr(buffer_module, 'MAX_CAPACITY', 16)
        buf = ByteBuffer()
        buf.append_bytes(b'x' * 10)
        with pytest.raises(OutOfMemory):
            buf.append_bytes(b'y' * 10)
        # The failed append leaves the buffer untouched
        assert buf.getvalue() == b'x' * 10


class TestAppendFormatted:
    # Tests for ByteBuffer.append_formatted()

    def test_formats_and_encodes(self):
        buf = ByteBuffer()
        buf.append_formatted('%s %d\0', 'blob', 6)
        assert buf.getvalue() == b'blob 6\x00'

    def test_encodes_utf8(self):
        buf = ByteBuffer()
        buf.append_formatted('%s', 'café')
        assert buf.getvalue() == 'café'.encode('utf-8')


class TestRelease:
    # Tests for ByteBuffer.release() and the context manager

    def test_release_resets_to_zero_state(self):
        buf = ByteBuffer()
        buf.append_bytes(b'data')
        buf.release()
        assert (buf.size, buf.capacity, buf.getvalue()) == (0, 0, b'')

    def test_release_zero_state_twice(self):
        buf = ByteBuffer()
        buf.release()
        buf.release()
        assert buf.size == 0

    def test_context_manager_releases_on_error(self):
        buf = ByteBuffer()
        with pytest.raises(RuntimeError):
            with buf:
                buf.append_bytes(b'partial')
                raise RuntimeError('boom')
        assert buf.capacity == 0
