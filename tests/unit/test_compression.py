# Unit tests for utils/compression.py

import pytest
import os
import sys
import zlib

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'plumb-project'))

from utils import compression
from utils.errors import CorruptObject


class TestCompress:
    # Tests for compression.compress()

    def test_output_is_a_zlib_stream(self):
        with compression.compress(b'blob 6\x00hello\n') as out:
            assert zlib.decompress(out.getvalue()) == b'blob 6\x00hello\n'

    def test_uses_default_level(self):
        # 0x78 0x9c is the zlib header written at the default level
        with compression.compress(b'abcdefgh' * 1000) as out:
            assert out.getvalue()[:2] == b'\x78\x9c'

    def test_empty_input(self):
        with compression.compress(b'') as out:
            assert zlib.decompress(out.getvalue()) == b''


class TestDecompress:
    # Tests for compression.decompress()

    def test_inflates_zlib_stream(self):
        with compression.decompress(zlib.compress(b'tree 0\x00')) as out:
            assert out.getvalue() == b'tree 0\x00'

    def test_output_larger_than_window(self):
        # Several 32 KiB windows of incompressible and highly compressible data
        data = os.urandom(3 * compression.WINDOW_SIZE + 17) + b'\x00' * 200000
        with compression.decompress(zlib.compress(data)) as out:
            assert out.getvalue() == data

    def test_round_trip_through_compress(self):
        data = os.urandom(100000)
        with compression.compress(data) as packed:
            with compression.decompress(packed.getvalue()) as unpacked:
                assert unpacked.getvalue() == data

    def test_garbage_is_corrupt(self):
        with pytest.raises(CorruptObject):
            compression.decompress(b'definitely not zlib')

    def test_truncated_stream_is_corrupt(self):
        packed = zlib.compress(b'hello world' * 100)
        with pytest.raises(CorruptObject):
            compression.decompress(packed[:-6])

    def test_empty_input_is_corrupt(self):
        with pytest.raises(CorruptObject):
            compression.decompress(b'')

    def test_trailing_bytes_after_stream_are_corrupt(self):
        packed = zlib.compress(b'blob 6\x00hello\n')
        with pytest.raises(CorruptObject):
            compression.decompress(packed + b'extra')
