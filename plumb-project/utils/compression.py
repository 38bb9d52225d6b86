# What it does: Deflates objects before they hit disk and inflates them on the way back
# How it does: Drives zlib's streaming compressobj/decompressobj one 32 KiB window at a time, appending each drained window to a ByteBuffer until the stream reports its end
# What data structure it uses: ByteBuffer (dynamic array) as the output accumulator

import logging
import zlib

from .buffer import ByteBuffer, INITIAL_CAPACITY
from .errors import CorruptObject

logger = logging.getLogger(__name__)

WINDOW_SIZE = 32768


def decompress(data):
    """
    Inflates a complete zlib stream and returns the result as a ByteBuffer.

    Raises CorruptObject if zlib rejects the stream, if the input runs out
    before the end-of-stream marker, or if bytes follow that marker. On
    failure the partial output is released before the error propagates.
    """
    out = ByteBuffer(INITIAL_CAPACITY)
    inflater = zlib.decompressobj()
    pending = bytes(data)
    try:
        while True:
            window = inflater.decompress(pending, WINDOW_SIZE)
            out.append_bytes(window)
            if inflater.eof:
                break
            pending = inflater.unconsumed_tail
            if not pending and not window:
                raise CorruptObject("inflate failed: stream ended before end-of-stream marker")
        if inflater.unused_data:
            raise CorruptObject(
                f"inflate failed: {len(inflater.unused_data)} trailing bytes after end-of-stream marker")
    except zlib.error as e:
        out.release()
        raise CorruptObject(f"inflate failed (corrupt object?): {e}") from e
    except BaseException:
        out.release()
        raise

    logger.debug("inflated %d bytes into %d", len(data), len(out))
    return out


def compress(data):  # Deflates `data` at the default level and returns a ByteBuffer
    out = ByteBuffer(INITIAL_CAPACITY)
    deflater = zlib.compressobj(zlib.Z_DEFAULT_COMPRESSION)
    try:
        for start in range(0, len(data), WINDOW_SIZE):
            out.append_bytes(deflater.compress(data[start:start + WINDOW_SIZE]))
        out.append_bytes(deflater.flush(zlib.Z_FINISH))
    except zlib.error as e:
        out.release()
        raise CorruptObject(f"deflate failed: {e}") from e
    except BaseException:
        out.release()
        raise
    return out
