# What it does: Builds and parses the "<type> <size>\0" prefix that frames every stored object
# How it does: build_header formats the prefix; parse_header scans for the space and the NUL and accumulates the decimal size with an explicit overflow check
# What data structure it uses: None (linear scan over bytes)

from .buffer import MAX_CAPACITY
from .errors import InvalidObject

_DIGITS = b'0123456789'


def build_header(obj_type, payload_len):
    return f'{obj_type} {payload_len}\0'.encode()


def parse_header(data):
    """
    Parses the object header at the start of `data`.

    Returns (obj_type, declared_size, payload_offset). The caller checks
    declared_size against len(data) - payload_offset.
    """
    space = data.find(b' ')
    if space == -1:
        raise InvalidObject("invalid object header (no space)")
    if space == 0:
        raise InvalidObject("invalid object header (empty type)")

    nul = data.find(b'\0', space + 1)
    if nul == -1:
        raise InvalidObject("invalid object header (no NUL)")

    size_field = data[space + 1:nul]
    if not size_field:
        raise InvalidObject("invalid object header (empty size)")

    declared_size = 0
    for c in size_field:
        if c not in _DIGITS:
            raise InvalidObject("invalid object header (bad size)")
        digit = c - 0x30
        if declared_size > (MAX_CAPACITY - digit) // 10:
            raise InvalidObject("invalid object header (size overflow)")
        declared_size = declared_size * 10 + digit

    try:
        obj_type = bytes(data[:space]).decode('ascii')
    except UnicodeDecodeError:
        raise InvalidObject("invalid object header (non-ASCII type)")
    if '\0' in obj_type:
        raise InvalidObject("invalid object header (NUL in type)")

    return obj_type, declared_size, nul + 1
