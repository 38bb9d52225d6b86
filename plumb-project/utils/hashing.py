# What it does: Computes object identities and converts them between hex and raw form
# How it does: SHA-1 from hashlib over the header-prefixed object bytes. Trees store hashes as 20 raw bytes, everything else uses the 40-char lowercase hex form
# What data structure it uses: None beyond bytes/str; the store itself is the hash table these digests index

import hashlib
import re

from .errors import HashFailure, InvalidArgs

HASH_HEX_LEN = 40
HASH_RAW_LEN = 20

_HASH_RE = re.compile(r'[0-9a-f]{%d}' % HASH_HEX_LEN)


def compute_digest(data):  # Returns the 40-char hex SHA-1 of `data`
    try:
        hasher = hashlib.sha1()
    except ValueError as e:  # FIPS builds can refuse sha1
        raise HashFailure(f"cannot initialize sha1: {e}") from e
    hasher.update(data)
    return hasher.hexdigest()


def is_valid_hash(value):
    return isinstance(value, str) and _HASH_RE.fullmatch(value) is not None


def hex_to_raw(hex_hash):
    if not is_valid_hash(hex_hash):
        raise InvalidArgs(f"invalid hash '{hex_hash}': expected 40 lowercase hexadecimal characters")
    return bytes.fromhex(hex_hash)


def raw_to_hex(raw):
    if len(raw) != HASH_RAW_LEN:
        raise InvalidArgs(f"raw hash must be {HASH_RAW_LEN} bytes, got {len(raw)}")
    return bytes(raw).hex()
