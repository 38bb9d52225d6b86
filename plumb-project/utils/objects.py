# What it does: Manages the low-level object database, handling the storage and retrieval of all blobs, trees, and commits
# How it does: It implements a content-addressed storage system. `hash_object` frames content with its header, hashes it and (optionally) saves it compressed. `read_object` inflates an object, parses its header and checks the declared size. `object_exists` is a bare path probe
# What data structure it uses: Hash Table / Dictionary (the entire object store is a content-addressed dictionary where the SHA-1 hash is the key, sharded on disk by its first two hex characters)

import logging
import os
from collections import namedtuple

from . import compression, repository
from .errors import FileNotFound, InvalidArgs, InvalidObject, IoError
from .hashing import compute_digest, is_valid_hash
from .header import build_header, parse_header

logger = logging.getLogger(__name__)

OBJECT_TYPES = ('blob', 'tree', 'commit')

# kind is the header type, size the payload length, data the payload bytes
StoredObject = namedtuple('StoredObject', ['kind', 'size', 'data'])


def _validated_path(repo_root, sha1):
    if not is_valid_hash(sha1):
        raise InvalidArgs(f"invalid object name '{sha1}': expected 40 lowercase hexadecimal characters")
    return repository.object_path(repo_root, sha1)


def _remove_partial(object_path):
    try:
        os.unlink(object_path)
    except OSError as e:
        logger.warning("could not remove partial object %s: %s", object_path, e)


def hash_object(repo_root, content, obj_type, write=True):  # Hashes content and optionally writes it as an object of the given type ('blob', 'tree', 'commit')
    if not obj_type or ' ' in obj_type or '\0' in obj_type:
        raise InvalidArgs(f"invalid object type '{obj_type}'")

    data = build_header(obj_type, len(content)) + bytes(content)
    sha1 = compute_digest(data)

    if write:
        object_path = repository.object_path(repo_root, sha1)
        if os.path.exists(object_path):
            logger.debug("object %s already stored, skipping write", sha1)
            return sha1

        try:
            os.makedirs(os.path.dirname(object_path), exist_ok=True)
        except OSError as e:
            raise IoError(f"cannot create object directory for {sha1}: {e}") from e

        with compression.compress(data) as compressed:
            try:
                f = open(object_path, 'xb')
            except FileExistsError:
                logger.debug("object %s written concurrently, keeping existing file", sha1)
                return sha1
            except OSError as e:
                raise IoError(f"cannot create object {sha1}: {e}") from e

            try:
                with f:
                    f.write(compressed.getvalue())
            except OSError as e:
                # A partial file would make every later write of this object a no-op
                _remove_partial(object_path)
                raise IoError(f"cannot write object {sha1}: {e}") from e
        logger.debug("stored %s %s (%d bytes)", obj_type, sha1, len(content))

    return sha1


def read_object(repo_root, sha1):  # Reads an object by its SHA-1 hash and returns it as a StoredObject
    object_path = _validated_path(repo_root, sha1)

    try:
        with open(object_path, 'rb') as f:
            compressed_data = f.read()
    except FileNotFoundError:
        raise FileNotFound(f"Object not found: {sha1}")
    except OSError as e:
        raise IoError(f"cannot read object {sha1}: {e}") from e

    with compression.decompress(compressed_data) as inflated:
        data = inflated.getvalue()

    obj_type, declared_size, payload_offset = parse_header(data)
    content = data[payload_offset:]
    if declared_size != len(content):
        raise InvalidObject(
            f"invalid object {sha1} (size mismatch: header says {declared_size}, found {len(content)})")

    logger.debug("read %s %s (%d bytes)", obj_type, sha1, declared_size)
    return StoredObject(obj_type, declared_size, content)


def object_exists(repo_root, sha1):  # Existence probe only; the object is neither read nor validated
    return os.path.isfile(_validated_path(repo_root, sha1))

