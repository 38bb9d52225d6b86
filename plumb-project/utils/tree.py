# What it does: Encodes and decodes tree objects, and snapshots a directory on disk into blobs and trees
# How it does: `serialize_tree` sorts entries by name and emits "<mode> <name>\0<20 raw hash bytes>" per entry. `parse_tree` walks that format back. `build_tree` walks a directory recursively, storing every file as a blob and every subdirectory as a tree
# What data structure it uses: Merkle Tree (each tree's hash covers the hashes of its children), built with recursion; one list of entries per directory level

import logging
import os
import stat
from collections import namedtuple

from . import objects, repository
from .errors import FileNotFound, InvalidObject, IoError, PlumbError
from .hashing import HASH_RAW_LEN, hex_to_raw, is_valid_hash, raw_to_hex

logger = logging.getLogger(__name__)

MODE_FILE = 0o100644
MODE_EXECUTABLE = 0o100755
MODE_SYMLINK = 0o120000
MODE_DIR = 0o40000

# Closed table: any mode not listed here is not a valid tree entry
MODE_KINDS = {
    MODE_FILE: 'blob',
    MODE_EXECUTABLE: 'blob',
    MODE_SYMLINK: 'blob',
    MODE_DIR: 'tree',
}

TreeEntry = namedtuple('TreeEntry', ['mode', 'kind', 'name', 'hash'])


def mode_to_kind(mode):
    try:
        return MODE_KINDS[mode]
    except KeyError:
        raise InvalidObject(f"unsupported tree entry mode {mode:o}")


def make_entry(mode, name, sha1):  # Builds a TreeEntry, deriving its kind from the mode
    return TreeEntry(mode, mode_to_kind(mode), name, sha1)


def _encoded_name(entry):
    name = entry.name
    if not name or '/' in name or '\0' in name:
        raise InvalidObject(f"invalid tree entry name {name!r}")
    try:
        return name.encode('utf-8')
    except UnicodeEncodeError:
        raise InvalidObject(f"tree entry name {name!r} is not valid UTF-8")


def serialize_tree(entries):
    """
    Encodes tree entries into the binary tree payload.

    Entries are sorted by the bytes of their UTF-8 name first, so the result
    (and the tree's hash) does not depend on the order the caller produced them
    in. Sorting is stable, and already sorted input encodes to the same bytes.
    """
    encoded = []
    for entry in entries:
        mode_to_kind(entry.mode)
        if not is_valid_hash(entry.hash):
            raise InvalidObject(f"invalid hash {entry.hash!r} for tree entry {entry.name!r}")
        encoded.append((_encoded_name(entry), entry))

    encoded.sort(key=lambda pair: pair[0])

    parts = []
    previous = None
    for name, entry in encoded:
        if name == previous:
            raise InvalidObject(f"duplicate tree entry name {entry.name!r}")
        previous = name
        parts.append(b'%o ' % entry.mode + name + b'\0' + hex_to_raw(entry.hash))
    return b''.join(parts)


def parse_tree(data):  # Decodes a tree payload into a list of TreeEntry, in stored order
    entries = []
    offset = 0
    end = len(data)
    while offset < end:
        space = data.find(b' ', offset)
        if space == -1:
            raise InvalidObject("malformed tree entry (no space after mode)")
        mode_text = bytes(data[offset:space])
        if not mode_text or any(c not in b'01234567' for c in mode_text):
            raise InvalidObject(f"malformed tree entry mode {mode_text!r}")
        mode = int(mode_text, 8)

        nul = data.find(b'\0', space + 1)
        if nul == -1:
            raise InvalidObject("malformed tree entry (unterminated name)")
        try:
            name = bytes(data[space + 1:nul]).decode('utf-8')
        except UnicodeDecodeError:
            raise InvalidObject("malformed tree entry (name is not UTF-8)")
        if not name:
            raise InvalidObject("malformed tree entry (empty name)")

        hash_start = nul + 1
        hash_end = hash_start + HASH_RAW_LEN
        if hash_end > end:
            raise InvalidObject(f"malformed tree entry {name!r} (truncated hash)")

        entries.append(make_entry(mode, name, raw_to_hex(data[hash_start:hash_end])))
        offset = hash_end
    return entries


def _file_mode(st):
    return MODE_EXECUTABLE if st.st_mode & stat.S_IXUSR else MODE_FILE


def build_tree(repo_root, dir_path):
    """
    Snapshots the direct children of `dir_path` and returns their entries.

    Regular files and symlinks become blobs; subdirectories are walked
    recursively and stored as trees. Every object is persisted. The returned
    list follows directory enumeration order; serialize_tree sorts it.
    Anything that is not a file, symlink or directory raises InvalidObject and
    aborts the whole walk.
    """
    entries = []
    try:
        with os.scandir(dir_path) as it:
            children = list(it)
    except FileNotFoundError as e:
        raise FileNotFound(f"no such directory: {dir_path}") from e
    except OSError as e:
        raise IoError(f"cannot list directory {dir_path}: {e}") from e

    for child in children:
        if child.name == repository.PLUMB_DIR:
            continue

        try:
            st = child.stat(follow_symlinks=False)
            if stat.S_ISLNK(st.st_mode):
                target = os.readlink(child.path)
                sha1 = objects.hash_object(repo_root, os.fsencode(target), 'blob')
                entries.append(make_entry(MODE_SYMLINK, child.name, sha1))
            elif stat.S_ISREG(st.st_mode):
                with open(child.path, 'rb') as f:
                    content = f.read()
                sha1 = objects.hash_object(repo_root, content, 'blob')
                entries.append(make_entry(_file_mode(st), child.name, sha1))
            elif stat.S_ISDIR(st.st_mode):
                sub_entries = build_tree(repo_root, child.path)
                sha1 = objects.hash_object(repo_root, serialize_tree(sub_entries), 'tree')
                entries.append(make_entry(MODE_DIR, child.name, sha1))
            else:
                raise InvalidObject(f"unsupported file type at {child.path}")
        except PlumbError:
            raise
        except OSError as e:
            raise IoError(f"cannot snapshot {child.path}: {e}") from e

    logger.debug("built %d entries for %s", len(entries), dir_path)
    return entries


def write_tree(repo_root, dir_path=None):  # Snapshots a directory (the repo root by default) and returns the root tree hash
    if dir_path is None:
        dir_path = repo_root
    entries = build_tree(repo_root, dir_path)
    return objects.hash_object(repo_root, serialize_tree(entries), 'tree')
