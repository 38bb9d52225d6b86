# What it does: Renders commit metadata into the payload of a "commit" object, and reads it back
# How it does: `build_commit` writes the tree line, an optional parent line, author/committer lines sharing one timestamp, a blank line and the message. It does no hashing; the caller hands the bytes to objects.hash_object
# What data structure it uses: Directed Acyclic Graph (DAG) (each commit points at its parent, forming the history graph); the payload itself is a list of text lines

import time

from .errors import InvalidArgs, InvalidObject
from .hashing import is_valid_hash


def format_tz_offset(offset_seconds):  # 3600 -> '+0100', -16200 -> '-0430'
    sign = '-' if offset_seconds < 0 else '+'
    minutes = abs(int(offset_seconds)) // 60
    return f'{sign}{minutes // 60:02d}{minutes % 60:02d}'


def _local_offset(timestamp):
    return time.localtime(timestamp).tm_gmtoff


def build_commit(tree_hash, parent_hash, author_name, author_email, message, timestamp=None, tz_offset=None):
    """
    Returns the commit payload as bytes.

    The timestamp (seconds since the epoch) and the UTC offset (seconds east of
    UTC) are captured once, so the author and committer lines are always
    identical. Both default to "now" in local time.
    """
    if not is_valid_hash(tree_hash):
        raise InvalidArgs(f"invalid tree hash '{tree_hash}'")
    if parent_hash is not None and not is_valid_hash(parent_hash):
        raise InvalidArgs(f"invalid parent hash '{parent_hash}'")

    if timestamp is None:
        timestamp = int(time.time())
    if tz_offset is None:
        tz_offset = _local_offset(timestamp)
    signature = f"{author_name} <{author_email}> {timestamp} {format_tz_offset(tz_offset)}"

    lines = [f'tree {tree_hash}']
    if parent_hash:
        lines.append(f'parent {parent_hash}')
    lines.append(f'author {signature}')
    lines.append(f'committer {signature}')
    lines.append('')
    lines.append(message)

    return ('\n'.join(lines) + '\n').encode()


def parse_commit(content):
    """
    Splits a commit payload into its fields.

    Returns a dict with 'tree', 'parents' (a list), 'author', 'committer' and
    'message'. Raises InvalidObject when the payload has no tree line or no
    blank line ending the headers.
    """
    try:
        text = bytes(content).decode('utf-8')
    except UnicodeDecodeError:
        raise InvalidObject("commit payload is not valid UTF-8")

    headers, sep, message = text.partition('\n\n')
    if not sep:
        raise InvalidObject("commit payload has no message separator")

    commit = {'tree': None, 'parents': [], 'author': None, 'committer': None, 'message': message}
    for line in headers.split('\n'):
        key, _, value = line.partition(' ')
        if key == 'parent':
            commit['parents'].append(value)
        elif key in ('tree', 'author', 'committer'):
            commit[key] = value

    if not commit['tree']:
        raise InvalidObject("commit payload has no tree line")
    return commit
