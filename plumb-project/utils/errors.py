# What it does: Defines the closed set of error kinds raised by the object store and its codecs
# How it does: One exception class per kind, all rooted at PlumbError. Each class also derives from the closest builtin so callers that only know `except OSError` or `except ValueError` still catch it
# What data structure it uses: A class hierarchy acting as a tagged union (the `kind` attribute is the tag)


class PlumbError(Exception):
    kind = 'error'


class InvalidArgs(PlumbError, ValueError):  # Malformed hash or user input
    kind = 'invalid_args'


class FileNotFound(PlumbError, FileNotFoundError):
    kind = 'file_not_found'


class OutOfMemory(PlumbError, MemoryError):
    kind = 'out_of_memory'


class InvalidObject(PlumbError, ValueError):  # Bad header, bad tree entry, size mismatch, unknown mode
    kind = 'invalid_object'


class IoError(PlumbError, OSError):  # Filesystem failures other than not-found
    kind = 'io_error'


class CorruptObject(PlumbError):  # The deflate stream itself is broken
    kind = 'corrupt_object'


class HashFailure(PlumbError):
    kind = 'hash_failure'
