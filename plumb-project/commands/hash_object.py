# The command: plumb hash-object [-w] [-t <type>] <file>
# What it does: Computes the object hash a file's contents would have and, with -w, stores it in the object database
# How it does: It reads the file as raw bytes and passes them to `objects.hash_object`, which frames them with the "<type> <size>\0" header, hashes the result and only compresses and writes it when asked to
# What data structure it uses: Hash Table / Dictionary (the object store, keyed by SHA-1)

import sys
from utils import repository, objects
from utils.errors import PlumbError

def run(args):
    repo_root = repository.find_repo_root()
    if args.write and not repo_root: # Hashing alone works anywhere; writing needs a repository
        print("fatal: not a plumb repository", file=sys.stderr)
        sys.exit(1)

    try:
        with open(args.file, 'rb') as f:
            content = f.read()
    except OSError as e:
        print(f"fatal: could not open '{args.file}' for reading: {e.strerror}", file=sys.stderr)
        sys.exit(1)

    try:
        sha1 = objects.hash_object(repo_root, content, args.type, write=args.write)
    except PlumbError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(sha1)
