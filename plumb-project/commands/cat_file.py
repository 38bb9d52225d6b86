# The command: plumb cat-file (-t | -s | -p | -e) <object>   or   plumb cat-file <type> <object>
# What it does: Shows the type, size or content of a stored object, or checks whether it exists
# How it does: -e only probes the object's path. Every other form reads the object through `objects.read_object`, which validates its header and declared size. -p renders trees in `ls-tree` format; the <type> form refuses objects of another type
# What data structure it uses: Hash Table / Dictionary (looks up one key of the object store)

import sys
from utils import repository, objects, tree
from utils.errors import PlumbError
from . import ls_tree

USAGE = ("usage: plumb cat-file <type> <object>\n"
         "   or: plumb cat-file (-t | -s | -p | -e) <object>")

def run(args):
    has_option = args.show_type or args.show_size or args.pretty or args.exists
    if has_option and len(args.operands) == 1:
        expected_type, obj_hash = None, args.operands[0]
    elif not has_option and len(args.operands) == 2:
        expected_type, obj_hash = args.operands
    else:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a plumb repository", file=sys.stderr)
        sys.exit(1)

    try:
        if args.exists:
            if not objects.object_exists(repo_root, obj_hash):
                sys.exit(1)
            return
        obj = objects.read_object(repo_root, obj_hash)
    except PlumbError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if args.show_type:
        print(obj.kind)
    elif args.show_size:
        print(obj.size)
    elif args.pretty and obj.kind == 'tree':
        try:
            entries = tree.parse_tree(obj.data)
        except PlumbError as e:
            print(f"fatal: {e}", file=sys.stderr)
            sys.exit(1)
        for entry in entries:
            print(ls_tree.format_entry(entry))
    elif args.pretty:
        _write_raw(obj.data)
    else:
        if obj.kind != expected_type:
            print(f"fatal: expected {expected_type}, got {obj.kind}", file=sys.stderr)
            sys.exit(1)
        _write_raw(obj.data)

def _write_raw(data): # Raw payloads may not be text, so bypass the str layer of stdout
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
