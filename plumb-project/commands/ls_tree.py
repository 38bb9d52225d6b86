# The command: plumb ls-tree [--name-only] <tree>
# What it does: Lists the entries of a tree object, one per line
# How it does: It reads the object, checks that it is a tree and decodes its binary payload with `tree.parse_tree`. Each entry is printed as "<mode> <type> <hash>\t<name>", or just the name with --name-only
# What data structure it uses: List (of decoded tree entries, in stored order)

import sys
from utils import repository, objects, tree
from utils.errors import PlumbError

def format_entry(entry): # Mode is zero-padded to six octal digits, e.g. 040000 for directories
    return f"{entry.mode:06o} {entry.kind} {entry.hash}\t{entry.name}"

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a plumb repository", file=sys.stderr)
        sys.exit(1)

    try:
        obj = objects.read_object(repo_root, args.tree)
        if obj.kind != 'tree':
            print("fatal: not a tree object", file=sys.stderr)
            sys.exit(1)
        entries = tree.parse_tree(obj.data)
    except PlumbError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    for entry in entries:
        print(entry.name if args.name_only else format_entry(entry))
