# The command: plumb write-tree
# What it does: Takes a snapshot of the whole working directory and stores it as a tree object, printing the root tree's hash
# How it does: `tree.write_tree` walks the repository recursively, storing every file as a blob and every directory as a tree (children first), then stores the root tree itself
# What data structure it uses: Merkle Tree (every tree hash covers the hashes of everything beneath it)

import sys
from utils import repository, tree
from utils.errors import PlumbError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a plumb repository", file=sys.stderr)
        sys.exit(1)

    try:
        tree_hash = tree.write_tree(repo_root)
    except PlumbError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(tree_hash)
