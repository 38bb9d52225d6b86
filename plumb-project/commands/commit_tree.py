# The command: plumb commit-tree <tree> [-p <parent>] -m <message>
# What it does: Creates a commit object that points at an existing tree and, optionally, a parent commit
# How it does: It resolves the author identity (environment, then `.plumb/config`, then defaults), renders the commit payload with `commit.build_commit` and stores it with `objects.hash_object`. References are not touched; the new hash is printed
# What data structure it uses: Directed Acyclic Graph (DAG) (the parent link adds an edge to the history graph)

import sys
from utils import repository, objects, commit, config
from utils.errors import PlumbError

def run(args):
    repo_root = repository.find_repo_root()
    if not repo_root:
        print("fatal: not a plumb repository", file=sys.stderr)
        sys.exit(1)

    author_name, author_email = config.get_author(repo_root)

    try:
        content = commit.build_commit(args.tree, args.parent, author_name, author_email, args.message)
        commit_hash = objects.hash_object(repo_root, content, 'commit')
    except PlumbError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(commit_hash)
