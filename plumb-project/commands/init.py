# The command: plumb init
# What it does: Initializes a new, empty repository by creating the hidden `.plumb` directory and its internal structure
# How it does: It hands off to `repository.init_repository`, which creates the `objects` and `refs/heads` subdirectories and a `HEAD` file pointing at the default 'main' branch. Running it again keeps whatever is already there
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database)

import sys
from utils import repository
from utils.errors import PlumbError

def run(args):
    try:
        repo_dir, reinitialized = repository.init_repository(getattr(args, 'path', None) or '.')
    except PlumbError as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if reinitialized:
        print(f"Reinitialized existing Plumb repository in {repo_dir}/")
    else:
        print(f"Initialized empty Plumb repository in {repo_dir}/")
