# What it does: Knows where a Plumb repository lives on disk and how it is laid out
# How it does: `find_repo_root` walks up the directory tree to locate the `.plumb` directory. `object_path` derives the two-level shard path (`objects/xx/yyyy...`) for a hash. `init_repository` scaffolds the directories and HEAD file
# What data structure it uses: Uses recursion (linear recursion) to find the repo root. The objects directory is a 256-way sharded on-disk hash table

import logging
import os

from .errors import IoError

logger = logging.getLogger(__name__)

PLUMB_DIR = '.plumb'
DEFAULT_BRANCH = 'main'


def find_repo_root(path='.'):  # Recursively searches for the .plumb directory to find the repository root
    path = os.path.abspath(path)
    repo_dir = os.path.join(path, PLUMB_DIR)
    if os.path.isdir(repo_dir):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def plumb_dir(repo_root):
    return os.path.join(repo_root, PLUMB_DIR)


def objects_dir(repo_root):
    return os.path.join(plumb_dir(repo_root), 'objects')


def object_path(repo_root, sha1):  # Shard path of an object; the hash must already be validated
    return os.path.join(objects_dir(repo_root), sha1[:2], sha1[2:])


def init_repository(path='.'):
    """
    Creates the `.plumb` directory with `objects/`, `refs/heads/` and a HEAD
    pointing at the default branch.

    Returns (repo_dir, reinitialized). Existing directories are kept as they
    are, and HEAD is only written on a fresh repository.
    """
    repo_dir = os.path.join(os.path.abspath(path), PLUMB_DIR)
    reinitialized = os.path.isdir(repo_dir)
    try:
        os.makedirs(os.path.join(repo_dir, 'objects'), exist_ok=True)
        os.makedirs(os.path.join(repo_dir, 'refs', 'heads'), exist_ok=True)
        if not reinitialized:
            with open(os.path.join(repo_dir, 'HEAD'), 'w') as f:
                f.write(f'ref: refs/heads/{DEFAULT_BRANCH}\n')
    except OSError as e:
        raise IoError(f"cannot create repository at {repo_dir}: {e}") from e

    logger.debug("%s repository in %s", "reinitialized" if reinitialized else "initialized", repo_dir)
    return repo_dir, reinitialized
