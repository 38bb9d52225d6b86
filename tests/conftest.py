# Shared pytest fixtures for Plumb tests

import pytest
import os
import sys
import shutil
import tempfile

# Add plumb-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'plumb-project'))

from utils import repository, objects


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized Plumb repository in a temporary directory and moves into it
    original_dir = os.getcwd()
    os.chdir(temp_dir)
    repository.init_repository(temp_dir)
    yield temp_dir
    os.chdir(original_dir)


@pytest.fixture
def repo_with_files(temp_repo):
    # A working directory with a nested layout:
    #   README.md, src/main.py, src/lib/util.py, docs/ (empty)
    def write(rel_path, content):
        path = os.path.join(temp_repo, *rel_path.split('/'))
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'wb') as f:
            f.write(content)

    write('README.md', b'# Test Project\n')
    write('src/main.py', b'print("hi")\n')
    write('src/lib/util.py', b'def util():\n    return 1\n')
    os.makedirs(os.path.join(temp_repo, 'docs'))
    return temp_repo


@pytest.fixture
def stored_blob(temp_repo):
    # A repo holding the blob "hello\n"; returns (repo_root, hash)
    sha1 = objects.hash_object(temp_repo, b'hello\n', 'blob')
    return temp_repo, sha1


def write_raw_object(repo_root, sha1, compressed):
    # Places arbitrary bytes at an object's shard path, bypassing the store
    path = repository.object_path(repo_root, sha1)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'wb') as f:
        f.write(compressed)
    return path


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
