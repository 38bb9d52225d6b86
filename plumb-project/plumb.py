import argparse
import logging
from commands import (
    init, hash_object, cat_file, ls_tree, write_tree, commit_tree, config
)
from utils.objects import OBJECT_TYPES

# The main entry point for the Plumb object store
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(prog="plumb", description="Plumb: a content-addressable object store.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log object store activity to stderr.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Create an empty repository.")
    init_parser.add_argument("path", nargs="?", default=".", help="Where to create the repository.")
    init_parser.set_defaults(func=init.run)

    # Command: hash-object
    hash_parser = subparsers.add_parser("hash-object", help="Compute an object hash and optionally store the object.")
    hash_parser.add_argument("-w", dest="write", action="store_true", help="Write the object into the object database.")
    hash_parser.add_argument("-t", dest="type", default="blob", choices=OBJECT_TYPES, help="Object type (default: blob).")
    hash_parser.add_argument("file", help="File to hash.")
    hash_parser.set_defaults(func=hash_object.run)

    # Command: cat-file
    cat_parser = subparsers.add_parser("cat-file", help="Show type, size or content of an object.")
    cat_mode = cat_parser.add_mutually_exclusive_group()
    cat_mode.add_argument("-t", dest="show_type", action="store_true", help="Show the object type.")
    cat_mode.add_argument("-s", dest="show_size", action="store_true", help="Show the object size.")
    cat_mode.add_argument("-p", dest="pretty", action="store_true", help="Pretty-print the object content.")
    cat_mode.add_argument("-e", dest="exists", action="store_true", help="Exit with zero status if the object exists.")
    cat_parser.add_argument("operands", nargs="+", metavar="[type] object", help="Expected type (without an option) and object hash.")
    cat_parser.set_defaults(func=cat_file.run)

    # Command: ls-tree
    ls_parser = subparsers.add_parser("ls-tree", help="List the contents of a tree object.")
    ls_parser.add_argument("--name-only", action="store_true", help="List only entry names.")
    ls_parser.add_argument("tree", help="The tree hash.")
    ls_parser.set_defaults(func=ls_tree.run)

    # Command: write-tree
    write_tree_parser = subparsers.add_parser("write-tree", help="Store the working directory as a tree object.")
    write_tree_parser.set_defaults(func=write_tree.run)

    # Command: commit-tree
    commit_parser = subparsers.add_parser("commit-tree", help="Create a commit object from a tree.")
    commit_parser.add_argument("tree", help="The tree hash.")
    commit_parser.add_argument("-p", dest="parent", help="The parent commit hash.")
    commit_parser.add_argument("-m", dest="message", required=True, help="Commit message.")
    commit_parser.set_defaults(func=commit_tree.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set user name and email.")
    config_parser.add_argument("key", help="The configuration key (e.g., user.name).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Parse the arguments
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
