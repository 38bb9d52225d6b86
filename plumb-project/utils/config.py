# What it does: Manages all read/write operations for the `.plumb/config` file and resolves the author identity for commits
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

from .errors import InvalidArgs, IoError
from .repository import plumb_dir

DEFAULT_AUTHOR_NAME = 'Plumb User'
DEFAULT_AUTHOR_EMAIL = 'plumb@localhost'

AUTHOR_NAME_ENV = 'PLUMB_AUTHOR_NAME'
AUTHOR_EMAIL_ENV = 'PLUMB_AUTHOR_EMAIL'


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(plumb_dir(repo_root), 'config')


def read_config(repo_root):  # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def write_config(repo_root, key, value):  # Sets a configuration key to a value and writes it to the config file
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise InvalidArgs("Invalid key format. Should be 'section.key'.")
    if not section or not option:
        raise InvalidArgs("Invalid key format. Should be 'section.key'.")

    config = read_config(repo_root)
    if not config.has_section(section):
        config.add_section(section)
    config.set(section, option, value)

    try:
        with open(get_config_path(repo_root), 'w') as configfile:
            config.write(configfile)
    except OSError as e:
        raise IoError(f"cannot write config: {e}") from e


def get_user_config(repo_root):  # Retrieves user.name and user.email from the config, or None if not set
    config = read_config(repo_root)
    user_name = config.get('user', 'name', fallback=None)
    user_email = config.get('user', 'email', fallback=None)
    return user_name, user_email


def get_author(repo_root):
    """
    Resolves the identity used for author and committer lines.

    Environment variables win over the config file, which wins over the
    built-in defaults.
    """
    config_name, config_email = get_user_config(repo_root) if repo_root else (None, None)
    name = os.environ.get(AUTHOR_NAME_ENV) or config_name or DEFAULT_AUTHOR_NAME
    email = os.environ.get(AUTHOR_EMAIL_ENV) or config_email or DEFAULT_AUTHOR_EMAIL
    return name, email
