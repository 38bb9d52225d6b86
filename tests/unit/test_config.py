# Unit tests for utils/config.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'plumb-project'))

from utils import config
from utils.errors import InvalidArgs


class TestWriteConfig:
    # Tests for config.write_config()

    def test_round_trip(self, temp_repo):
        config.write_config(temp_repo, 'user.name', 'Test User')
        config.write_config(temp_repo, 'user.email', 'test@example.com')
        assert config.get_user_config(temp_repo) == ('Test User', 'test@example.com')

    def test_invalid_key(self, temp_repo):
        with pytest.raises(InvalidArgs):
            config.write_config(temp_repo, 'username', 'x')

    def test_empty_section(self, temp_repo):
        with pytest.raises(InvalidArgs):
            config.write_config(temp_repo, '.name', 'x')


class TestGetUserConfig:
    # Tests for config.get_user_config()

    def test_missing_file(self, temp_repo):
        assert config.get_user_config(temp_repo) == (None, None)


class TestGetAuthor:
    # Tests for config.get_author()

    @pytest.fixture(autouse=True)
    def clear_env(self, monkeypatch):
        monkeypatch.delenv(config.AUTHOR_NAME_ENV, raising=False)
        monkeypatch.delenv(config.AUTHOR_EMAIL_ENV, raising=False)

    def test_defaults(self, temp_repo):
        assert config.get_author(temp_repo) == (config.DEFAULT_AUTHOR_NAME, config.DEFAULT_AUTHOR_EMAIL)

    def test_config_file(self, temp_repo):
        config.write_config(temp_repo, 'user.name', 'From Config')
        config.write_config(temp_repo, 'user.email', 'cfg@example.com')
        assert config.get_author(temp_repo) == ('From Config', 'cfg@example.com')

    def test_environment_wins(self, temp_repo, monkeypatch):
        config.write_config(temp_repo, 'user.name', 'From Config')
        monkeypatch.setenv(config.AUTHOR_NAME_ENV, 'From Env')
        name, email = config.get_author(temp_repo)
        assert name == 'From Env'
        assert email == config.DEFAULT_AUTHOR_EMAIL
