"""Tests for FlairConfig class."""

import pytest

from flair_images.flair_config import FlairConfig


class TestFlairConfig:
    """Tests for FlairConfig class."""

    def test_defaults(self):
        """Test default values."""
        config = FlairConfig()

        assert config.image_path == 'images/flair'
        assert config.db_port == 3306
        assert config.table_prefix == 'phpbb_'
        assert config.has_database is False

    def test_from_env(self, monkeypatch):
        """Test reading configuration from the environment."""
        monkeypatch.setenv('FLAIR_IMAGE_PATH', '/srv/flair')
        monkeypatch.setenv('FLAIR_DB_HOST', 'db')
        monkeypatch.setenv('FLAIR_DB_PORT', '3307')
        monkeypatch.setenv('FLAIR_DB_USER', 'forum')
        monkeypatch.setenv('FLAIR_DB_NAME', 'forum')
        monkeypatch.setenv('FLAIR_TABLE_PREFIX', 'bb_')

        config = FlairConfig.from_env()

        assert config.image_path == '/srv/flair'
        assert config.db_port == 3307
        assert config.table_prefix == 'bb_'
        assert config.has_database is True

    def test_validate_store_only(self):
        """Test database settings are optional by default."""
        assert FlairConfig(image_path='/srv/flair').validate() == []

    def test_validate_requires_db(self):
        """Test missing database settings are reported."""
        errors = FlairConfig(image_path='/srv/flair').validate(require_db=True)

        assert len(errors) == 3
        assert any('FLAIR_DB_HOST' in e for e in errors)

    def test_validate_empty_path(self):
        """Test an empty image path is reported."""
        assert FlairConfig(image_path='').validate() == ["FLAIR_IMAGE_PATH is required"]
