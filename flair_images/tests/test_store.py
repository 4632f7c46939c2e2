"""Tests for StoreProvisioner and LocalFilesystem."""

import os
from unittest.mock import MagicMock

import pytest

from flair_images.filesystem import LocalFilesystem
from flair_images.store import StoreProvisioner


class TestStoreProvisioner:
    """Tests for StoreProvisioner class."""

    def test_existing_writable(self, store_path, logger):
        """Test a writable store is accepted as is."""
        fs = MagicMock(spec=LocalFilesystem)
        fs.is_writable.return_value = True

        assert StoreProvisioner(fs, logger).ensure_writable(store_path) is True
        fs.mkdir.assert_not_called()
        fs.chmod.assert_not_called()

    def test_creates_missing_directory(self, tmp_path, logger):
        """Test a missing store is created, including parents."""
        path = str(tmp_path / "images" / "flair")
        provisioner = StoreProvisioner(logger=logger)

        assert provisioner.ensure_writable(path) is True
        assert os.path.isdir(path)

    def test_second_call_does_not_recreate(self, tmp_path, logger, mocker):
        """Test the second call returns immediately."""
        path = str(tmp_path / "flair")
        fs = LocalFilesystem(logger)
        provisioner = StoreProvisioner(fs, logger)

        assert provisioner.ensure_writable(path) is True

        mkdir = mocker.spy(fs, 'mkdir')
        chmod = mocker.spy(fs, 'chmod')
        assert provisioner.ensure_writable(path) is True
        mkdir.assert_not_called()
        chmod.assert_not_called()

    def test_chmods_existing_unwritable(self, logger):
        """Test an existing read-only store gets permissive mode."""
        fs = MagicMock(spec=LocalFilesystem)
        fs.is_writable.side_effect = [False, True]
        fs.exists.return_value = True

        assert StoreProvisioner(fs, logger).ensure_writable('/srv/flair') is True
        fs.chmod.assert_called_once_with('/srv/flair', LocalFilesystem.CHMOD_ALL)
        fs.mkdir.assert_not_called()

    def test_mkdir_for_missing(self, logger):
        """Test a missing store is created with permissive mode."""
        fs = MagicMock(spec=LocalFilesystem)
        fs.is_writable.side_effect = [False, True]
        fs.exists.return_value = False

        assert StoreProvisioner(fs, logger).ensure_writable('/srv/flair') is True
        fs.mkdir.assert_called_once_with('/srv/flair', LocalFilesystem.CHMOD_ALL)

    def test_permission_error_returns_false(self, logger):
        """Test repair failures are reported, not raised."""
        fs = MagicMock(spec=LocalFilesystem)
        fs.is_writable.return_value = False
        fs.exists.return_value = True
        fs.chmod.side_effect = PermissionError("Operation not permitted")

        assert StoreProvisioner(fs, logger).ensure_writable('/srv/flair') is False

    def test_mkdir_error_returns_false(self, logger):
        """Test a failed mkdir is reported, not raised."""
        fs = MagicMock(spec=LocalFilesystem)
        fs.is_writable.return_value = False
        fs.exists.return_value = False
        fs.mkdir.side_effect = OSError("Read-only file system")

        assert StoreProvisioner(fs, logger).ensure_writable('/srv/flair') is False


class TestLocalFilesystem:
    """Tests for LocalFilesystem class."""

    def test_is_writable_missing(self, tmp_path):
        """Test a missing path is not writable."""
        assert LocalFilesystem().is_writable(str(tmp_path / "nope")) is False

    def test_listdir_missing(self, tmp_path):
        """Test listing a missing directory gives nothing."""
        assert LocalFilesystem().listdir(str(tmp_path / "nope")) == []

    def test_remove_skips_absent(self, store_path):
        """Test removing a mix of present and absent files."""
        present = os.path.join(store_path, "a-x1.png")
        absent = os.path.join(store_path, "a-x2.png")
        with open(present, 'wb') as f:
            f.write(b'x')

        removed = LocalFilesystem().remove([present, absent])

        assert removed == [present]
        assert not os.path.exists(present)
