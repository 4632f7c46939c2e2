"""
Pytest fixtures for flair_images tests.
"""

import pytest


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')


@pytest.fixture
def store_path(tmp_path):
    """Fixture providing an existing, empty store directory."""
    path = tmp_path / "flair"
    path.mkdir()
    return str(path)


@pytest.fixture
def make_image(tmp_path):
    """Fixture returning a factory that writes a source image and returns its path."""
    from PIL import Image

    def _make(filename='source.png', size=(200, 100), mode='RGB', color='red', fmt=None):
        img = Image.new(mode, size, color=color)
        path = tmp_path / filename
        img.save(path, format=fmt)
        return str(path)

    return _make


@pytest.fixture
def sample_png(make_image):
    """Fixture providing a 200x100 opaque PNG."""
    return make_image('sample.png', size=(200, 100))


@pytest.fixture
def transparent_png(make_image):
    """Fixture providing a 200x100 PNG whose left half is fully transparent."""
    from PIL import Image

    path = make_image('transparent.png', size=(200, 100), mode='RGBA', color=(0, 0, 255, 255))
    img = Image.open(path)
    img.paste((0, 0, 0, 0), (0, 0, 100, 100))
    img.save(path)
    return path


@pytest.fixture
def mock_usage():
    """Fixture providing a mock usage repository."""
    from unittest.mock import MagicMock
    mock = MagicMock()
    mock.distinct_images.return_value = {'logo.png', 'star.gif'}
    mock.count_where.return_value = 0
    return mock


@pytest.fixture
def write_variants(store_path):
    """Fixture returning a helper that writes placeholder variant files."""
    import os

    def _write(base, ext, tiers=(1, 2, 3)):
        for tier in tiers:
            with open(os.path.join(store_path, f"{base}-x{tier}{ext}"), 'wb') as f:
                f.write(b'variant')

    return _write
