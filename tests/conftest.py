"""Shared pytest fixtures for all tests."""

import os

import pytest

from responder.assembler import FileResponder
from responder.conditional import NoCacheValidation
from responder.files import LocalFile

SAMPLE_CONTENT = b"0123456789abcdefghijklmnopqrstuvwxyz" * 3
SAMPLE_MTIME = 1700000000  # Tue, 14 Nov 2023 22:13:20 GMT


@pytest.fixture
def sample_path(tmp_path):
    """
    Create a sample text file with a fixed modification time.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / 'fake-file.txt'
    file_path.write_bytes(SAMPLE_CONTENT)
    os.utime(file_path, (SAMPLE_MTIME, SAMPLE_MTIME))
    return file_path


@pytest.fixture
def sample_file(sample_path):
    """LocalFile wrapping the sample file."""
    return LocalFile(sample_path)


@pytest.fixture
def untyped_file(tmp_path):
    """
    Create a file whose name gives no hint of its content type.
    """
    file_path = tmp_path / 'blob.unknownext'
    file_path.write_bytes(b"\x00\x01\x02\x03")
    os.utime(file_path, (SAMPLE_MTIME, SAMPLE_MTIME))
    return LocalFile(file_path)


@pytest.fixture
def responder():
    """Responder with ranges and cache validation enabled."""
    return FileResponder()


@pytest.fixture
def uncached_responder():
    """Responder with cache validation disabled."""
    return FileResponder(cache=NoCacheValidation())


@pytest.fixture
def byteless_responder():
    """Responder that does not serve byte ranges."""
    return FileResponder(serve_ranges=False)


@pytest.fixture
def sample_content():
    """Bytes of the sample file."""
    return SAMPLE_CONTENT


@pytest.fixture
def sample_mtime():
    """Modification time of the sample file."""
    return SAMPLE_MTIME
