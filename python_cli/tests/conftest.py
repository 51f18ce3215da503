"""Shared pytest fixtures and configuration for hxdump tests."""

import os
import tempfile
import shutil
from pathlib import Path
import pytest

from hxdump.config import DumpConfig
from hxdump.dumper import Dumper


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def default_config():
    """Dumper options with every default in place."""
    return DumpConfig()


@pytest.fixture
def dumper(default_config):
    """Dumper with default options (2 columns of 8 bytes, repeats elided)."""
    return Dumper(default_config)


@pytest.fixture
def sequential_block():
    """One default block of bytes 0x00..0x0F."""
    return bytes(range(16))


@pytest.fixture
def zero_block():
    """One default block of zero bytes."""
    return bytes(16)


@pytest.fixture
def sample_file(temp_dir):
    """Create a 40 byte test file: 0x00..0x1F followed by 'ABCDEFGH'."""
    path = temp_dir / "sample.bin"
    path.write_bytes(bytes(range(32)) + b"ABCDEFGH")
    return path


@pytest.fixture
def zero_file(temp_dir):
    """Create a test file of 48 zero bytes."""
    path = temp_dir / "zeros.bin"
    path.write_bytes(bytes(48))
    return path


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables before each test."""
    env_backup = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(env_backup)
