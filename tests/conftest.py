"""Pytest configuration and fixtures."""

import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from rcli.app import TextService
from rcli.app.adapters import FileSystemStorageAdapter, get_signer
from rcli.config import Settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Provide isolated rcli settings scoped to tests."""

    import rcli.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    config_dir = temp_dir / "appconfig"
    config_dir.mkdir(parents=True, exist_ok=True)

    settings = config_module.Settings(
        config_dir=config_dir,
        key_dir=config_dir / "keys",
    )

    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings


@pytest.fixture
def text_service(temp_dir: Path) -> TextService:
    """Text service wired to the filesystem adapter, generating into ``temp_dir``."""
    return TextService(
        storage_port=FileSystemStorageAdapter(),
        signer_factory=get_signer,
        key_dir_factory=lambda: temp_dir,
    )


@pytest.fixture
def zero_key_file(temp_dir: Path) -> Path:
    """A blake3 key file holding 32 zero bytes."""
    path = temp_dir / "zero.key"
    path.write_bytes(bytes(32))
    return path


@pytest.fixture
def message_file(temp_dir: Path) -> Path:
    """A message file containing ``hello``."""
    path = temp_dir / "message.txt"
    path.write_bytes(b"hello")
    return path
