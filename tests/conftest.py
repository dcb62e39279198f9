"""
Pytest configuration and shared fixtures for goswitch tests.
"""

import io
import tarfile
from pathlib import Path

import pytest

from goswitch.config.settings import (
    ENV_BIN,
    ENV_DOWNLOAD_HOST,
    ENV_GOROOT,
    ENV_ROOT,
    Settings,
)
from goswitch.core.platform import PlatformInfo, clear_platform_cache

DOWNLOAD_HOST = "https://dl.example.test"


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Create isolated home directory with no goswitch overrides."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()

    monkeypatch.setenv("HOME", str(fake_home))
    for name in (ENV_ROOT, ENV_BIN, ENV_GOROOT, ENV_DOWNLOAD_HOST):
        monkeypatch.delenv(name, raising=False)

    return fake_home


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a temporary directory."""
    return Settings.for_root(tmp_path / "goswitch", download_host=DOWNLOAD_HOST)


@pytest.fixture
def linux_amd64() -> PlatformInfo:
    return PlatformInfo("linux", "amd64")


@pytest.fixture
def make_installed(settings, linux_amd64):
    """
    Create a fake extracted release in the versions directory.

    Example:
        def test_x(make_installed):
            path = make_installed("1.16")
    """

    def _make(version: str) -> Path:
        path = settings.versions_dir / f"go{version}.linux-amd64"
        (path / "bin").mkdir(parents=True)
        (path / "VERSION").write_text(f"go{version}\n")
        return path

    return _make


def build_release_tarball(version: str, root_name: str = "go") -> bytes:
    """Build an in-memory .tar.gz shaped like an official Go release."""
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        directory = tarfile.TarInfo(root_name)
        directory.type = tarfile.DIRTYPE
        directory.mode = 0o755
        tar.addfile(directory)

        for name, content, mode in (
            ("VERSION", f"go{version}\n".encode(), 0o644),
            ("bin/go", b"#!/bin/sh\necho go\n", 0o755),
        ):
            info = tarfile.TarInfo(f"{root_name}/{name}")
            info.size = len(content)
            info.mode = mode
            tar.addfile(info, io.BytesIO(content))

    return buffer.getvalue()


@pytest.fixture
def release_tarball():
    """Factory for fake release archives."""
    return build_release_tarball


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset module-level caches between tests."""
    clear_platform_cache()
    yield
    clear_platform_cache()
