"""
Unit tests for the platform detection module.

Tests cover:
- PlatformInfo string forms
- OS/architecture normalization
- Unsupported combinations
- Cache behavior
"""

import pytest
from unittest.mock import patch

from goswitch.core.exceptions import UnsupportedPlatformError
from goswitch.core.platform import (
    PlatformInfo,
    clear_platform_cache,
    detect_platform,
    get_supported_platforms,
    normalize_platform,
)


class TestPlatformInfo:
    """Tests for PlatformInfo dataclass."""

    def test_platform_string_linux_amd64(self):
        info = PlatformInfo("linux", "amd64")
        assert info.platform_string() == "linux-amd64"

    def test_platform_string_darwin_arm64(self):
        info = PlatformInfo("darwin", "arm64")
        assert info.platform_string() == "darwin-arm64"

    def test_str_matches_platform_string(self):
        info = PlatformInfo("linux", "386")
        assert str(info) == "linux-386"

    def test_is_hashable(self):
        assert len({PlatformInfo("linux", "amd64"), PlatformInfo("linux", "amd64")}) == 1


class TestNormalizePlatform:
    """Tests for raw OS/CPU normalization."""

    @pytest.mark.parametrize(
        "system,machine,expected",
        [
            ("Linux", "x86_64", PlatformInfo("linux", "amd64")),
            ("Linux", "aarch64", PlatformInfo("linux", "arm64")),
            ("Linux", "i686", PlatformInfo("linux", "386")),
            ("Linux", "armv7l", PlatformInfo("linux", "armv6l")),
            ("Darwin", "x86_64", PlatformInfo("darwin", "amd64")),
            ("Darwin", "arm64", PlatformInfo("darwin", "arm64")),
        ],
    )
    def test_supported(self, system, machine, expected):
        assert normalize_platform(system, machine) == expected

    def test_unknown_os(self):
        with pytest.raises(UnsupportedPlatformError, match="unsupported os/arch"):
            normalize_platform("Windows", "AMD64")

    def test_unknown_arch(self):
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            normalize_platform("Linux", "riscv64")

        assert exc_info.value.os_name == "linux"
        assert exc_info.value.arch == "riscv64"

    def test_unsupported_combination(self):
        """darwin has no 32-bit releases."""
        with pytest.raises(UnsupportedPlatformError):
            normalize_platform("Darwin", "i386")


class TestDetectPlatform:
    """Tests for host detection."""

    @patch("platform.machine", return_value="x86_64")
    @patch("platform.system", return_value="Linux")
    def test_detect_linux(self, mock_system, mock_machine):
        assert detect_platform() == PlatformInfo("linux", "amd64")

    @patch("platform.machine", return_value="sparc")
    @patch("platform.system", return_value="SunOS")
    def test_detect_unsupported(self, mock_system, mock_machine):
        with pytest.raises(UnsupportedPlatformError):
            detect_platform()

    def test_detection_is_cached(self):
        with patch("platform.system", return_value="Linux") as mock_system, patch(
            "platform.machine", return_value="x86_64"
        ):
            detect_platform()
            detect_platform()
            assert mock_system.call_count == 1

            clear_platform_cache()
            detect_platform()
            assert mock_system.call_count == 2


def test_supported_platforms_list():
    platforms = get_supported_platforms()

    assert "linux-amd64" in platforms
    assert "darwin-arm64" in platforms
    assert "darwin-386" not in platforms
    assert len(platforms) == len(set(platforms))
