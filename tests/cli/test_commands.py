"""
End-to-end tests for CLI commands against a temporary root.
"""

import os
from unittest.mock import patch

import pytest
import responses

from goswitch.cli.parser import CLI
from goswitch.core.exceptions import MissingDependencyError, UnsupportedPlatformError
from goswitch.core.platform import PlatformInfo
from goswitch.toolchain.initializer import SEED_VERSIONS

DOWNLOAD_HOST = "https://dl.example.test"

URL_116 = f"{DOWNLOAD_HOST}/go/go1.16.linux-amd64.tar.gz"


@pytest.fixture
def root(tmp_path, monkeypatch):
    """Point goswitch at a temporary root on a linux/amd64 host."""
    root = tmp_path / "gs"
    monkeypatch.setenv("GOSWITCH_ROOT", str(root))
    monkeypatch.setenv("GOSWITCH_DOWNLOAD_HOST", DOWNLOAD_HOST)
    monkeypatch.delenv("GOSWITCH_BIN", raising=False)
    monkeypatch.delenv("GOSWITCH_GOROOT", raising=False)

    with patch(
        "goswitch.cli.parser.detect_platform",
        return_value=PlatformInfo("linux", "amd64"),
    ):
        yield root


class TestInit:
    def test_init_prints_exports(self, root, capsys):
        assert CLI().run(["init"]) == 0

        out = capsys.readouterr().out
        assert f'export GOROOT="{root / "go"}"' in out
        assert (root / "versions").is_dir()
        assert (root / "bin").is_dir()


class TestList:
    def test_after_init_all_not_installed(self, root, capsys):
        CLI().run(["init"])
        capsys.readouterr()

        assert CLI().run(["list"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == len(SEED_VERSIONS)
        assert all(line.endswith("(not installed)") for line in lines)
        assert not any(line.startswith("*") for line in lines)

    def test_without_init_warns(self, root, capsys):
        assert CLI().run(["list"]) == 0
        assert "goswitch init" in capsys.readouterr().err


class TestDownloadAndUse:
    @responses.activate
    def test_download_then_use(self, root, release_tarball, capsys):
        responses.add(responses.GET, URL_116, body=release_tarball("1.16"))
        cache_path = root / "versions" / "go1.16.linux-amd64"

        assert CLI().run(["download", "1.16"]) == 0
        assert cache_path.is_dir()

        assert CLI().run(["use", "1.16"]) == 0
        assert (root / "current").read_text().strip() == "1.16"
        assert (root / "go").resolve() == cache_path.resolve()
        assert len(responses.calls) == 1

    @responses.activate
    def test_download_twice_no_network(self, root, release_tarball):
        responses.add(responses.GET, URL_116, body=release_tarball("1.16"))

        assert CLI().run(["download", "1.16"]) == 0
        assert CLI().run(["download", "1.16"]) == 0

        assert len(responses.calls) == 1

    @responses.activate
    def test_use_downloads_when_missing(self, root, release_tarball):
        responses.add(responses.GET, URL_116, body=release_tarball("1.16"))

        assert CLI().run(["use", "1.16"]) == 0

        assert (root / "current").read_text().strip() == "1.16"

    @responses.activate
    def test_failed_use_leaves_selection(self, root, release_tarball, capsys):
        responses.add(responses.GET, URL_116, body=release_tarball("1.16"))
        url_115 = f"{DOWNLOAD_HOST}/go/go1.15.linux-amd64.tar.gz"
        responses.add(responses.GET, url_115, status=404)
        CLI().run(["use", "1.16"])

        assert CLI().run(["use", "1.15"]) == 1

        assert "ERROR:" in capsys.readouterr().err
        assert (root / "current").read_text().strip() == "1.16"
        assert os.readlink(root / "go").endswith("go1.16.linux-amd64")

    @responses.activate
    def test_list_marks_current(self, root, release_tarball, capsys):
        responses.add(responses.GET, URL_116, body=release_tarball("1.16"))
        CLI().run(["init"])
        (root / "known-versions").write_text("1.16\n1.15\n")
        CLI().run(["use", "1.16"])
        capsys.readouterr()

        CLI().run(["list"])

        assert capsys.readouterr().out.splitlines() == [
            "* 1.16 (current)",
            "  1.15 (not installed)",
        ]


class TestEnvironmentChecks:
    def test_unsupported_platform(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("GOSWITCH_ROOT", str(tmp_path))
        with patch(
            "goswitch.cli.parser.detect_platform",
            side_effect=UnsupportedPlatformError("plan9", "mips"),
        ):
            assert CLI().run(["list"]) == 1

        err = capsys.readouterr().err
        assert "ERROR: environment check failed: unsupported os/arch" in err
        assert "linux-amd64" in err

    def test_missing_dependencies_listed(self, root, capsys):
        with patch(
            "goswitch.cli.parser.require_capabilities",
            side_effect=MissingDependencyError(["decompressor", "extractor"]),
        ):
            assert CLI().run(["init"]) == 1

        err = capsys.readouterr().err
        assert "ERROR: environment check failed:" in err
        assert "decompressor" in err
        assert "extractor" in err
        assert not (root / "versions").exists()

    def test_help_skips_environment_checks(self, capsys):
        with patch(
            "goswitch.cli.parser.detect_platform",
            side_effect=UnsupportedPlatformError("plan9", "mips"),
        ):
            assert CLI().run(["help"]) == 0

    def test_invalid_config(self, root, capsys):
        root.mkdir()
        (root / "config.yaml").write_text("bogus: 1\n")

        assert CLI().run(["list"]) == 1
        assert "Unknown configuration keys" in capsys.readouterr().err


class TestRelativeRoot:
    @responses.activate
    def test_use_with_relative_root(
        self, tmp_path, monkeypatch, release_tarball, capsys
    ):
        responses.add(responses.GET, URL_116, body=release_tarball("1.16"))
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("GOSWITCH_ROOT", "gs")
        monkeypatch.setenv("GOSWITCH_DOWNLOAD_HOST", DOWNLOAD_HOST)
        monkeypatch.delenv("GOSWITCH_BIN", raising=False)
        monkeypatch.delenv("GOSWITCH_GOROOT", raising=False)

        with patch(
            "goswitch.cli.parser.detect_platform",
            return_value=PlatformInfo("linux", "amd64"),
        ):
            assert CLI().run(["use", "1.16"]) == 0

        cache_path = tmp_path / "gs" / "versions" / "go1.16.linux-amd64"
        link = tmp_path / "gs" / "go"
        assert link.exists()
        assert link.resolve() == cache_path.resolve()
        assert os.path.isabs(os.readlink(link))

        monkeypatch.chdir(tmp_path.parent)
        assert link.resolve() == cache_path.resolve()
