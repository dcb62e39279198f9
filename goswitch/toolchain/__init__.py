"""
Go release management.

Naming, installation, selection and listing of Go releases in the
goswitch root.

Example:
    >>> from goswitch.config import load_settings
    >>> from goswitch.toolchain import ReleaseInstaller, CurrentLinker
    >>>
    >>> settings = load_settings()
    >>> ReleaseInstaller(settings).install("1.16")
    >>> CurrentLinker(settings).link("1.16")
"""

from goswitch.toolchain.naming import (
    ReleaseArchive,
    versioned_filename,
    tar_filename,
    compressed_filename,
    cache_path,
    download_url,
)
from goswitch.toolchain.installer import (
    InstallResult,
    ReleaseInstaller,
    install_version,
)
from goswitch.toolchain.linking import (
    CurrentLinker,
    read_current_version,
)
from goswitch.toolchain.initializer import (
    SEED_VERSIONS,
    InitResult,
    initialize,
    shell_exports,
)
from goswitch.toolchain.lister import (
    InstallState,
    VersionStatus,
    read_known_versions,
    list_versions,
)

__all__ = [
    "ReleaseArchive",
    "versioned_filename",
    "tar_filename",
    "compressed_filename",
    "cache_path",
    "download_url",
    "InstallResult",
    "ReleaseInstaller",
    "install_version",
    "CurrentLinker",
    "read_current_version",
    "SEED_VERSIONS",
    "InitResult",
    "initialize",
    "shell_exports",
    "InstallState",
    "VersionStatus",
    "read_known_versions",
    "list_versions",
]
