"""
Startup capability check for goswitch.

Installing a release needs three tools: a downloader able to speak HTTPS,
a gzip decompressor and a tar extractor. goswitch runs all three in-process,
so each check probes the module that provides the tool rather than looking
for an executable on PATH.
"""

import importlib
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from goswitch.core.exceptions import MissingDependencyError

logger = logging.getLogger(__name__)


@dataclass
class CapabilityStatus:
    """Availability of one required tool."""

    name: str
    purpose: str
    available: bool
    detail: str = ""

    def __str__(self) -> str:
        state = "ok" if self.available else "missing"
        text = f"{self.name} ({self.purpose}): {state}"
        if self.detail:
            text += f" - {self.detail}"
        return text


@dataclass
class Capability:
    """A required tool and the modules that provide it."""

    name: str
    purpose: str
    modules: tuple

    def probe(self, importer: Optional[Callable] = None) -> CapabilityStatus:
        """
        Check that every providing module imports.

        Args:
            importer: Import function, importlib.import_module by default

        Returns:
            CapabilityStatus for this tool
        """
        importer = importer or importlib.import_module
        for module_name in self.modules:
            try:
                importer(module_name)
            except ImportError as e:
                logger.debug(f"{self.name}: cannot import {module_name}: {e}")
                return CapabilityStatus(
                    self.name, self.purpose, False, f"module '{module_name}' missing"
                )
        return CapabilityStatus(self.name, self.purpose, True)


REQUIRED_CAPABILITIES = (
    Capability("downloader", "fetch release archives over HTTPS", ("ssl", "requests")),
    Capability("decompressor", "gunzip release archives", ("zlib", "gzip")),
    Capability("extractor", "unpack tar archives", ("tarfile",)),
)


def check_capabilities(
    capabilities=REQUIRED_CAPABILITIES, importer: Optional[Callable] = None
) -> List[CapabilityStatus]:
    """
    Return a status per required tool.

    Args:
        capabilities: Capabilities to check
        importer: Optional import function (for testing)
    """
    return [capability.probe(importer) for capability in capabilities]


def require_capabilities(
    capabilities=REQUIRED_CAPABILITIES, importer: Optional[Callable] = None
) -> List[CapabilityStatus]:
    """
    Check every required tool and fail listing all that are missing.

    Raises:
        MissingDependencyError: If any tool is unavailable
    """
    statuses = check_capabilities(capabilities, importer)
    for status in statuses:
        logger.debug(str(status))

    missing = [status.name for status in statuses if not status.available]
    if missing:
        raise MissingDependencyError(missing)
    return statuses


__all__ = [
    "Capability",
    "CapabilityStatus",
    "REQUIRED_CAPABILITIES",
    "check_capabilities",
    "require_capabilities",
]
