"""
Root-level lock for mutating goswitch commands.

``download`` and ``use`` both write to the shared working directory and the
current toolchain pointer. Holding this lock makes a second invocation wait
for the first instead of interleaving with it.

Usage:
    from goswitch.core.locking import root_lock

    with root_lock(settings):
        install_version(version, settings)
"""

import logging
from contextlib import contextmanager

from filelock import FileLock, Timeout

from goswitch.core.exceptions import LockTimeoutError

logger = logging.getLogger(__name__)


@contextmanager
def root_lock(settings, timeout=None):
    """
    Acquire the lock guarding ``settings.root``.

    Args:
        settings: Resolved Settings
        timeout: Maximum wait in seconds (defaults to settings.lock_timeout)

    Raises:
        LockTimeoutError: If the lock can't be acquired within timeout
    """
    if timeout is None:
        timeout = settings.lock_timeout

    lock_path = settings.lock_file
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    lock = FileLock(lock_path, timeout=timeout)

    try:
        with lock:
            logger.debug(f"Acquired lock: {lock_path}")
            yield
            logger.debug(f"Released lock: {lock_path}")
    except Timeout as e:
        raise LockTimeoutError(
            f"Could not acquire lock {lock_path} after {timeout}s. "
            "Another goswitch process may be running."
        ) from e


__all__ = ["root_lock"]
