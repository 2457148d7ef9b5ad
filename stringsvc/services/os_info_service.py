"""OS Info Service: host identity lookup.

Invariants:
    - Lookup failure (OSError) and an empty host name both raise
      HostnameUnavailableError
"""

import logging
import socket
from typing import Callable

from stringsvc.core.errors import HostnameUnavailableError

logger = logging.getLogger(__name__)


class SystemOSInfoService:
    """OSInfoService backed by the local machine."""

    def __init__(self, lookup: Callable[[], str] = socket.gethostname):
        self._lookup = lookup

    def hostname(self) -> str:
        try:
            name = self._lookup()
        except OSError as e:
            logger.warning(f"Hostname lookup failed: {e}")
            raise HostnameUnavailableError() from e
        if not name:
            raise HostnameUnavailableError()
        return name
