"""
brightpearl.description.cache

Process-wide holder of the current `Description`.

Responsibilities:
- Build the description lazily on first need.
- Rebuild it when the API domain (or resource loader) changes, or after `invalidate`.
- Serialize builds so readers never observe a half-built description.
"""

from __future__ import annotations

import threading

from brightpearl.description.builder import build_description
from brightpearl.description.models import Description
from brightpearl.description.resources import ResourceLoader
from brightpearl.observability.logging import get_logger

log = get_logger(__name__)


class DescriptionCache:
    """
    Holds at most one live description.

    The cached instance is replaced wholesale, never mutated; callers holding the old
    instance keep a consistent (if stale) snapshot.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._description: Description | None = None
        self._api_domain: str | None = None
        self._loader: ResourceLoader | None = None
        self.builds = 0

    def get(self, loader: ResourceLoader, api_domain: str) -> Description:
        with self._lock:
            if (
                self._description is None
                or self._api_domain != api_domain
                or self._loader is not loader
            ):
                # Build before swapping so a failed build leaves the previous state intact.
                description = build_description(loader, api_domain)
                self._description = description
                self._api_domain = api_domain
                self._loader = loader
                self.builds += 1
            return self._description

    def invalidate(self, api_domain: str | None = None) -> None:
        """
        Force a rebuild on the next `get`.

        `api_domain` is the domain the caller is switching to; it is only logged, the
        next `get` decides what to build.
        """

        with self._lock:
            stale = self._api_domain
            self._description = None
            self._api_domain = None
        log.info("description_invalidated", previous_domain=stale, api_domain=api_domain)

    def reset(self) -> None:
        with self._lock:
            self._description = None
            self._api_domain = None
            self._loader = None
            self.builds = 0

    @property
    def current(self) -> Description | None:
        return self._description


description_cache = DescriptionCache()


# --- Module Notes -----------------------------------------------------------
# Tests reset this singleton between cases (see tests/conftest.py); clients accept
# an alternate cache instance when isolation is needed without touching the global.
# Builds run synchronously under a threading lock, including from async callers on
# their first invoke. Packaged resources are small; callers loading large resource
# sets can call `Client.bind()` before entering the event loop.
