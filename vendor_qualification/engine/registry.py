"""
In-memory registry of qualified vendor ids.

One instance per engine (injected, never module-global). Writes hold the lock
for the insert and size read; membership checks read the set directly.
Lives for the process lifetime: no eviction, no expiry, no persistence.
"""

from __future__ import annotations

import threading


class VendorRegistry:
    """Thread-safe set of vendor ids. Unique by value; order irrelevant."""

    def __init__(self, vendor_ids: list[int] | None = None) -> None:
        self._vendor_ids: set[int] = set(vendor_ids or ())
        self._lock = threading.Lock()

    def add(self, vendor_id: int) -> tuple[bool, int]:
        """
        Insert vendor_id. Idempotent.

        Returns (added, size): added is False when the id was already present;
        size is the registry size right after this call.
        """
        with self._lock:
            added = vendor_id not in self._vendor_ids
            if added:
                self._vendor_ids.add(vendor_id)
            return added, len(self._vendor_ids)

    def contains(self, vendor_id: int) -> bool:
        return vendor_id in self._vendor_ids

    def __contains__(self, vendor_id: object) -> bool:
        return vendor_id in self._vendor_ids

    def __len__(self) -> int:
        return len(self._vendor_ids)

    def snapshot(self) -> list[int]:
        """Sorted copy of all recorded ids. Internal/debug use only."""
        with self._lock:
            return sorted(self._vendor_ids)
