# tyrecompare/config/vendor_registry.py

"""Fixed catalogue of the vendor portals that can be queried."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from tyrecompare.config.settings import Settings

logger = logging.getLogger("tyrecompare.vendors")


@dataclass(frozen=True)
class VendorSite:
    """A single vendor source: stable key, display label, network host."""

    key: str
    label: str
    host: str


_VENDORS: tuple[VendorSite, ...] = tuple(
    VendorSite(key=v["id"], label=v["label"], host=v["host"])
    for v in Settings.AVAILABLE_VENDORS
)
_BY_KEY: dict[str, VendorSite] = {v.key: v for v in _VENDORS}


class VendorRegistry:
    """Read-only lookups over the vendor catalogue."""

    @staticmethod
    def list_vendors() -> tuple[VendorSite, ...]:
        """Return every vendor in canonical display order."""
        return _VENDORS

    @staticmethod
    def get(key: str) -> VendorSite | None:
        """Return the vendor registered under *key*, if any."""
        return _BY_KEY.get(key)

    @staticmethod
    def hosts_for(keys: Iterable[str]) -> frozenset[str]:
        """Map selected vendor keys to their hosts.

        Unknown keys are skipped rather than rejected.
        """
        hosts: set[str] = set()
        for key in keys:
            vendor = _BY_KEY.get(key)
            if vendor is None:
                logger.debug("Ignoring unknown vendor key '%s'", key)
                continue
            hosts.add(vendor.host)
        return frozenset(hosts)

    @staticmethod
    def keys_in_order(keys: Iterable[str]) -> list[str]:
        """Order *keys* by registry position; unknown keys go last, sorted."""
        wanted = set(keys)
        ordered = [v.key for v in _VENDORS if v.key in wanted]
        extra = sorted(wanted - set(_BY_KEY))
        return ordered + extra
