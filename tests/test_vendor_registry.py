# tests/test_vendor_registry.py

"""Tests for the vendor catalogue and the search request built from it."""

import unittest

from tyrecompare.config.vendor_registry import VendorRegistry, VendorSite
from tyrecompare.models.search_request import SearchRequest
from tyrecompare.models.tyre_size import TyreSizeDescriptor


class TestVendorRegistry(unittest.TestCase):
    """Lookups over the fixed vendor list."""

    def test_list_order_is_canonical(self) -> None:
        keys = [v.key for v in VendorRegistry.list_vendors()]
        self.assertEqual(
            keys,
            [
                "lastikpark",
                "mollaoglu",
                "haskar",
                "cakiroglu",
                "mutaflar",
                "lasmax",
            ],
        )

    def test_vendors_are_vendor_sites(self) -> None:
        for vendor in VendorRegistry.list_vendors():
            self.assertIsInstance(vendor, VendorSite)

    def test_get_known_and_unknown(self) -> None:
        vendor = VendorRegistry.get("haskar")
        assert vendor is not None
        self.assertEqual(vendor.host, "b2b.haskar.com.tr")
        self.assertIsNone(VendorRegistry.get("nope"))

    def test_hosts_for_selected(self) -> None:
        hosts = VendorRegistry.hosts_for({"mollaoglu", "lasmax"})
        self.assertEqual(
            hosts,
            frozenset({"bayi.mollaoglu.com.tr", "www.lasmaxbayi.com"}),
        )

    def test_hosts_for_ignores_unknown_keys(self) -> None:
        """Stale keys are skipped without raising."""
        hosts = VendorRegistry.hosts_for({"lastikpark", "retired-vendor"})
        self.assertEqual(hosts, frozenset({"bayiportal.lastikpark.com"}))

    def test_hosts_for_empty(self) -> None:
        self.assertEqual(VendorRegistry.hosts_for(set()), frozenset())

    def test_keys_in_order(self) -> None:
        ordered = VendorRegistry.keys_in_order(
            {"lasmax", "zzz", "lastikpark", "aaa"}
        )
        self.assertEqual(ordered, ["lastikpark", "lasmax", "aaa", "zzz"])


class TestSearchRequest(unittest.TestCase):
    """Query construction for the Offer Search Service."""

    def _request(self, keys: set[str]) -> SearchRequest:
        return SearchRequest(
            descriptor=TyreSizeDescriptor("205", "55", "16", "91", "V"),
            brand="Michelin",
            vendor_keys=frozenset(keys),
        )

    def test_is_valid_requires_vendor(self) -> None:
        self.assertFalse(self._request(set()).is_valid)
        self.assertTrue(self._request({"haskar"}).is_valid)

    def test_query_params(self) -> None:
        params = self._request({"haskar", "lastikpark"}).to_query_params()
        self.assertEqual(
            params,
            {
                "width": "205",
                "height": "55",
                "rim": "16",
                "loadIndex": "91",
                "speedIndex": "V",
                "brand": "Michelin",
                "sites": "lastikpark,haskar",
            },
        )

    def test_default_vendor_keys_empty(self) -> None:
        request = SearchRequest(descriptor=TyreSizeDescriptor.default())
        self.assertEqual(request.vendor_keys, frozenset())
        self.assertIsInstance(request.vendor_keys, frozenset)
        self.assertFalse(request.is_valid)
        self.assertEqual(request.to_query_params()["sites"], "")


if __name__ == "__main__":
    unittest.main()
