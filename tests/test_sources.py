# tests/test_sources.py

"""Tests for the fixture and remote offer sources."""

import json
import unittest
from typing import Any
from unittest.mock import MagicMock, patch

from tyrecompare.config.settings import Settings
from tyrecompare.models.search_request import SearchRequest
from tyrecompare.models.tyre_size import TyreSizeDescriptor
from tyrecompare.services.errors import (
    MalformedResponseError,
    TransportError,
)
from tyrecompare.sources.fixture_source import FIXTURE_OFFERS, FixtureSource
from tyrecompare.sources.remote_source import (
    PARSE_FAILURE_MESSAGE,
    RemoteSource,
)


def _request(brand: str = "Michelin") -> SearchRequest:
    return SearchRequest(
        descriptor=TyreSizeDescriptor("205", "55", "16", "91", "V"),
        brand=brand,
        vendor_keys=frozenset({"mollaoglu", "lastikpark"}),
    )


def _mock_response(status: int, body: Any) -> MagicMock:
    """Build a mock curl_cffi response with a JSON or raw text body."""
    resp = MagicMock()
    resp.status_code = status
    resp.text = body if isinstance(body, str) else json.dumps(body)
    return resp


class TestFixtureSource(unittest.TestCase):
    """Demo data source."""

    def test_returns_all_four_offers(self) -> None:
        offers = FixtureSource().fetch(_request())
        self.assertEqual(offers, list(FIXTURE_OFFERS))

    def test_brand_is_ignored(self) -> None:
        offers = FixtureSource().fetch(_request(brand="Pirelli"))
        self.assertEqual(len(offers), 4)

    @patch("tyrecompare.sources.fixture_source.time.sleep")
    def test_simulates_latency(self, mock_sleep: MagicMock) -> None:
        source = FixtureSource()
        source.fetch(_request())
        mock_sleep.assert_called_once_with(source.settings.FIXTURE_DELAY)

    def test_offers_use_default_currency(self) -> None:
        for offer in FixtureSource().fetch(_request()):
            self.assertEqual(offer.currency, Settings.DEFAULT_CURRENCY)

    def test_returns_a_fresh_list(self) -> None:
        source = FixtureSource()
        first = source.fetch(_request())
        first.clear()
        self.assertEqual(len(source.fetch(_request())), 4)


class TestRemoteSource(unittest.TestCase):
    """Offer Search Service client with a mocked HTTP session."""

    def _source(self, resp: Any = None, error: Exception | None = None) -> RemoteSource:
        with patch(
            "tyrecompare.sources.remote_source.curl_requests.Session"
        ) as mock_session_cls:
            mock_session = MagicMock()
            mock_session_cls.return_value = mock_session
            source = RemoteSource(base_url="http://offers.test/")
        if error is not None:
            mock_session.get.side_effect = error
        else:
            mock_session.get.return_value = resp
        self.session = mock_session
        return source

    def test_success_parses_offers(self) -> None:
        payload = [o.to_dict() for o in FIXTURE_OFFERS]
        source = self._source(_mock_response(200, payload))
        offers = source.fetch(_request())
        self.assertEqual(offers, list(FIXTURE_OFFERS))

    def test_request_url_and_params(self) -> None:
        source = self._source(_mock_response(200, []))
        source.fetch(_request())

        args, kwargs = self.session.get.call_args
        self.assertEqual(args[0], "http://offers.test/offers/search")
        self.assertEqual(kwargs["params"]["sites"], "lastikpark,mollaoglu")
        self.assertEqual(kwargs["params"]["speedIndex"], "V")
        self.assertEqual(kwargs["params"]["brand"], "Michelin")
        self.assertEqual(
            kwargs["timeout"], source.settings.REQUEST_TIMEOUT
        )

    def test_default_url_from_settings(self) -> None:
        with patch("tyrecompare.sources.remote_source.curl_requests.Session"):
            source = RemoteSource()
        self.assertEqual(source.search_url, source.settings.OFFER_SEARCH_URL)

    def test_http_500_is_transport_error(self) -> None:
        source = self._source(_mock_response(500, "oops"))
        with self.assertRaises(TransportError) as ctx:
            source.fetch(_request())
        self.assertIn("500", str(ctx.exception))
        self.assertEqual(ctx.exception.status_code, 500)

    def test_any_2xx_status_is_success(self) -> None:
        payload = [FIXTURE_OFFERS[0].to_dict()]
        for status in (201, 203, 299):
            with self.subTest(status=status):
                source = self._source(_mock_response(status, payload))
                self.assertEqual(source.fetch(_request()), [FIXTURE_OFFERS[0]])

    def test_redirect_status_is_transport_error(self) -> None:
        source = self._source(_mock_response(304, ""))
        with self.assertRaises(TransportError) as ctx:
            source.fetch(_request())
        self.assertEqual(ctx.exception.status_code, 304)

    def test_single_attempt_no_retry(self) -> None:
        source = self._source(_mock_response(503, ""))
        with self.assertRaises(TransportError):
            source.fetch(_request())
        self.assertEqual(self.session.get.call_count, 1)

    def test_network_error_is_transport_error(self) -> None:
        source = self._source(error=ConnectionError("refused"))
        with self.assertRaises(TransportError) as ctx:
            source.fetch(_request())
        self.assertIsNone(ctx.exception.status_code)
        self.assertNotIn("refused", str(ctx.exception))

    def test_invalid_json_is_malformed(self) -> None:
        source = self._source(_mock_response(200, "<html>nope</html>"))
        with self.assertRaises(MalformedResponseError) as ctx:
            source.fetch(_request())
        self.assertEqual(str(ctx.exception), PARSE_FAILURE_MESSAGE)

    def test_wrong_shape_is_malformed(self) -> None:
        source = self._source(_mock_response(200, [{"site": "x"}]))
        with self.assertRaises(MalformedResponseError) as ctx:
            source.fetch(_request())
        self.assertEqual(str(ctx.exception), PARSE_FAILURE_MESSAGE)


if __name__ == "__main__":
    unittest.main()
