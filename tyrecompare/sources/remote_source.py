# tyrecompare/sources/remote_source.py

"""Offer source backed by the remote multi-vendor Offer Search Service."""

import json
from typing import Any

from curl_cffi import requests as curl_requests

from tyrecompare.filters.offer_normalizer import OfferNormalizer
from tyrecompare.models.offer import Offer
from tyrecompare.models.search_request import SearchRequest
from tyrecompare.services.errors import (
    MalformedResponseError,
    TransportError,
)
from tyrecompare.sources.base_source import OfferSource

PARSE_FAILURE_MESSAGE = "Could not parse offer search response"


class RemoteSource(OfferSource):
    """Queries ``GET /offers/search`` and parses the JSON offer list.

    The service does all brand/size matching and per-vendor retrieval.
    One attempt per search; the user retries manually.
    """

    def __init__(self, base_url: str | None = None) -> None:
        super().__init__("remote")
        self.search_url = (
            base_url.rstrip("/") + self.settings.OFFER_SEARCH_PATH
            if base_url
            else self.settings.OFFER_SEARCH_URL
        )
        self.session = curl_requests.Session()

    def fetch(self, request: SearchRequest) -> list[Offer]:
        params = request.to_query_params()
        self.logger.info(
            "[remote] GET %s sites=%s",
            self.search_url,
            params["sites"],
        )
        try:
            resp = self.session.get(
                self.search_url,
                params=params,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except Exception as exc:
            self.logger.warning(
                "[remote] Request error: %s", exc, exc_info=True
            )
            msg = "Offer search service unreachable"
            raise TransportError(msg) from exc

        if not 200 <= resp.status_code < 300:
            self.logger.warning(
                "[remote] HTTP %d from offer search service",
                resp.status_code,
            )
            raise TransportError(
                f"Server error: {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            payload: Any = json.loads(resp.text)
        except ValueError as exc:
            self.logger.warning(
                "[remote] Response is not JSON: %s", exc
            )
            raise MalformedResponseError(PARSE_FAILURE_MESSAGE) from exc

        try:
            offers = OfferNormalizer.parse_payload(payload)
        except MalformedResponseError as exc:
            self.logger.warning(
                "[remote] Unusable offer payload: %s", exc
            )
            raise MalformedResponseError(PARSE_FAILURE_MESSAGE) from exc

        self.logger.info("[remote] Received %d offers", len(offers))
        return offers
