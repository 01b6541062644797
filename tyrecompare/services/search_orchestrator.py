# tyrecompare/services/search_orchestrator.py

"""Orchestrates single-flight offer searches and owns the result set."""

import asyncio
import logging
from dataclasses import dataclass, field

from tyrecompare.config.vendor_registry import VendorRegistry
from tyrecompare.filters.offer_comparator import OfferComparator
from tyrecompare.filters.offer_normalizer import OfferNormalizer
from tyrecompare.models.offer import Offer
from tyrecompare.models.result_set import ResultSet
from tyrecompare.models.search_request import SearchRequest
from tyrecompare.services.errors import (
    InvalidSelectionError,
    OfferSourceError,
    SearchInFlightError,
)
from tyrecompare.sources.base_source import OfferSource

logger = logging.getLogger("tyrecompare.orchestrator")

UNEXPECTED_ERROR_MESSAGE = "Unexpected error while searching offers"


@dataclass
class SearchResult:
    """Outcome of one completed search."""

    request: SearchRequest
    result_set: ResultSet = field(default_factory=ResultSet)
    error: str | None = None
    total_before_filter: int = 0
    excluded_count: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


class SearchOrchestrator:
    """Dispatches searches to an ``OfferSource`` one at a time.

    The orchestrator is the only writer of ``result_set``.  A search that
    finishes late still replaces the result set; there is no cancellation.
    """

    def __init__(self) -> None:
        self.result_set = ResultSet()
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        """True while a search is awaiting its source."""
        return self._in_flight

    # ── Search ───────────────────────────────────────────

    async def search(
        self,
        request: SearchRequest,
        source: OfferSource,
    ) -> SearchResult:
        """Fetch, filter and store offers for *request*.

        Source failures are reported in ``SearchResult.error`` and leave an
        empty result set.  Precondition violations raise instead.  The sort
        direction is taken from ``result_set`` when the source returns, so
        a ``toggle_sort()`` made while the search runs is kept.
        """
        if not request.is_valid:
            msg = "Select at least one vendor before searching"
            raise InvalidSelectionError(msg)
        if self._in_flight:
            logger.warning(
                "Search for %s rejected: another search is in flight",
                request.descriptor.format(),
            )
            msg = "A search is already in progress"
            raise SearchInFlightError(msg)

        self._in_flight = True
        result = SearchResult(request=request)
        logger.info(
            "Searching %s brand='%s' vendors=%s via %s",
            request.descriptor.format(),
            request.brand,
            ",".join(VendorRegistry.keys_in_order(request.vendor_keys)),
            source.source_name,
        )
        try:
            raw: list[Offer] = await asyncio.to_thread(
                source.fetch, request
            )
            hosts = VendorRegistry.hosts_for(request.vendor_keys)
            kept, excluded = OfferNormalizer.filter_by_hosts(raw, hosts)
            result.total_before_filter = len(raw)
            result.excluded_count = excluded
            result.result_set = ResultSet(
                offers=tuple(kept),
                sort_ascending=self.result_set.sort_ascending,
            )
            logger.info(
                "Search for %s returned %d offers (%d excluded)",
                request.descriptor.format(),
                len(kept),
                excluded,
            )
        except OfferSourceError as exc:
            logger.error(
                "Offer source '%s' failed: %s",
                source.source_name,
                exc,
                exc_info=True,
            )
            result.error = str(exc)
            result.result_set = ResultSet(
                sort_ascending=self.result_set.sort_ascending
            )
        except Exception:
            logger.error(
                "Unexpected failure in offer source '%s'",
                source.source_name,
                exc_info=True,
            )
            result.error = UNEXPECTED_ERROR_MESSAGE
            result.result_set = ResultSet(
                sort_ascending=self.result_set.sort_ascending
            )
        finally:
            self._in_flight = False

        self.result_set = result.result_set
        return result

    # ── Comparison view ──────────────────────────────────

    def toggle_sort(self) -> bool:
        """Flip the sort direction without re-querying; returns the new flag."""
        ascending = OfferComparator.toggle_sort_direction(
            self.result_set.sort_ascending
        )
        self.result_set = ResultSet(
            offers=self.result_set.offers, sort_ascending=ascending
        )
        return ascending

    def sorted_offers(self) -> list[Offer]:
        """Current offers in the current sort direction."""
        return OfferComparator.sort_by_price(
            self.result_set.offers, self.result_set.sort_ascending
        )

    def cheapest_price(self) -> float | None:
        return OfferComparator.cheapest_price(self.result_set.offers)
