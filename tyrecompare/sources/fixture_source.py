# tyrecompare/sources/fixture_source.py

"""Deterministic demo offers used when no Offer Search Service is available."""

import time

from tyrecompare.models.offer import Offer
from tyrecompare.models.search_request import SearchRequest
from tyrecompare.sources.base_source import OfferSource

FIXTURE_OFFERS: tuple[Offer, ...] = (
    Offer(
        site="bayiportal.lastikpark.com",
        brand="Michelin",
        pattern="Primacy 4+",
        size="205/55 R16 91V",
        stock=24,
        price=3850.0,
        url="https://bayiportal.lastikpark.com/#PortalMain",
    ),
    Offer(
        site="bayi.mollaoglu.com.tr",
        brand="Michelin",
        pattern="Primacy 4+",
        size="205/55 R16 91V",
        stock=8,
        price=3795.0,
        url="https://bayi.mollaoglu.com.tr/tr/urunler",
    ),
    Offer(
        site="b2b.haskar.com.tr",
        brand="Michelin",
        pattern="Primacy 4+",
        size="205/55 R16 91V",
        stock=5,
        price=3920.0,
        url="https://b2b.haskar.com.tr",
    ),
    Offer(
        site="b2b.cakirogluotomotiv.com",
        brand="Michelin",
        pattern="Primacy 4+",
        size="205/55 R16 91V",
        stock=12,
        price=3810.0,
        url="https://b2b.cakirogluotomotiv.com/B2B_Stoklar.asp",
    ),
)


class FixtureSource(OfferSource):
    """Returns the same four offers for every request.

    Brand and size are ignored; only the orchestrator's vendor-host
    filter narrows the result.
    """

    def __init__(self) -> None:
        super().__init__("fixture")

    def fetch(self, request: SearchRequest) -> list[Offer]:
        self.logger.debug(
            "[fixture] Serving %d demo offers for %s",
            len(FIXTURE_OFFERS),
            request.descriptor.format(),
        )
        time.sleep(self.settings.FIXTURE_DELAY)
        return list(FIXTURE_OFFERS)
