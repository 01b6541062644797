# tyrecompare/sources/base_source.py

"""Abstract base class for all offer sources."""

import logging
from abc import ABC, abstractmethod

from tyrecompare.config.settings import Settings
from tyrecompare.models.offer import Offer
from tyrecompare.models.search_request import SearchRequest


class OfferSource(ABC):
    """Anything that can answer a ``SearchRequest`` with raw offers.

    ``fetch`` is blocking; the orchestrator runs it in a worker thread.
    Failures are reported by raising an ``OfferSourceError`` subclass.
    """

    def __init__(self, source_name: str) -> None:
        self.source_name = source_name
        self.logger = logging.getLogger(
            f"tyrecompare.{source_name}"
        )
        self.settings = Settings()

    @abstractmethod
    def fetch(self, request: SearchRequest) -> list[Offer]:
        """Return candidate offers for *request*."""
        ...
