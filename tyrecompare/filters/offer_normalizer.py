# tyrecompare/filters/offer_normalizer.py

"""Raw record parsing and vendor-host filtering for offers."""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from tyrecompare.models.offer import OFFER_FIELDS, Offer
from tyrecompare.services.errors import MalformedResponseError

logger = logging.getLogger("tyrecompare.filters")


def _as_number(value: Any, name: str) -> float:
    """Coerce *value* to a finite, non-negative float."""
    if isinstance(value, bool):
        msg = f"Field '{name}' is not a number: {value!r}"
        raise MalformedResponseError(msg)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        msg = f"Field '{name}' is not a number: {value!r}"
        raise MalformedResponseError(msg) from exc
    if not math.isfinite(number) or number < 0:
        msg = f"Field '{name}' must be a non-negative number: {value!r}"
        raise MalformedResponseError(msg)
    return number


class OfferNormalizer:
    """Turn raw service records into ``Offer`` objects and filter them."""

    @staticmethod
    def parse_record(raw: Mapping[str, Any]) -> Offer:
        """Parse one offer-shaped mapping.

        Raises ``MalformedResponseError`` on missing fields or on a
        stock/price that is not a non-negative number.
        """
        if not isinstance(raw, Mapping):
            msg = f"Offer record is not an object: {type(raw).__name__}"
            raise MalformedResponseError(msg)

        missing = [name for name in OFFER_FIELDS if name not in raw]
        if missing:
            msg = f"Offer record missing field(s): {', '.join(missing)}"
            raise MalformedResponseError(msg)

        stock = _as_number(raw["stock"], "stock")
        if not stock.is_integer():
            msg = f"Field 'stock' is not a whole number: {raw['stock']!r}"
            raise MalformedResponseError(msg)

        return Offer(
            site=str(raw["site"]).strip(),
            brand=str(raw["brand"]),
            pattern=str(raw["pattern"]),
            size=str(raw["size"]),
            stock=int(stock),
            price=_as_number(raw["price"], "price"),
            currency=str(raw["currency"]),
            url=str(raw["url"]),
        )

    @staticmethod
    def parse_payload(payload: Any) -> list[Offer]:
        """Parse a decoded JSON payload into offers.

        One bad record rejects the whole payload.
        """
        if not isinstance(payload, list):
            msg = (
                "Offer search response is not a list: "
                f"{type(payload).__name__}"
            )
            raise MalformedResponseError(msg)
        return [OfferNormalizer.parse_record(item) for item in payload]

    @staticmethod
    def filter_by_hosts(
        offers: Iterable[Offer],
        hosts: frozenset[str],
    ) -> tuple[list[Offer], int]:
        """Keep offers whose site is one of *hosts*, preserving order.

        Returns the kept offers and the count of excluded ones.
        """
        kept: list[Offer] = []
        excluded = 0
        for offer in offers:
            if offer.site in hosts:
                kept.append(offer)
            else:
                excluded += 1

        if excluded:
            logger.info(
                "Filtered out %d offers from unselected vendors",
                excluded,
            )

        return kept, excluded
