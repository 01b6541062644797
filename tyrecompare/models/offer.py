# tyrecompare/models/offer.py

"""Offer data model for inter-module data flow."""

from dataclasses import dataclass

from tyrecompare.config.settings import Settings

# Canonical column order for exports and service payloads
OFFER_FIELDS: tuple[str, ...] = (
    "site",
    "brand",
    "pattern",
    "size",
    "stock",
    "price",
    "currency",
    "url",
)


@dataclass(frozen=True)
class Offer:
    """A single vendor's priced listing for a tyre product."""

    site: str
    brand: str
    pattern: str
    size: str
    stock: int
    price: float
    currency: str = Settings.DEFAULT_CURRENCY
    url: str = ""

    def to_dict(self) -> dict[str, object]:
        """Return the offer as a plain dict in column order."""
        return {name: getattr(self, name) for name in OFFER_FIELDS}
