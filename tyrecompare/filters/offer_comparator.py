# tyrecompare/filters/offer_comparator.py

"""Price comparison over a result set: cheapest offers and sort order."""

from collections.abc import Sequence

from tyrecompare.models.offer import Offer


class OfferComparator:
    """Pure helpers that never modify the offers they are given."""

    @staticmethod
    def cheapest_price(offers: Sequence[Offer]) -> float | None:
        """Return the minimum price, or ``None`` for no offers."""
        if not offers:
            return None
        return min(o.price for o in offers)

    @staticmethod
    def cheapest_offers(offers: Sequence[Offer]) -> list[Offer]:
        """Return every offer priced at the minimum, in input order."""
        cheapest = OfferComparator.cheapest_price(offers)
        if cheapest is None:
            return []
        return [o for o in offers if o.price == cheapest]

    @staticmethod
    def is_cheapest(offer: Offer, cheapest: float | None) -> bool:
        """True when *offer* ties the minimum price."""
        return cheapest is not None and offer.price == cheapest

    @staticmethod
    def sort_by_price(
        offers: Sequence[Offer], ascending: bool = True
    ) -> list[Offer]:
        """Return offers ordered by price.

        Equal prices keep their input order in both directions, so the
        descending order negates the key instead of using ``reverse``.
        """
        if ascending:
            return sorted(offers, key=lambda o: o.price)
        return sorted(offers, key=lambda o: -o.price)

    @staticmethod
    def toggle_sort_direction(ascending: bool) -> bool:
        return not ascending

    @staticmethod
    def format_price(price: float, currency: str) -> str:
        """Render a price as ``3795.00 TRY``."""
        return f"{price:.2f} {currency}"
