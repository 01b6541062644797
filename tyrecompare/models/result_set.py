# tyrecompare/models/result_set.py

"""Result set model: the current offers plus their sort direction."""

from dataclasses import dataclass

from tyrecompare.models.offer import Offer


@dataclass(frozen=True)
class ResultSet:
    """Offers from the last completed search.

    Instances are swapped wholesale, never edited in place.
    """

    offers: tuple[Offer, ...] = ()
    sort_ascending: bool = True

    def __len__(self) -> int:
        return len(self.offers)

    @property
    def is_empty(self) -> bool:
        """True when the last search produced no offers."""
        return not self.offers
