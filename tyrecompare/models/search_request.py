# tyrecompare/models/search_request.py

"""Search request built from the descriptor, brand and vendor selection."""

from dataclasses import dataclass, field

from tyrecompare.config.vendor_registry import VendorRegistry
from tyrecompare.models.tyre_size import TyreSizeDescriptor


@dataclass(frozen=True)
class SearchRequest:
    """Everything needed to dispatch one offer search."""

    descriptor: TyreSizeDescriptor
    brand: str = ""
    vendor_keys: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_valid(self) -> bool:
        """A request needs at least one selected vendor."""
        return bool(self.vendor_keys)

    def to_query_params(self) -> dict[str, str]:
        """Build the Offer Search Service query string fields."""
        return {
            "width": self.descriptor.width,
            "height": self.descriptor.aspect_height,
            "rim": self.descriptor.rim_diameter,
            "loadIndex": self.descriptor.load_index,
            "speedIndex": self.descriptor.speed_symbol,
            "brand": self.brand,
            "sites": ",".join(
                VendorRegistry.keys_in_order(self.vendor_keys)
            ),
        }
