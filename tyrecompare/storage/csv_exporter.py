# tyrecompare/storage/csv_exporter.py

"""Serialises offers to fully-quoted, comma-separated text."""

import csv
import io
from collections.abc import Iterable

from tyrecompare.models.offer import OFFER_FIELDS, Offer


def _format_number(value: float) -> str:
    """Render integral numbers without a trailing ``.0``."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


class CsvExporter:
    """Builds the CSV payload handed to the file-save step."""

    @staticmethod
    def row_for(offer: Offer) -> list[str]:
        """Return one offer's fields as strings, in column order."""
        return [
            offer.site,
            offer.brand,
            offer.pattern,
            offer.size,
            str(offer.stock),
            _format_number(offer.price),
            offer.currency,
            offer.url,
        ]

    @staticmethod
    def serialize(offers: Iterable[Offer]) -> str:
        """Header plus one line per offer, every field double-quoted.

        Embedded quotes are doubled; rows end with ``\\n``.
        """
        buffer = io.StringIO()
        writer = csv.writer(
            buffer, quoting=csv.QUOTE_ALL, lineterminator="\n"
        )
        writer.writerow(OFFER_FIELDS)
        for offer in offers:
            writer.writerow(CsvExporter.row_for(offer))
        return buffer.getvalue()
