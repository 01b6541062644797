# tests/test_csv_exporter.py

"""Tests for CSV serialisation of offers."""

import unittest

from tyrecompare.models.offer import OFFER_FIELDS, Offer
from tyrecompare.storage.csv_exporter import CsvExporter

HEADER = '"site","brand","pattern","size","stock","price","currency","url"'


def _decode(text: str) -> list[list[str]]:
    """Split lines, strip the outer quotes, undo doubled quotes.

    Only valid for fields without embedded newlines.
    """
    rows: list[list[str]] = []
    for line in text.split("\n"):
        if not line:
            continue
        fields = line[1:-1].split('","')
        rows.append([f.replace('""', '"') for f in fields])
    return rows


class TestCsvExporter(unittest.TestCase):
    """CsvExporter.serialize behaviour."""

    def _offer(self, **overrides: object) -> Offer:
        values: dict[str, object] = {
            "site": "bayi.mollaoglu.com.tr",
            "brand": "Michelin",
            "pattern": "Primacy 4+",
            "size": "205/55 R16 91V",
            "stock": 8,
            "price": 3795.0,
            "currency": "TRY",
            "url": "https://bayi.mollaoglu.com.tr/tr/urunler",
        }
        values.update(overrides)
        return Offer(**values)  # type: ignore[arg-type]

    def test_header_line(self) -> None:
        text = CsvExporter.serialize([])
        self.assertEqual(text.split("\n")[0], HEADER)

    def test_every_field_quoted(self) -> None:
        line = CsvExporter.serialize([self._offer()]).split("\n")[1]
        self.assertEqual(
            line,
            '"bayi.mollaoglu.com.tr","Michelin","Primacy 4+",'
            '"205/55 R16 91V","8","3795","TRY",'
            '"https://bayi.mollaoglu.com.tr/tr/urunler"',
        )

    def test_fractional_price_kept(self) -> None:
        row = CsvExporter.row_for(self._offer(price=3810.5))
        self.assertEqual(row[5], "3810.5")

    def test_rows_in_given_order(self) -> None:
        offers = [
            self._offer(site="b", price=2.0),
            self._offer(site="a", price=1.0),
        ]
        rows = _decode(CsvExporter.serialize(offers))
        self.assertEqual([r[0] for r in rows[1:]], ["b", "a"])

    def test_embedded_quote_round_trips(self) -> None:
        """Brand with embedded quotes decodes to the identical string."""
        brand = 'Michelin "Primacy 4+"'
        text = CsvExporter.serialize([self._offer(brand=brand)])
        self.assertIn('"Michelin ""Primacy 4+"""', text)
        rows = _decode(text)
        self.assertEqual(rows[1][1], brand)

    def test_commas_and_quotes_round_trip(self) -> None:
        offer = self._offer(
            pattern='Pilot, "Sport" 5',
            url='https://x.example/?a=1,b="2"',
        )
        rows = _decode(CsvExporter.serialize([offer]))
        self.assertEqual(rows[0], list(OFFER_FIELDS))
        self.assertEqual(
            rows[1],
            [
                offer.site,
                offer.brand,
                'Pilot, "Sport" 5',
                offer.size,
                "8",
                "3795",
                offer.currency,
                'https://x.example/?a=1,b="2"',
            ],
        )


if __name__ == "__main__":
    unittest.main()
