# tyrecompare/storage/file_manager.py

"""Handles saving offer results to disk."""

import json
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from tyrecompare.config.settings import Settings
from tyrecompare.models.offer import Offer
from tyrecompare.models.tyre_size import TyreSizeDescriptor
from tyrecompare.storage.csv_exporter import CsvExporter

logger = logging.getLogger("tyrecompare.storage")


class FileManager:
    """Handles saving offer results to disk."""

    def __init__(self) -> None:
        self.results_dir: Path = Settings.RESULTS_DIR
        self.results_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("FileManager initialised, results_dir=%s", self.results_dir)

    @staticmethod
    def build_filename(
        descriptor: TyreSizeDescriptor, extension: str
    ) -> str:
        """File name embedding the size, e.g. ``prices_205-55_R16_91V_<ts>.csv``."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"prices_{descriptor.file_slug()}_{timestamp}.{extension}"

    def export_csv(
        self,
        descriptor: TyreSizeDescriptor,
        offers: Sequence[Offer],
    ) -> Path:
        """Write *offers*, in the order given, to a UTF-8 CSV file.

        Callers only export a non-empty result set.
        """
        filepath = self.results_dir / self.build_filename(descriptor, "csv")
        filepath.write_text(
            CsvExporter.serialize(offers), encoding="utf-8", newline=""
        )

        logger.info(
            "Exported %d offers for %s to %s",
            len(offers),
            descriptor.format(),
            filepath,
        )
        return filepath

    def save_results(
        self,
        descriptor: TyreSizeDescriptor,
        offers: Sequence[Offer],
    ) -> Path:
        """Save offers to a timestamped JSON file."""
        filepath = self.results_dir / self.build_filename(descriptor, "json")
        data = [o.to_dict() for o in offers]

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        logger.info(
            "Saved %d offers for %s to %s",
            len(offers),
            descriptor.format(),
            filepath,
        )
        return filepath
