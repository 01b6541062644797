# tyrecompare/config/settings.py

"""Central configuration for the tyrecompare engine."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag such as ``1``/``0`` or ``yes``/``no`` from the env."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


class Settings:
    """Central configuration for the tyrecompare engine."""

    # --- Offer Search Service ---
    API_BASE_URL: str = os.getenv(
        "TYRECOMPARE_API_URL", "http://localhost:8000"
    ).rstrip("/")
    OFFER_SEARCH_PATH: str = "/offers/search"
    OFFER_SEARCH_URL: str = API_BASE_URL + OFFER_SEARCH_PATH
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "tr-TR,tr;q=0.9,en-US;q=0.8,en;q=0.7",
    }

    # --- Demo data ---
    USE_FIXTURE: bool = _env_flag("TYRECOMPARE_USE_FIXTURE", True)
    FIXTURE_DELAY: float = 0.5          # Simulated latency (secs)

    # --- Search defaults ---
    DEFAULT_WIDTH: str = "205"
    DEFAULT_ASPECT_HEIGHT: str = "55"
    DEFAULT_RIM_DIAMETER: str = "16"
    DEFAULT_LOAD_INDEX: str = "91"
    DEFAULT_SPEED_SYMBOL: str = "V"
    DEFAULT_BRAND: str = "Michelin"
    DEFAULT_CURRENCY: str = "TRY"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    RESULTS_DIR: Path = BASE_DIR / "results"
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Vendors (order is the canonical display order) ---
    AVAILABLE_VENDORS: list[dict[str, str]] = [
        {
            "id": "lastikpark",
            "label": "bayiportal.lastikpark.com",
            "host": "bayiportal.lastikpark.com",
        },
        {
            "id": "mollaoglu",
            "label": "bayi.mollaoglu.com.tr",
            "host": "bayi.mollaoglu.com.tr",
        },
        {
            "id": "haskar",
            "label": "b2b.haskar.com.tr",
            "host": "b2b.haskar.com.tr",
        },
        {
            "id": "cakiroglu",
            "label": "b2b.cakirogluotomotiv.com",
            "host": "b2b.cakirogluotomotiv.com",
        },
        {
            "id": "mutaflar",
            "label": "bayi.mutaflarotomotiv.com",
            "host": "bayi.mutaflarotomotiv.com",
        },
        {
            "id": "lasmax",
            "label": "www.lasmaxbayi.com",
            "host": "www.lasmaxbayi.com",
        },
    ]
