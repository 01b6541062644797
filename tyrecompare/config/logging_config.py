# tyrecompare/config/logging_config.py

"""Run log for tyre offer searches.

``setup_logging`` is called once from ``main.py``, before either the TUI or
the headless CLI starts.  It opens ``logs/run_<YYYYMMDD_HHMMSS>.log`` and
hangs it off the ``tyrecompare`` logger.  The orchestrator, the offer
sources, the normalizer and the exporters all log under
``tyrecompare.<area>``, so one file holds the whole story of a search:
the vendors asked for, the HTTP status from the Offer Search Service,
how many offers were dropped by the host filter, and where a CSV landed.

stderr only sees warnings.  Textual draws over stdout in TUI mode, and in
CLI mode stdout carries the JSON or table output.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from tyrecompare.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_STDERR_FORMAT = "%(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers capped at WARNING
_QUIET_LOGGERS = ("curl_cffi",)


def setup_logging() -> Path:
    """Attach the run log and stderr handlers to ``tyrecompare``.

    Returns:
        Path of this run's log file.  A second call leaves the handlers of
        the first in place.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f"run_{datetime.now():%Y%m%d_%H%M%S}.log"

    root = logging.getLogger("tyrecompare")
    root.setLevel(logging.DEBUG)
    if root.handlers:
        return log_file

    run_log = logging.FileHandler(log_file, encoding="utf-8")
    run_log.setLevel(logging.DEBUG)
    run_log.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(run_log)

    stderr = logging.StreamHandler(sys.stderr)
    stderr.setLevel(logging.WARNING)
    stderr.setFormatter(logging.Formatter(_STDERR_FORMAT))
    root.addHandler(stderr)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root.info(
        "Run log %s (offer service %s, demo data %s)",
        log_file,
        Settings.API_BASE_URL,
        "on" if Settings.USE_FIXTURE else "off",
    )
    return log_file
