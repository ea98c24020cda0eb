import logging
import logging.handlers
from pathlib import Path
from clinical_cohort.core.config import LOGS_DIR, LOG_LEVEL

DEFAULT_FMT = "%(asctime)s - %(levelname)-5s - %(name)s - %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"

def setup_logging(level: str = LOG_LEVEL, file_name: str | None = "cohort.log") -> None:
    """Console logging, plus a rotating file in LOGS_DIR unless ``file_name`` is None."""
    if getattr(setup_logging, "_configured", False):
        return  # prevent double-config

    root = logging.getLogger()
    root.setLevel(level.upper())
    formatter = logging.Formatter(DEFAULT_FMT, datefmt=DATE_FMT)

    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if file_name:
        Path(LOGS_DIR).mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            Path(LOGS_DIR) / file_name, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        fh.setFormatter(formatter)
        root.addHandler(fh)

    setup_logging._configured = True
