import logging
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure structured logging to console and, optionally, a file.
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    log = logging.getLogger("loadtest")
    log.info("=" * 80)
    log.info(" STARTING SUBSCRIPTION LOAD-TEST SESSION")
    if log_file:
        log.info(f" Log file: {log_file}")
    log.info("=" * 80)
    return log
