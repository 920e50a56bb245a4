import logging

from config.config import LOGGING_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = LOGGING_LEVEL) -> None:
    """Configure the root logger once for the whole process."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # urllib3 logs every connection at DEBUG, which drowns the RESTCONF trace
    logging.getLogger("urllib3").setLevel(logging.WARNING)
