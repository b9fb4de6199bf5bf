import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Root logging setup for the API process. No-op if handlers already exist."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
