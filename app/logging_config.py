import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # The SDK logs every request at INFO; keep it to warnings.
    logging.getLogger("stripe").setLevel(logging.WARNING)
