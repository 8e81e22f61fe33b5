import logging
import sys

from pythonjsonlogger import jsonlogger

from gdax_client.core.config import get_settings


def _has_json_handler(logger: logging.Logger) -> bool:
    return any(isinstance(handler.formatter, jsonlogger.JsonFormatter) for handler in logger.handlers)


def setup_logging(level: str | None = None) -> None:
    root_logger = logging.getLogger()
    if _has_json_handler(root_logger):
        return

    handler = logging.StreamHandler(sys.stdout)
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)

    root_logger.setLevel((level or get_settings().log_level).upper())
    root_logger.addHandler(handler)

    # Request URLs are already logged by the client; transport internals are noise.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
