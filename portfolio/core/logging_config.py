import logging

from portfolio.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "portfolio"


def configure_logging(level: str = None) -> None:
    """Configure le logger racine une seule fois (uvicorn garde ses propres handlers)"""
    root = logging.getLogger()
    root.setLevel(level or settings.LOG_LEVEL)

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)
