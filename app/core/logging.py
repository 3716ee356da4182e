import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Настройка логирования приложения"""
    root = logging.getLogger()
    # Корневой логгер на WARNING, чтобы не шумели сторонние библиотеки
    root.setLevel(logging.WARNING)

    if not any(getattr(h, "_happy_thoughts", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._happy_thoughts = True
        root.addHandler(handler)

    app_logger = logging.getLogger("app")
    app_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return app_logger
