import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# uvicorn logs through these; main.py disables uvicorn's own logging config.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class Log:
    """Service-wide logging facade.

    Application messages go to the ``textstats`` logger. After ``configure``
    the HTTP server loggers share its stdout handler and format.
    """

    _logger: logging.Logger = logging.getLogger("textstats")

    @classmethod
    def configure(cls, log_level: str) -> None:
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            cls._logger.addHandler(handler)

        for name in SERVER_LOGGERS:
            server_logger = logging.getLogger(name)
            server_logger.setLevel(level)
            server_logger.handlers = list(cls._logger.handlers)
            server_logger.propagate = False

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at error level with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
