import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Log:
    """Process-wide logger for the docsheet session.

    Keyword arguments are rendered after the message as ``key=value``
    pairs so a status line reads on its own, e.g.
    ``Upload failed | submission=a.pdf-1700 error=quota``.
    """

    _logger: logging.Logger = logging.getLogger("docsheet")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single handler.

        Logs go to stderr by default so they never mix with the status
        lines printed on stdout.
        """
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        for handler in list(cls._logger.handlers):
            cls._logger.removeHandler(handler)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(_render(message, fields))

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._logger.error(_render(message, fields))

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._logger.warning(_render(message, fields))

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        if cls._logger.isEnabledFor(logging.DEBUG):
            cls._logger.debug(_render(message, fields))


def _render(message: str, fields: dict[str, object]) -> str:
    if not fields:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in fields.items())
    return f"{message} | {pairs}"
