import logging
import sys


class _FieldsFormatter(logging.Formatter):
    """Appends structured fields as ``key=value`` pairs after the message."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields: dict[str, object] = getattr(record, "fields", {})
        if not fields:
            return line
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(fields.items()))
        return f"{line} | {rendered}"


class Log:
    """Centralized logging with structured fields.

    Keyword arguments passed to any level method are attached to the record
    under ``fields`` and rendered by the stdout handler.
    """

    _logger: logging.Logger = logging.getLogger("receiptly")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                _FieldsFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra={"fields": kwargs})

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra={"fields": kwargs})

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra={"fields": kwargs})

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra={"fields": kwargs})
