import logging
import sys
from typing import Optional, TextIO


LOGGER_NAME = "cloudconfig_validator"
DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _PackageFilter(logging.Filter):
    def __init__(self, prefix: str) -> None:
        super().__init__()
        self._prefix = prefix

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == self._prefix or record.name.startswith(self._prefix + "."):
            return True
        # Third-party records only pass when they are warnings or worse.
        return record.levelno >= logging.WARNING


def configure_stderr_logging(
    *,
    level: int = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure root logging so every record goes to stderr.

    stdout is reserved for the validation report (the parsed document or the
    error list), so log output must never be interleaved with it.
    Debug chatter from third-party libraries is dropped even when ``level``
    is DEBUG.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.addFilter(_PackageFilter(LOGGER_NAME))
    handler.setFormatter(formatter)

    root.addHandler(handler)
