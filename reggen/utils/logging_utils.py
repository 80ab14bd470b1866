import logging
import sys

LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def configure_logging(*, verbose: bool = False) -> None:
    """Route reggen's module loggers for the CLI.

    DEBUG/INFO records (entry counts, the index path) go to stdout and
    WARNING and above (entries skipped under --keep-going) go to stderr.
    Without ``verbose`` only warnings are shown.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    formatter = logging.Formatter(LOG_FORMAT)

    info_handler = logging.StreamHandler(stream=sys.stdout)
    info_handler.addFilter(_MaxLevelFilter(logging.INFO))
    info_handler.setFormatter(formatter)

    warning_handler = logging.StreamHandler(stream=sys.stderr)
    warning_handler.setLevel(logging.WARNING)
    warning_handler.setFormatter(formatter)

    root.addHandler(info_handler)
    root.addHandler(warning_handler)
