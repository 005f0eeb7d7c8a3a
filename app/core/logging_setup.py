import logging
import sys

# Third-party loggers that are only useful when debugging the storage layer
_NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite")


def setup_logging(level: str | int = logging.INFO) -> None:
    """
    Configure the root logger with a single stderr handler.

    Safe to call more than once: existing root handlers are replaced
    so records are never emitted twice.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
