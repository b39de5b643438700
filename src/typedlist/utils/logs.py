import sys
from logging import DEBUG, INFO, Formatter, StreamHandler, getLogger
from typing import Final, TextIO

from typedlist.utils.env import getenv_bool

__all__ = ("setup_logging",)

_HANDLER_NAME: Final[str] = "typedlist.console"


def setup_logging(
    *loggers: str,
    time: bool = True,
    debug: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """\
    Attach console output to the typedlist logger and the given loggers.

    Rejected list operations are reported on the "typedlist" logger at DEBUG
    level. Only the named loggers are touched, the root logger and any other
    logging configuration of the application stay as they are. Calling the
    setup again replaces the handler installed previously.

    Parameters
    ----------
    *loggers: str
        names of additional loggers to configure.
    time: bool = True
        include timestamps in logs (emits local timezone offset).
    debug: bool | None = None
        include debug logs, defaults to TYPEDLIST_DEBUG_LOGGING or __debug__.
    stream: TextIO | None = None
        output stream, defaults to sys.stdout.
    """

    level: int = DEBUG if getenv_bool("TYPEDLIST_DEBUG_LOGGING", __debug__) else INFO
    if debug is not None:
        level = DEBUG if debug else INFO

    formatter: Formatter
    if time:
        formatter = Formatter(
            fmt="%(asctime)s [%(levelname)-4s] [%(name)s] %(message)s",
            datefmt="%d/%b/%Y:%H:%M:%S %z",
        )

    else:
        formatter = Formatter(fmt="[%(levelname)-4s] [%(name)s] %(message)s")

    for name in ("typedlist", *loggers):
        logger = getLogger(name)
        for previous in [
            handler for handler in logger.handlers if handler.get_name() == _HANDLER_NAME
        ]:
            logger.removeHandler(previous)
            previous.close()

        handler = StreamHandler(stream or sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
        logger.setLevel(level)
        # records stop at the console handler
        logger.propagate = False
