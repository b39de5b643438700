from typedlist.utils.env import getenv_bool
from typedlist.utils.logs import setup_logging

__all__ = (
    "getenv_bool",
    "setup_logging",
)
