from os import getenv as os_getenv
from typing import overload

__all__ = ("getenv_bool",)


@overload
def getenv_bool(
    key: str,
    /,
) -> bool | None: ...


@overload
def getenv_bool(
    key: str,
    /,
    default: bool,
) -> bool: ...


def getenv_bool(
    key: str,
    /,
    default: bool | None = None,
) -> bool | None:
    """
    Read a boolean switch from the environment.

    Parameters
    ----------
    key : str
        The environment variable name to retrieve
    default : bool | None, optional
        Value to return if the environment variable is not set or empty

    Returns
    -------
    bool | None
        True when the variable is set to 'true', '1' or 't' (case-insensitive),
        False for any other non-empty value, the default otherwise
    """
    if value := os_getenv(key):
        return value.strip().lower() in ("true", "1", "t")

    else:
        return default
