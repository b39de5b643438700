from collections.abc import Generator

import pytest

from typedlist import ListConfiguration, TypedList


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """
    Ensure list switches from the outer environment do not leak into tests.
    """
    for key in (
        "TYPEDLIST_ATOMIC_INSERT",
        "TYPEDLIST_CHECKED_APPLY",
        "TYPEDLIST_DEBUG_LOGGING",
    ):
        monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def words() -> TypedList[str]:
    return TypedList.of(
        "string",
        "hello",
        "world",
        "!",
        configuration=ListConfiguration(),
    )
