import pytest

from library_catalog.library import Library


class FakeClock:
    """Controllable replacement for the time source used by Book."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, days: float = 0, seconds: float = 0) -> None:
        self.now += days * 86400 + seconds


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr("library_catalog.book._now", fake)
    return fake


@pytest.fixture
def lib():
    # Each test gets its own empty catalog starting at the default id
    return Library(first_book_id=1001, loan_days=14)


@pytest.fixture
def seeded_lib(lib):
    from library_catalog.main import seed_library
    seed_library(lib)
    return lib
