import pytest

from ethcal.engine import CalendarEngine
from ethcal.grid import build_ethiopian_year_grid, build_gregorian_year_grid


@pytest.fixture
def engine():
    return CalendarEngine()


@pytest.fixture
def exact_engine():
    return CalendarEngine(exact=True)


@pytest.fixture
def eth_2016():
    # common year, 1 Meskerem on a Tuesday
    return build_ethiopian_year_grid(2016)


@pytest.fixture
def eth_2015():
    # leap year (Pagume has 6 days)
    return build_ethiopian_year_grid(2015)


@pytest.fixture
def greg_2024():
    return build_gregorian_year_grid(2024)
