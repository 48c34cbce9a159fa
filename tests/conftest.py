import pytest

from binance_http import Binance, BinanceClient

API_KEY = "test-key"
API_SECRET = "test-secret"
NOW = 1499827319559


class FixedClock:
    def __init__(self, value: int = NOW):
        self.value = value

    def now(self) -> int:
        return self.value


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def spot_client(clock):
    return BinanceClient(
        api_key=API_KEY,
        api_secret=API_SECRET,
        base_url="https://api.binance.com",
        api_path_base="api",
        clock=clock,
    )


@pytest.fixture
def binance(clock):
    return Binance(api_key=API_KEY, api_secret=API_SECRET, clock=clock)
