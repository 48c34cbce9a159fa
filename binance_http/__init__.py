"""
Binance HTTP Python SDK
=======================
Binance 现货与 U 本位合约 REST API 的异步 Python SDK
"""
from typing import Optional

from .binance_client import (
    BinanceClient,
    BinanceError,
    BinanceConfigError,
    BinanceAPIError,
    BinanceTransportError,
    Clock,
    SystemClock,
    check_params,
    make_query_string,
    send_result,
)
from .config import BinanceConfig
from .public import PublicAPI
from .trade import TradeAPI
from .account import AccountAPI
from .asset import AssetAPI
from .user import UserStreamAPI
from .futures_public import FuturesPublicAPI
from .futures_trade import FuturesTradeAPI
from .futures_account import FuturesAccountAPI


BASE = "https://api.binance.com"
FUTURES_BASE = "https://fapi.binance.com"
API_PATH_BASE = "api"
FUTURES_API_PATH_BASE = "fapi"


class Binance:
    """Binance 主类，整合现货和合约的所有 API 模块"""

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        http_base: Optional[str] = None,
        http_futures_base: Optional[str] = None,
        clock: Optional[Clock] = None,
    ):
        """
        初始化 Binance 客户端

        Args:
            api_key: API Key（公共接口可以为空）
            api_secret: API Secret（公共接口可以为空）
            http_base: 现货根地址（可选，默认 https://api.binance.com）
            http_futures_base: 合约根地址（可选，默认 https://fapi.binance.com）
            clock: 签名时间戳使用的时钟（可选，默认系统时钟）
        """
        self.client = BinanceClient(
            api_key=api_key,
            api_secret=api_secret,
            base_url=http_base or BASE,
            api_path_base=API_PATH_BASE,
            clock=clock,
        )
        self.futures_client = BinanceClient(
            api_key=api_key,
            api_secret=api_secret,
            base_url=http_futures_base or FUTURES_BASE,
            api_path_base=FUTURES_API_PATH_BASE,
            clock=clock,
        )

        # 现货
        self.public = PublicAPI(self.client)
        self.trade = TradeAPI(self.client)
        self.account = AccountAPI(self.client)
        self.asset = AssetAPI(self.client)
        self.user_stream = UserStreamAPI(self.client)

        # 合约
        self.futures_public = FuturesPublicAPI(self.futures_client)
        self.futures_trade = FuturesTradeAPI(self.futures_client)
        self.futures_account = FuturesAccountAPI(self.futures_client)

    @classmethod
    def from_config(cls, config: BinanceConfig, clock: Optional[Clock] = None) -> "Binance":
        return cls(
            api_key=config.api_key,
            api_secret=config.api_secret,
            http_base=config.http_base,
            http_futures_base=config.http_futures_base,
            clock=clock,
        )

    async def __aenter__(self):
        await self.client.__aenter__()
        await self.futures_client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.futures_client.__aexit__(exc_type, exc_val, exc_tb)
        await self.client.__aexit__(exc_type, exc_val, exc_tb)


__all__ = [
    "Binance",
    "BinanceClient",
    "BinanceConfig",
    "BinanceError",
    "BinanceConfigError",
    "BinanceAPIError",
    "BinanceTransportError",
    "Clock",
    "SystemClock",
    "check_params",
    "make_query_string",
    "send_result",
    "PublicAPI",
    "TradeAPI",
    "AccountAPI",
    "AssetAPI",
    "UserStreamAPI",
    "FuturesPublicAPI",
    "FuturesTradeAPI",
    "FuturesAccountAPI",
]
