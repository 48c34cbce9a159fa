"""
配置文件
支持从环境变量读取配置
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class BinanceConfig:
    """Binance 配置类"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        http_base: Optional[str] = None,
        http_futures_base: Optional[str] = None,
    ):
        """
        初始化配置

        Args:
            api_key: API Key（如果为 None，则从环境变量读取）
            api_secret: API Secret（如果为 None，则从环境变量读取）
            http_base: 现货根地址（可选）
            http_futures_base: 合约根地址（可选）
        """
        self.api_key = api_key or os.getenv("BINANCE_API_KEY", "")
        self.api_secret = api_secret or os.getenv("BINANCE_API_SECRET", "")
        self.http_base = http_base or os.getenv("BINANCE_HTTP_BASE")
        self.http_futures_base = http_futures_base or os.getenv("BINANCE_HTTP_FUTURES_BASE")

    def __repr__(self) -> str:
        return (
            f"BinanceConfig(api_key={'***' if self.api_key else ''!r}, "
            f"http_base={self.http_base!r}, http_futures_base={self.http_futures_base!r})"
        )
