"""
账户相关 API
"""
from typing import Optional, Dict, Any

import httpx

from .binance_client import BinanceClient


class AccountAPI:
    """现货账户 API（签名）"""

    def __init__(self, client: BinanceClient):
        self.client = client

    async def account_info(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        获取账户信息和余额
        GET /api/v3/account
        """
        return await self.client.private_call("/v3/account", payload, agent=agent)

    async def trade_fee(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Any:
        """
        获取交易手续费率
        GET /wapi/v3/tradeFee.html

        Returns:
            响应中的 tradeFee 列表
        """
        result = await self.client.private_call("/wapi/v3/tradeFee.html", payload, agent=agent)
        return result["tradeFee"]

    async def asset_detail(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        获取资产详情
        GET /wapi/v3/assetDetail.html
        """
        return await self.client.private_call("/wapi/v3/assetDetail.html", payload, agent=agent)
