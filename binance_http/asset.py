"""
资产相关 API（提现、充值、现货与合约划转）
"""
from typing import Optional, Dict

import httpx

from .binance_client import BinanceClient, check_params


class AssetAPI:
    """资产 API（签名，现货域名）"""

    def __init__(self, client: BinanceClient):
        self.client = client

    async def withdraw(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        提现
        POST /wapi/v3/withdraw.html

        Args:
            payload: 提现参数（asset, address, amount 等）

        Returns:
            提现结果
        """
        return await self.client.private_call("/wapi/v3/withdraw.html", payload, method="POST", agent=agent)

    async def withdraw_history(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        提现记录
        GET /wapi/v3/withdrawHistory.html
        """
        return await self.client.private_call("/wapi/v3/withdrawHistory.html", payload, agent=agent)

    async def deposit_history(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        充值记录
        GET /wapi/v3/depositHistory.html
        """
        return await self.client.private_call("/wapi/v3/depositHistory.html", payload, agent=agent)

    async def deposit_address(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        充值地址
        GET /wapi/v3/depositAddress.html
        """
        return await self.client.private_call("/wapi/v3/depositAddress.html", payload, agent=agent)

    async def futures_account_transfer(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Dict:
        """
        现货与合约账户划转
        POST /sapi/v1/futures/transfer

        Args:
            payload: 必须包含 asset, amount, type（1: 现货转合约, 2: 合约转现货）

        Returns:
            {tranId}
        """
        check_params("futuresAccountTransfer", payload, ["asset", "amount", "type"])
        return await self.client.private_call("/sapi/v1/futures/transfer", payload, method="POST", agent=agent)

    async def futures_account_transaction_history(
        self,
        payload: Optional[Dict] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Dict:
        """
        划转记录
        GET /sapi/v1/futures/transfer

        Args:
            payload: 必须包含 asset, startTime
        """
        check_params("futuresAccountTransactionHistory", payload, ["asset", "startTime"])
        return await self.client.private_call("/sapi/v1/futures/transfer", payload, agent=agent)
