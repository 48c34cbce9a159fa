"""
用户数据流 API（listenKey）
"""
from typing import Optional, Dict

import httpx

from .binance_client import BinanceClient


class UserStreamAPI:
    """现货用户数据流 API"""

    def __init__(self, client: BinanceClient):
        self.client = client

    async def get_data_stream(self, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        创建 listenKey
        POST /api/v1/userDataStream

        Returns:
            {listenKey}
        """
        return await self.client.private_call(
            "/v1/userDataStream", None, method="POST", no_data=True, agent=agent
        )

    async def keep_data_stream(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        延长 listenKey 有效期
        PUT /api/v1/userDataStream

        Args:
            payload: 必须包含 listenKey
        """
        return await self.client.private_call(
            "/v1/userDataStream", payload, method="PUT", no_extra=True, agent=agent
        )

    async def close_data_stream(self, payload: Optional[Dict] = None, agent: Optional[httpx.AsyncClient] = None) -> Dict:
        """
        关闭 listenKey
        DELETE /api/v1/userDataStream

        Args:
            payload: 必须包含 listenKey
        """
        return await self.client.private_call(
            "/v1/userDataStream", payload, method="DELETE", no_extra=True, agent=agent
        )
