"""
Binance REST API Client
=======================
封装 Binance 现货/合约 REST API 的 HTTP 请求，包括签名生成、参数校验和响应处理。
"""
import hmac
import hashlib
import json
import math
import time
from decimal import Decimal
from typing import Optional, Any, Dict, Mapping, Protocol, Sequence
from urllib.parse import quote

import httpx
from loguru import logger

# encodeURIComponent 不转义的字符（字母数字和 -_. 之外）
_QUERY_SAFE = "!~*'()"

# 这些路径不加 api/fapi 前缀
_UNPREFIXED_PATHS = ("/wapi", "/sapi")


class BinanceError(Exception):
    """Binance 客户端错误基类"""


class BinanceConfigError(BinanceError):
    """调用方配置错误：缺少密钥、缺少 payload 或必填参数"""


class BinanceAPIError(BinanceError):
    """Binance API 返回的结构化错误（响应体为 JSON）"""

    def __init__(self, message: str, code: Optional[int] = None):
        self.message = message
        self.code = code
        super().__init__(message)


class BinanceTransportError(BinanceError):
    """非 JSON 错误响应（代理、网关或 HTML 错误页）"""

    def __init__(self, message: str, response: httpx.Response, response_text: str):
        self.message = message
        self.response = response
        self.response_text = response_text
        super().__init__(message)


class Clock(Protocol):
    def now(self) -> int:
        ...


class SystemClock:
    """系统时钟，返回毫秒时间戳"""

    def now(self) -> int:
        return int(time.time() * 1000)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (float, Decimal)) and math.isfinite(value):
        # 不使用科学计数法，整数值去掉 .0
        text = format(Decimal(repr(value)) if isinstance(value, float) else value, "f")
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def make_query_string(params: Optional[Mapping[str, Any]]) -> str:
    """
    根据参数字典构建 URL 查询字符串

    值为假的参数（空字符串、0、None、False）会被丢弃，0 也不例外。
    参数顺序与字典插入顺序一致，不排序。

    Args:
        params: 参数字典（可为 None）

    Returns:
        以 ? 开头的查询字符串；params 为空时返回空字符串
    """
    if not params:
        return ""
    pairs = [
        f"{quote(str(key), safe=_QUERY_SAFE)}={quote(_format_value(value), safe=_QUERY_SAFE)}"
        for key, value in params.items()
        if value
    ]
    return "?" + "&".join(pairs)


def _is_present(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        # 数值 0 视为已提供，NaN 视为缺失
        return not (isinstance(value, (float, Decimal)) and math.isnan(value))
    return bool(value)


def check_params(name: str, payload: Optional[Mapping[str, Any]], requires: Sequence[str] = ()) -> bool:
    """
    校验必填参数是否存在

    Args:
        name: 方法名（用于错误信息）
        payload: 请求参数
        requires: 必填字段列表

    Returns:
        校验通过返回 True

    Raises:
        BinanceConfigError: payload 缺失或缺少必填字段
    """
    if payload is None:
        raise BinanceConfigError("You need to pass a payload object.")

    for field in requires:
        if not _is_present(payload.get(field)):
            raise BinanceConfigError(f"Method {name} requires {field} parameter.")

    return True


def send_result(response: httpx.Response) -> Any:
    """
    处理 API 响应

    成功响应直接解析为 JSON；失败响应中，JSON 响应体视为 API 错误，
    其他响应体（如代理返回的 HTML）视为传输错误。

    Args:
        response: httpx 响应对象

    Returns:
        解析后的 JSON 数据

    Raises:
        BinanceAPIError: 响应体为 JSON 的错误
        BinanceTransportError: 响应体无法解析为 JSON 的错误
    """
    if response.is_success:
        return response.json()

    text = response.text
    try:
        body = json.loads(text)
    except ValueError:
        message = f"{response.status_code} {response.reason_phrase} {text}"
        logger.error(f"Binance Transport Error: {response.status_code} {response.reason_phrase}")
        raise BinanceTransportError(message, response=response, response_text=text) from None

    msg = body.get("msg") if isinstance(body, dict) else None
    code = body.get("code") if isinstance(body, dict) else None
    logger.error(f"Binance API Error: {body}")
    raise BinanceAPIError(msg or f"{response.status_code} {response.reason_phrase}", code=code)


class BinanceClient:
    """Binance REST API 客户端（单个市场：现货或合约）"""

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        base_url: str = "https://api.binance.com",
        api_path_base: str = "api",
        clock: Optional[Clock] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        """
        初始化 Binance 客户端

        Args:
            api_key: API Key
            api_secret: API Secret
            base_url: 市场根地址（如 https://api.binance.com）
            api_path_base: 路径前缀（现货 api，合约 fapi）
            clock: 时钟，默认系统时钟
            http_client: 外部传入的 httpx.AsyncClient（可选，不会被关闭）
            timeout: 自建 httpx.AsyncClient 的超时时间
        """
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = base_url.rstrip("/")
        self.api_path_base = api_path_base
        self.clock = clock or SystemClock()
        self.timeout = timeout

        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

    def __repr__(self) -> str:
        return f"BinanceClient(base_url={self.base_url!r}, api_path_base={self.api_path_base!r})"

    async def __aenter__(self):
        if self._owns_client:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_client and self._client:
            await self._client.aclose()
            self._client = None

    async def _send(
        self,
        method: str,
        url: str,
        path: str,
        headers: Dict[str, str],
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Any:
        client = agent or self._client
        if client is None:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")

        # 查询字符串带签名，只记录到 ? 之前
        logger.debug(f"Binance {method.upper()} {url.split('?', 1)[0]}")
        try:
            response = await client.request(method.upper(), url, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Request failed: {method.upper()} {path}: {e!r}")
            raise

        return send_result(response)

    async def public_call(
        self,
        path: str,
        data: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Any:
        """
        公共请求（无需认证）

        所有 HTTP 方法的参数都放在查询字符串中。

        Args:
            path: 端点路径（如 /v3/exchangeInfo）
            data: 请求参数
            method: HTTP 方法，默认 GET
            headers: 额外请求头
            agent: 本次请求使用的 httpx.AsyncClient（可选，如配置了代理）

        Returns:
            API 响应的 JSON 数据
        """
        url = f"{self.base_url}/{self.api_path_base}{path}{make_query_string(data)}"
        return await self._send(method, url, path, dict(headers or {}), agent)

    async def key_call(
        self,
        path: str,
        data: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Any:
        """
        带 API Key 的请求（不签名）

        Raises:
            BinanceConfigError: 未配置 API Key
        """
        if not self.api_key:
            raise BinanceConfigError("You need to pass an API key to make this call.")

        return await self.public_call(
            path,
            data=data,
            method=method,
            headers={"X-MBX-APIKEY": self.api_key},
            agent=agent,
        )

    def sign(self, params: Mapping[str, Any]) -> str:
        """
        生成请求签名
        签名 = Hex(HMAC-SHA256(查询字符串（不含 ?）, apiSecret))
        """
        query = make_query_string(params)[1:]
        return hmac.new(
            self.api_secret.encode("utf-8"),
            query.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()

    async def _timestamp(self, use_server_time: bool, agent: Optional[httpx.AsyncClient]) -> int:
        if use_server_time:
            result = await self.public_call("/v1/time", agent=agent)
            return result["serverTime"]
        return self.clock.now()

    async def private_call(
        self,
        path: str,
        data: Optional[Mapping[str, Any]] = None,
        method: str = "GET",
        no_data: bool = False,
        no_extra: bool = False,
        agent: Optional[httpx.AsyncClient] = None,
    ) -> Any:
        """
        签名请求

        payload 中的 useServerTime 为真时，先请求服务器时间作为签名时间戳。

        Args:
            path: 端点路径
            data: 请求参数（不会被修改）
            method: HTTP 方法，默认 GET
            no_data: 为真时不发送任何查询参数
            no_extra: 为真时不追加 timestamp 和 signature
            agent: 本次请求使用的 httpx.AsyncClient（可选）

        Returns:
            API 响应的 JSON 数据

        Raises:
            BinanceConfigError: 未配置 API Key 或 Secret
        """
        if not self.api_key or not self.api_secret:
            raise BinanceConfigError("You need to pass an API key and secret to make authenticated calls.")

        data = dict(data or {})
        use_server_time = bool(data.pop("useServerTime", False))
        timestamp = await self._timestamp(use_server_time, agent)

        signature = self.sign({**data, "timestamp": timestamp})
        params = data if no_extra else {**data, "timestamp": timestamp, "signature": signature}

        prefix = "" if any(p in path for p in _UNPREFIXED_PATHS) else f"/{self.api_path_base}"
        query = "" if no_data else make_query_string(params)
        url = f"{self.base_url}{prefix}{path}{query}"

        return await self._send(method, url, path, {"X-MBX-APIKEY": self.api_key}, agent)
