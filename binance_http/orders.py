"""
下单参数规则（现货 / 合约）
==========================
补全默认的 type 和 timeInForce，并按订单类型校验必填参数。
返回新的 payload，不修改调用方传入的字典。
"""
from typing import Any, Dict, List, Mapping, Optional

from .binance_client import BinanceConfigError, check_params


SPOT_GTC_TYPES = ("LIMIT", "STOP_LOSS_LIMIT", "TAKE_PROFIT_LIMIT")
SPOT_REQUIRED = ["symbol", "side", "quantity"]

FUTURES_GTC_TYPES = ("LIMIT", "STOP", "TAKE_PROFIT")
FUTURES_REQUIRED = ["symbol", "side", "type", "quantity"]

# 订单类型 -> 额外必填字段
FUTURES_TYPE_REQUIRED: Dict[str, List[str]] = {
    "LIMIT": ["price", "timeInForce"],
    "STOP": ["price", "stopPrice"],
    "TAKE_PROFIT": ["price", "stopPrice"],
    "STOP_MARKET": ["stopPrice"],
    "TAKE_PROFIT_MARKET": ["stopPrice"],
}


def prepare_spot_order(payload: Optional[Mapping[str, Any]], name: str = "order") -> Dict[str, Any]:
    """
    现货下单参数

    未指定 type 时默认 LIMIT；限价类订单默认 timeInForce 为 GTC。

    Args:
        payload: 订单参数
        name: 方法名（用于错误信息）

    Returns:
        补全后的新 payload
    """
    payload = dict(payload or {})
    order_type = payload.get("type")

    if not order_type or order_type in SPOT_GTC_TYPES:
        payload = {"timeInForce": "GTC", **payload}

    check_params(name, payload, SPOT_REQUIRED)
    return {"type": "LIMIT", **payload}


def futures_required_fields(order_type: str) -> List[str]:
    return FUTURES_REQUIRED + FUTURES_TYPE_REQUIRED.get(order_type, [])


def prepare_futures_order(payload: Optional[Mapping[str, Any]], name: str = "futuresOrder") -> Dict[str, Any]:
    """
    合约下单参数

    未指定 type 时默认 LIMIT；LIMIT / STOP / TAKE_PROFIT 默认 timeInForce 为 GTC。
    MARKET 订单不能带 timeInForce。

    Args:
        payload: 订单参数
        name: 方法名（用于错误信息）

    Returns:
        补全后的新 payload

    Raises:
        BinanceConfigError: 参数组合非法或缺少必填参数
    """
    payload = dict(payload or {})
    order_type = payload.get("type") or "LIMIT"

    if order_type == "MARKET" and payload.get("timeInForce"):
        raise BinanceConfigError("timeInForce parameter cannot be send with type MARKET")

    if order_type in FUTURES_GTC_TYPES:
        payload = {"timeInForce": "GTC", **payload}
    payload["type"] = order_type

    check_params(name, payload, futures_required_fields(order_type))
    return payload
