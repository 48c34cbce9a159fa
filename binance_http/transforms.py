"""
响应整形（K 线、深度、归集成交、按交易对索引）
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence


CANDLE_FIELDS = [
    "openTime",
    "open",
    "high",
    "low",
    "close",
    "volume",
    "closeTime",
    "quoteAssetVolume",
    "trades",
    "buyBaseAssetVolume",
    "buyQuoteAssetVolume",
]

BOOK_LEVEL_FIELDS = ["price", "qty"]

AGG_TRADE_KEYS = {
    "a": "aggId",
    "p": "price",
    "q": "qty",
    "f": "firstTradeId",
    "l": "lastTradeId",
    "T": "time",
    "m": "isBuyerMaker",
}


def zip_rows(fields: Sequence[str], rows: Iterable[Sequence[Any]]) -> List[Dict[str, Any]]:
    """把位置数组转换为字典列表，多余的列会被忽略"""
    return [dict(zip(fields, row)) for row in rows]


def index_by(rows: Iterable[Mapping[str, Any]], key: str, value: Optional[str] = None) -> Dict[Any, Any]:
    """
    按字段建立索引

    Args:
        rows: 字典列表
        key: 作为索引的字段（如 symbol）
        value: 取值字段（可选，不传则保留整行）

    Returns:
        {row[key]: row 或 row[value]}，重复的键以后出现的为准
    """
    return {row[key]: (row if value is None else row[value]) for row in rows}


def rename_keys(mapping: Mapping[str, str], row: Mapping[str, Any]) -> Dict[str, Any]:
    return {new: row.get(old) for old, new in mapping.items()}


def candles(rows: Iterable[Sequence[Any]]) -> List[Dict[str, Any]]:
    return zip_rows(CANDLE_FIELDS, rows)


def book(depth: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "lastUpdateId": depth.get("lastUpdateId"),
        "asks": zip_rows(BOOK_LEVEL_FIELDS, depth.get("asks", [])),
        "bids": zip_rows(BOOK_LEVEL_FIELDS, depth.get("bids", [])),
    }


def agg_trades(rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    return [rename_keys(AGG_TRADE_KEYS, row) for row in rows]
