from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List

from ..common.datetime_utils import parse_iso_date
from ..common.money import to_decimal


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_date(value: Any) -> date:
    """Normalize DATE/DATETIME columns across connector implementations.

    mysql-connector can return:
    - datetime.date
    - datetime.datetime (DATETIME / TIMESTAMP columns)
    - string (e.g. '2025-01-31') with use_pure and raw cursors
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return parse_iso_date(value[:10])
    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")


def normalize_mysql_decimal(value: Any) -> Decimal:
    """DECIMAL columns arrive as Decimal, but as str/bytes on raw cursors."""

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    return to_decimal(value)
