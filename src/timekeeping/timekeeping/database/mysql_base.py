from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
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


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def encode_codes(codes) -> str:
    """Codes are stored as a JSON array in a TEXT column."""
    return json.dumps(list(codes))


def decode_codes(value: Any) -> tuple[str, ...]:
    if value is None or value == "":
        return ()
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    return tuple(str(c) for c in json.loads(value))
