from __future__ import annotations

from contextlib import closing
from typing import Any, Callable, Dict, List, Optional

from bright_web.domain.models import SqlServerSettings


class Database:
    """
    SQL Server handle for models that need one.
    Opens a pyodbc connection per call; nothing is held open between calls.
    """

    def __init__(self, settings: SqlServerSettings, connect: Optional[Callable[[str], Any]] = None):
        if not settings.database:
            raise ValueError("sqlserver.database is empty")
        self._settings = settings
        self._connect_fn = connect

    def connection_string(self) -> str:
        s = self._settings
        parts = [
            f"DRIVER={{{s.driver}}}",
            f"SERVER={s.server}",
            f"DATABASE={s.database}",
        ]

        if s.username:
            parts.append(f"UID={s.username}")
            parts.append(f"PWD={s.password}")
        else:
            parts.append("Trusted_Connection=yes")

        if s.trust_cert:
            parts.append("TrustServerCertificate=yes")

        return ";".join(parts) + ";"

    def _connect(self):
        if self._connect_fn is None:
            # Imported here so the driver is only needed when a database is configured
            import pyodbc

            self._connect_fn = pyodbc.connect
        return self._connect_fn(self.connection_string())

    def fetch_all(self, sql: str, *params) -> List[Dict[str, Any]]:
        with closing(self._connect()) as conn:
            cur = conn.cursor()
            cur.execute(sql, *params)
            columns = [c[0] for c in (cur.description or [])]
            rows = cur.fetchall()
        return [dict(zip(columns, r)) for r in rows]

    def fetch_one(self, sql: str, *params) -> Optional[Dict[str, Any]]:
        rows = self.fetch_all(sql, *params)
        return rows[0] if rows else None

    def execute(self, sql: str, *params) -> int:
        with closing(self._connect()) as conn:
            cur = conn.cursor()
            cur.execute(sql, *params)
            conn.commit()
            return cur.rowcount
