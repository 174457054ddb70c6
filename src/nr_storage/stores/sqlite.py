"""SQLiteStore — durable, single-file storage backend using aiosqlite."""

from __future__ import annotations

import aiosqlite

from nr_storage.exceptions import StoreError
from nr_storage.stores.base import DocumentStore

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS nr_store (
    key   TEXT PRIMARY KEY,
    value BLOB NOT NULL
)
"""


class SQLiteStore(DocumentStore):
    """Persistent store backed by a single SQLite file.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
    """

    def __init__(self, db_path: str = "nr_store.db") -> None:
        self._db_path = db_path
        self._db: aiosqlite.Connection | None = None

    async def connect(self) -> None:
        await self._connect()

    async def _connect(self) -> aiosqlite.Connection:
        if self._db is None:
            try:
                self._db = await aiosqlite.connect(self._db_path)
                await self._db.execute(_CREATE_TABLE)
                await self._db.commit()
            except aiosqlite.Error as exc:
                raise StoreError("connect", str(exc)) from exc
        return self._db

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    # ── DocumentStore protocol ───────────────────────────────

    async def get(self, key: str) -> bytes | None:
        db = await self._connect()
        try:
            cursor = await db.execute("SELECT value FROM nr_store WHERE key = ?", (key,))
            row = await cursor.fetchone()
        except aiosqlite.Error as exc:
            raise StoreError("get", str(exc)) from exc
        if row is None:
            return None
        value = row[0]
        if isinstance(value, str):
            return value.encode("utf-8")
        return bytes(value)

    async def set(self, key: str, value: bytes) -> None:
        db = await self._connect()
        try:
            # Upsert keeps the original rowid, so listings stay in first-insertion order.
            await db.execute(
                "INSERT INTO nr_store (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
            await db.commit()
        except aiosqlite.Error as exc:
            raise StoreError("set", str(exc)) from exc

    async def keys(self, prefix: str) -> list[str]:
        db = await self._connect()
        try:
            cursor = await db.execute(
                "SELECT key FROM nr_store WHERE substr(key, 1, ?) = ? ORDER BY rowid",
                (len(prefix), prefix),
            )
            rows = await cursor.fetchall()
        except aiosqlite.Error as exc:
            raise StoreError("keys", str(exc)) from exc
        return [row[0] for row in rows]
