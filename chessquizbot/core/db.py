from __future__ import annotations
import asyncio
import logging
import aiosqlite
from contextlib import asynccontextmanager

from .errors import StorageUnavailable

log = logging.getLogger(__name__)

# Table and column names stay compatible with existing data.sqlite files.
SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
      userId    TEXT PRIMARY KEY,
      coins     INTEGER NOT NULL DEFAULT 0,
      lastDaily INTEGER DEFAULT 0
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS user_quiz (
      userId  TEXT PRIMARY KEY,
      quizId  INTEGER NOT NULL,
      askedAt INTEGER NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS quiz_cooldown (
      userId   TEXT PRIMARY KEY,
      lastUsed INTEGER NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS quiz_history (
      userId   TEXT PRIMARY KEY,
      askedIds TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS guild_users (
      guildId TEXT NOT NULL,
      userId  TEXT NOT NULL,
      PRIMARY KEY (guildId, userId)
    );
    """,
)


def _is_busy(e: Exception) -> bool:
    msg = str(e).lower()
    return "locked" in msg or "busy" in msg


class Database:
    def __init__(
        self,
        path: str,
        busy_timeout_ms: int = 5000,
        max_retries: int = 3,
        retry_base_delay: float = 0.05,
    ):
        self.path = path
        self.busy_timeout_ms = int(busy_timeout_ms)
        self.max_retries = int(max_retries)
        self.retry_base_delay = retry_base_delay
        self.conn: aiosqlite.Connection | None = None
        # Single writer: held for every statement, or for a whole transaction.
        self._lock = asyncio.Lock()
        self._tx_task: asyncio.Task | None = None

    async def connect(self):
        try:
            self.conn = await aiosqlite.connect(self.path, timeout=self.busy_timeout_ms / 1000)
            self.conn.row_factory = aiosqlite.Row
            # WAL keeps committed rows intact if the process dies mid-write
            await self.conn.execute("PRAGMA journal_mode=WAL;")
            await self.conn.execute("PRAGMA synchronous=NORMAL;")
            await self.conn.execute(f"PRAGMA busy_timeout={self.busy_timeout_ms};")
            await self.conn.commit()
        except aiosqlite.Error as e:
            raise StorageUnavailable() from e

    async def close(self):
        if self.conn:
            await self.conn.close()
            self.conn = None

    def _owns_tx(self) -> bool:
        return self._tx_task is not None and self._tx_task is asyncio.current_task()

    @asynccontextmanager
    async def _locked(self):
        # The task running a transaction already holds the lock.
        if self._owns_tx():
            yield
        else:
            async with self._lock:
                yield

    async def _run(self, op, *args):
        """Run a storage call, retrying busy/locked errors with exponential backoff."""
        attempt = 0
        while True:
            try:
                return await op(*args)
            except aiosqlite.OperationalError as e:
                if not _is_busy(e) or attempt >= self.max_retries or self._owns_tx():
                    log.error("Storage call failed: %s", e)
                    raise StorageUnavailable() from e
                attempt += 1
                delay = self.retry_base_delay * (2 ** (attempt - 1))
                log.warning("Database busy, retry %d/%d in %.2fs", attempt, self.max_retries, delay)
                await asyncio.sleep(delay)
            except aiosqlite.Error as e:
                log.error("Storage call failed: %s", e)
                raise StorageUnavailable() from e

    async def _execute(self, sql: str, params, commit: bool) -> int:
        assert self.conn
        cur = await self.conn.execute(sql, params)
        rowcount = cur.rowcount
        await cur.close()
        if commit and not self._owns_tx():
            await self.conn.commit()
        return rowcount

    async def execute(self, sql: str, params=()) -> int:
        """Execute SQL statement and return the number of changed rows.

        Commits immediately unless the caller is inside ``transaction()``.
        """
        async with self._locked():
            return await self._run(self._execute, sql, params, True)

    @asynccontextmanager
    async def transaction(self):
        """Transaction context manager: BEGIN on enter, COMMIT on success, ROLLBACK on exception.

        Holds the write lock for the whole body, so other tasks' statements wait.
        Nested use from the owning task joins the outer transaction.
        """
        assert self.conn
        if self._owns_tx():
            yield self
            return
        async with self._lock:
            await self._run(self._execute, "BEGIN IMMEDIATE", (), False)
            self._tx_task = asyncio.current_task()
            try:
                yield self
                await self._run(self.conn.commit)
            except BaseException:
                # Cancellation included: BEGIN must not outlive the lock.
                try:
                    await asyncio.shield(self.conn.rollback())
                except aiosqlite.Error as e:
                    log.error("Rollback failed: %s", e)
                raise
            finally:
                self._tx_task = None

    async def _fetchone(self, sql: str, params):
        assert self.conn
        cur = await self.conn.execute(sql, params)
        row = await cur.fetchone()
        await cur.close()
        return row

    async def fetchone(self, sql: str, params=()):
        async with self._locked():
            return await self._run(self._fetchone, sql, params)

    async def _fetchall(self, sql: str, params):
        assert self.conn
        cur = await self.conn.execute(sql, params)
        rows = await cur.fetchall()
        await cur.close()
        return rows

    async def fetchall(self, sql: str, params=()):
        async with self._locked():
            return await self._run(self._fetchall, sql, params)

    async def migrate(self):
        """Create tables if missing. Wrapped in a single transaction."""
        try:
            async with self.transaction():
                for ddl in SCHEMA:
                    await self.execute(ddl)
        except StorageUnavailable:
            log.exception("Database migration error")
            raise
