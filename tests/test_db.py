import asyncio

import aiosqlite
import pytest

from chessquizbot.core.db import SCHEMA, Database
from chessquizbot.core.errors import StorageUnavailable


class TestSchema:
    @pytest.mark.asyncio
    async def test_tables_exist(self, db):
        rows = await db.fetchall("SELECT name FROM sqlite_master WHERE type = 'table'")
        names = {r["name"] for r in rows}
        assert {"users", "user_quiz", "quiz_cooldown", "quiz_history", "guild_users"} <= names
        assert len(SCHEMA) == 5

    @pytest.mark.asyncio
    async def test_migrate_is_idempotent(self, db):
        await db.execute("INSERT INTO users (userId, coins) VALUES ('u1', 9)")
        await db.migrate()
        row = await db.fetchone("SELECT coins FROM users WHERE userId = 'u1'")
        assert row["coins"] == 9

    @pytest.mark.asyncio
    async def test_wal_journal(self, db):
        row = await db.fetchone("PRAGMA journal_mode")
        assert row[0].lower() == "wal"


class TestExecute:
    @pytest.mark.asyncio
    async def test_returns_changed_rows(self, db):
        assert await db.execute("INSERT OR IGNORE INTO users (userId) VALUES ('u1')") == 1
        assert await db.execute("INSERT OR IGNORE INTO users (userId) VALUES ('u1')") == 0
        assert await db.execute("UPDATE users SET coins = 5") == 1

    @pytest.mark.asyncio
    async def test_bad_sql_is_storage_unavailable(self, db):
        with pytest.raises(StorageUnavailable):
            await db.execute("INSERT INTO no_such_table VALUES (1)")

    @pytest.mark.asyncio
    async def test_data_survives_reopen(self, tmp_path):
        path = str(tmp_path / "persist.sqlite")
        first = Database(path)
        await first.connect()
        await first.migrate()
        await first.execute("INSERT INTO users (userId, coins) VALUES ('u1', 42)")
        await first.close()

        second = Database(path)
        await second.connect()
        try:
            row = await second.fetchone("SELECT coins FROM users WHERE userId = 'u1'")
            assert row["coins"] == 42
        finally:
            await second.close()


class TestTransaction:
    @pytest.mark.asyncio
    async def test_commit(self, db):
        async with db.transaction():
            await db.execute("INSERT INTO users (userId) VALUES ('u1')")
            await db.execute("INSERT INTO users (userId) VALUES ('u2')")
        row = await db.fetchone("SELECT COUNT(*) AS n FROM users")
        assert row["n"] == 2
        assert not db.conn.in_transaction

    @pytest.mark.asyncio
    async def test_rollback_on_error(self, db):
        with pytest.raises(ValueError):
            async with db.transaction():
                await db.execute("INSERT INTO users (userId) VALUES ('u1')")
                raise ValueError("abort")
        row = await db.fetchone("SELECT COUNT(*) AS n FROM users")
        assert row["n"] == 0
        assert not db.conn.in_transaction

    @pytest.mark.asyncio
    async def test_cancelled_transaction_is_rolled_back(self, db, ledger):
        await ledger.credit("u1", 100)
        wiped = asyncio.Event()

        async def wipe_then_stall():
            async with db.transaction():
                await db.execute("UPDATE users SET coins = 0 WHERE userId = 'u1'")
                wiped.set()
                await asyncio.sleep(30)

        task = asyncio.create_task(wipe_then_stall())
        await wiped.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        # an unrelated autocommitting write must not commit the cancelled update
        await ledger.credit("u2", 5)
        assert not db.conn.in_transaction
        assert await ledger.get_balance("u1") == 100
        assert await ledger.get_balance("u2") == 5

    @pytest.mark.asyncio
    async def test_nested_joins_outer(self, db):
        with pytest.raises(ValueError):
            async with db.transaction():
                async with db.transaction():
                    await db.execute("INSERT INTO users (userId) VALUES ('u1')")
                raise ValueError("abort outer")
        row = await db.fetchone("SELECT COUNT(*) AS n FROM users")
        assert row["n"] == 0


class TestRetry:
    @pytest.mark.asyncio
    async def test_busy_error_is_retried(self, db):
        calls = []

        async def flaky():
            calls.append(1)
            if len(calls) < 3:
                raise aiosqlite.OperationalError("database is locked")
            return "ok"

        assert await db._run(flaky) == "ok"
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_retries_are_bounded(self, db):
        calls = []

        async def always_busy():
            calls.append(1)
            raise aiosqlite.OperationalError("database is locked")

        with pytest.raises(StorageUnavailable):
            await db._run(always_busy)
        assert len(calls) == db.max_retries + 1

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self, db):
        calls = []

        async def broken():
            calls.append(1)
            raise aiosqlite.OperationalError("no such column: nope")

        with pytest.raises(StorageUnavailable):
            await db._run(broken)
        assert len(calls) == 1
