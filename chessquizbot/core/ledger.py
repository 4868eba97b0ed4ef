from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable

from .db import Database
from .errors import StorageUnavailable
from .utility import DAY_MS, now_ms

log = logging.getLogger(__name__)

DAILY_REWARD = 25


@dataclass
class UserAccount:
    user_id: str
    coins: int
    last_daily_claim_at: int


@dataclass
class LeaderboardRow:
    user_id: str
    coins: int


class LedgerStore:
    """Coin balances and daily-claim timestamps, keyed by user id."""

    def __init__(
        self,
        db: Database,
        clock: Callable[[], int] = now_ms,
        daily_reward: int = DAILY_REWARD,
        daily_interval_ms: int = DAY_MS,
    ):
        self.db = db
        self.clock = clock
        self.daily_reward = int(daily_reward)
        self.daily_interval_ms = int(daily_interval_ms)

    async def ensure_account(self, user_id: str):
        await self.db.execute(
            "INSERT OR IGNORE INTO users (userId, coins, lastDaily) VALUES (?, 0, 0)",
            (str(user_id),),
        )

    async def get_account(self, user_id: str) -> UserAccount:
        await self.ensure_account(user_id)
        row = await self.db.fetchone(
            "SELECT coins, lastDaily FROM users WHERE userId = ?",
            (str(user_id),),
        )
        return UserAccount(str(user_id), int(row["coins"]), int(row["lastDaily"] or 0))

    async def get_balance(self, user_id: str) -> int:
        return (await self.get_account(user_id)).coins

    async def credit(self, user_id: str, amount: int):
        """coins += amount. Negative amounts debit; no floor is applied."""
        await self.ensure_account(user_id)
        await self.db.execute(
            "UPDATE users SET coins = coins + ? WHERE userId = ?",
            (int(amount), str(user_id)),
        )

    async def debit(self, user_id: str, amount: int, *, allow_negative: bool = True):
        if allow_negative:
            await self.credit(user_id, -int(amount))
            return
        await self.ensure_account(user_id)
        await self.db.execute(
            "UPDATE users SET coins = MAX(coins - ?, 0) WHERE userId = ?",
            (int(amount), str(user_id)),
        )

    async def try_spend(self, user_id: str, amount: int) -> bool:
        """Debit only if the balance covers it. Returns False when it does not."""
        await self.ensure_account(user_id)
        changed = await self.db.execute(
            "UPDATE users SET coins = coins - ? WHERE userId = ? AND coins >= ?",
            (int(amount), str(user_id), int(amount)),
        )
        return changed > 0

    async def set_last_daily_claim(self, user_id: str, timestamp: int):
        await self.ensure_account(user_id)
        await self.db.execute(
            "UPDATE users SET lastDaily = ? WHERE userId = ?",
            (int(timestamp), str(user_id)),
        )

    async def claim_daily(self, user_id: str) -> bool:
        """Credit the daily reward and stamp the claim in one statement.

        Returns False if the last claim is younger than the daily interval.
        """
        now = self.clock()
        await self.ensure_account(user_id)
        changed = await self.db.execute(
            """
            UPDATE users
            SET coins = coins + ?, lastDaily = ?
            WHERE userId = ? AND ? - COALESCE(lastDaily, 0) >= ?
            """,
            (self.daily_reward, now, str(user_id), now, self.daily_interval_ms),
        )
        return changed > 0

    async def record_guild_member(self, guild_id: str, user_id: str):
        await self.db.execute(
            "INSERT OR IGNORE INTO guild_users (guildId, userId) VALUES (?, ?)",
            (str(guild_id), str(user_id)),
        )

    async def observe_member(self, guild_id: str | None, user_id: str):
        """Best-effort guild observation; storage failures never block the command."""
        if not guild_id:
            return
        try:
            await self.record_guild_member(guild_id, user_id)
        except StorageUnavailable:
            log.debug("Could not record guild member %s in %s", user_id, guild_id)

    async def top_balances(self, limit: int = 10, guild_id: str | None = None) -> list[LeaderboardRow]:
        if guild_id:
            rows = await self.db.fetchall(
                """
                SELECT u.userId, u.coins
                FROM users u
                INNER JOIN guild_users g ON g.userId = u.userId
                WHERE g.guildId = ?
                ORDER BY u.coins DESC, u.rowid ASC
                LIMIT ?
                """,
                (str(guild_id), int(limit)),
            )
        else:
            rows = await self.db.fetchall(
                "SELECT userId, coins FROM users ORDER BY coins DESC, rowid ASC LIMIT ?",
                (int(limit),),
            )
        return [LeaderboardRow(str(r["userId"]), int(r["coins"])) for r in rows]
