from __future__ import annotations

import asyncio
import logging
import sys
import time
import discord
from discord.ext import commands
from discord import app_commands

from chessquizbot.core.configurations import Config, load_token
from chessquizbot.core.db import Database
from chessquizbot.core.errors import GENERIC_ERROR_MESSAGE, CooldownActive, QuizBotError, StorageUnavailable
from chessquizbot.core.ledger import LedgerStore
from chessquizbot.core.quiz import QuizSessionTracker
from chessquizbot.core.shop import EntitlementShop, catalog_from_config
from chessquizbot.core.utility import HOUR_MS, MINUTE_MS
from chessquizbot.utils.embed_utils import cooldown_embed
from chessquizbot.utils.interactions import reply

log = logging.getLogger("chessquizbot")

COGS = [
    "chessquizbot.cogs.economy",   # daily, balance, leaderboard, addmoney, removemoney
    "chessquizbot.cogs.quiz",      # chessquiz, answer, questions
    "chessquizbot.cogs.shop",      # shop + buy/close buttons
]

# Constants
SEPARATOR = "=" * 60
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
SYNC_ERROR_MESSAGES = {
    "missing_permission": "Bot missing 'Use Application Commands' permission",
    "missing_scope": "Missing 'applications.commands' scope in invite URL",
}


def _log_section(title: str = ""):
    """Log a section separator with optional title."""
    log.info(SEPARATOR)
    if title:
        log.info(title)
        log.info(SEPARATOR)


class ChessQuizBot(commands.Bot):
    def __init__(self, cfg: Config, db: Database):
        intents = discord.Intents.default()
        intents.members = True

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
        )
        self.cfg = cfg
        self.db = db
        self.started_ts = int(time.time())

        self.ledger = LedgerStore(
            db,
            daily_reward=cfg.get_int("economy", "daily_reward", default=25),
            daily_interval_ms=cfg.get_int("economy", "daily_interval_hours", default=24) * HOUR_MS,
        )
        self.quiz = QuizSessionTracker(
            db,
            self.ledger,
            cooldown_ms=cfg.get_int("quiz", "cooldown_minutes", default=90) * MINUTE_MS,
        )
        self.shop = EntitlementShop(self.ledger, catalog_from_config(cfg.get("shop", "items")))

        self._commands_synced = False
        self.tree.on_error = self.on_app_command_error

    async def setup_hook(self):
        """Called when the bot is setting up. Initialize database and load cogs."""
        _log_section("Initializing ChessQuizBot...")

        await self.db.connect()
        log.info("✓ Database connected (%s)", self.db.path)
        await self.db.migrate()
        log.info("✓ Database migrations completed")

        for ext in COGS:
            await self.load_extension(ext)
            log.info("✓ Loaded: %s", ext)

    async def _sync_commands(self):
        """Sync to configured guilds, or globally when none are configured."""
        guild_ids = self.cfg.guild_ids()
        if not guild_ids:
            synced = await self.tree.sync()
            log.info("✓ Synced %d global commands", len(synced))
            return

        for gid in guild_ids:
            guild_obj = discord.Object(id=gid)
            self.tree.copy_global_to(guild=guild_obj)
            try:
                synced = await self.tree.sync(guild=guild_obj)
                log.info("✓ Synced %d commands to guild %s", len(synced), gid)
            except discord.Forbidden:
                log.error("✗ Forbidden (403) when syncing to guild %s", gid)
                for msg in SYNC_ERROR_MESSAGES.values():
                    log.error("  - %s", msg)

    async def on_ready(self):
        """Called when the bot is ready. Sync commands once."""
        _log_section(f"Bot is ready! Logged in as {self.user} (ID: {self.user.id})")
        log.info("Connected to %d guild(s)", len(self.guilds))
        if not self._commands_synced:
            try:
                await self._sync_commands()
                self._commands_synced = True
            except discord.HTTPException as e:
                log.error("✗ Command sync failed: %s", e)

    async def on_app_command_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        """Dispatch boundary: domain errors get their own message, everything else a generic one."""
        original = getattr(error, "original", error)

        if isinstance(original, CooldownActive):
            await reply(interaction, embed=cooldown_embed(original.remaining_ms))
            return
        if isinstance(original, QuizBotError) and not isinstance(original, StorageUnavailable):
            await reply(interaction, original.user_message)
            return

        command = interaction.command.qualified_name if interaction.command else "?"
        log.error("Unhandled command error in /%s", command, exc_info=original)
        await reply(interaction, GENERIC_ERROR_MESSAGE)

    async def close(self):
        await super().close()
        await self.db.close()


def configure_logging(cfg: Config):
    level_name = str(cfg.get("logging", "level", default="INFO")).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)


async def main(config_path: str | None = None):
    cfg = Config.load(config_path)
    configure_logging(cfg)

    token = load_token(cfg)
    if not token:
        _log_section("ERROR: Bot token not configured!")
        log.critical("%s is missing or empty (or set DISCORD_BOT_TOKEN)", cfg.get("token_file"))
        sys.exit(1)

    db = Database(
        cfg.get("database", "path", default="data.sqlite"),
        busy_timeout_ms=cfg.get_int("database", "busy_timeout_ms", default=5000),
        max_retries=cfg.get_int("database", "max_retries", default=3),
    )
    bot = ChessQuizBot(cfg, db)

    # Retry logic for rate limiting
    max_retries = 5
    async with bot:
        for attempt in range(max_retries):
            try:
                await bot.start(token)
                break
            except discord.LoginFailure as e:
                log.critical("Discord Login Failure: %s", e)
                sys.exit(1)
            except discord.HTTPException as e:
                if e.status != 429:
                    raise
                if attempt < max_retries - 1:
                    wait_time = 5 * (2 ** attempt)  # 5, 10, 20, 40 seconds
                    log.warning("Rate limited (429). Waiting %ds before retry (%d/%d)...", wait_time, attempt + 1, max_retries)
                    await asyncio.sleep(wait_time)
                    continue
                log.critical("Rate limited after %d attempts. Please wait and try again later.", max_retries)
                sys.exit(1)


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
