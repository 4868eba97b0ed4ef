from unittest.mock import AsyncMock, MagicMock

import pytest
from discord import app_commands

from chessquizbot import bot as bot_module
from chessquizbot.bot import ChessQuizBot
from chessquizbot.core.configurations import TOKEN_ENV, Config, ConfigError
from chessquizbot.core.db import Database
from chessquizbot.core.errors import (
    GENERIC_ERROR_MESSAGE,
    CooldownActive,
    QuestionPending,
    StorageUnavailable,
)
from chessquizbot.core.utility import MINUTE_MS


def make_interaction():
    interaction = MagicMock()
    interaction.command.qualified_name = "chessquiz"
    interaction.response.is_done = MagicMock(return_value=True)
    interaction.followup.send = AsyncMock()
    return interaction


def wrapped(error):
    """Mimic how the command tree hands over errors raised inside a callback."""
    exc = app_commands.AppCommandError("wrapped")
    exc.original = error
    return exc


@pytest.fixture
def bot_cfg():
    cfg = Config.defaults()
    cfg["quiz"]["cooldown_minutes"] = 30
    cfg["economy"]["daily_reward"] = 40
    return cfg


class TestWiring:
    @pytest.mark.asyncio
    async def test_services_follow_config(self, bot_cfg):
        bot = ChessQuizBot(bot_cfg, Database(":memory:"))
        assert bot.quiz.cooldown_ms == 30 * MINUTE_MS
        assert bot.ledger.daily_reward == 40
        assert len(bot.shop.catalog) == 5

    @pytest.mark.asyncio
    async def test_shop_items_from_config(self, bot_cfg):
        bot_cfg["shop"] = {"items": [{"name": "Patzer", "price": 1, "role_id": "9"}]}
        bot = ChessQuizBot(bot_cfg, Database(":memory:"))
        assert [i.name for i in bot.shop.catalog] == ["Patzer"]

    @pytest.mark.asyncio
    async def test_oversized_shop_config_fails_at_startup(self, bot_cfg):
        bot_cfg["shop"] = {"items": [{"name": f"R{i}", "price": 1, "role_id": str(100 + i)} for i in range(21)]}
        with pytest.raises(ConfigError):
            ChessQuizBot(bot_cfg, Database(":memory:"))


class TestErrorBoundary:
    @pytest.mark.asyncio
    async def test_cooldown_gets_embed(self, bot_cfg):
        bot = ChessQuizBot(bot_cfg, Database(":memory:"))
        interaction = make_interaction()
        await bot.on_app_command_error(interaction, wrapped(CooldownActive(90 * MINUTE_MS)))
        embed = interaction.followup.send.await_args.kwargs["embed"]
        assert embed.title == "⏳ Cooldown Active"

    @pytest.mark.asyncio
    async def test_domain_error_gets_its_message(self, bot_cfg):
        bot = ChessQuizBot(bot_cfg, Database(":memory:"))
        interaction = make_interaction()
        await bot.on_app_command_error(interaction, wrapped(QuestionPending()))
        assert interaction.followup.send.await_args.kwargs["content"] == QuestionPending.user_message

    @pytest.mark.asyncio
    async def test_internal_errors_get_generic_message(self, bot_cfg):
        bot = ChessQuizBot(bot_cfg, Database(":memory:"))
        for error in (RuntimeError("kaput"), StorageUnavailable()):
            interaction = make_interaction()
            await bot.on_app_command_error(interaction, wrapped(error))
            assert interaction.followup.send.await_args.kwargs["content"] == GENERIC_ERROR_MESSAGE


class TestMain:
    @pytest.mark.asyncio
    async def test_missing_token_exits(self, tmp_path, monkeypatch):
        monkeypatch.delenv(TOKEN_ENV, raising=False)
        config = tmp_path / "config.yml"
        config.write_text(f"token_file: {tmp_path / 'missing.txt'}\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            await bot_module.main(str(config))
        assert exc.value.code == 1
