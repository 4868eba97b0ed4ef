import re
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from chessquizbot.cogs import shop as shop_cog
from chessquizbot.core.shop import SHOP_ITEMS, ShopEntryStatus, ShopSnapshot, buy_action_id

from conftest import FakeRoleGateway

BEGINNER = SHOP_ITEMS[0]


def make_interaction(user_id=42):
    interaction = MagicMock()
    interaction.guild_id = 555
    interaction.user.id = user_id
    interaction.response.defer = AsyncMock()
    interaction.edit_original_response = AsyncMock()
    interaction.followup.send = AsyncMock()
    return interaction


@pytest.fixture
def cog(shop, ledger, gateway, monkeypatch):
    monkeypatch.setattr(shop_cog, "DiscordRoleGateway", lambda guild: gateway)
    return shop_cog.Shop(SimpleNamespace(shop=shop, ledger=ledger))


class TestShopView:
    @pytest.mark.asyncio
    async def test_buttons_and_rows(self):
        entries = tuple(
            ShopEntryStatus(item, owned=(i == 0), affordable=True)
            for i, item in enumerate(SHOP_ITEMS)
        )
        view = shop_cog.ShopView(ShopSnapshot(0, entries))
        buttons = view.children
        assert view.timeout is None
        assert all(isinstance(b, shop_cog.ShopActionButton) for b in buttons)
        assert [b.custom_id for b in buttons[:5]] == [buy_action_id(i.role_id) for i in SHOP_ITEMS]
        assert buttons[0].item.disabled
        assert not buttons[1].item.disabled
        assert buttons[-1].custom_id == "shop_close"
        assert buttons[-1].item.row == 1


class TestActionRouting:
    def test_template_covers_every_action_id(self):
        for action_id in (buy_action_id(BEGINNER.role_id), "shop_close", "shop_buy:", "shop_buy:gone"):
            assert re.fullmatch(shop_cog.SHOP_ACTION_TEMPLATE, action_id)
        assert not re.fullmatch(shop_cog.SHOP_ACTION_TEMPLATE, "duel_accept")

    @pytest.mark.asyncio
    async def test_click_on_old_message_reaches_cog(self, cog, ledger, gateway):
        await ledger.credit("42", 30)
        interaction = make_interaction()
        interaction.client.get_cog = MagicMock(return_value=cog)
        action_id = buy_action_id(BEGINNER.role_id)

        button = await shop_cog.ShopActionButton.from_custom_id(
            interaction,
            discord.ui.Button(custom_id=action_id),
            re.fullmatch(shop_cog.SHOP_ACTION_TEMPLATE, action_id),
        )
        await button.callback(interaction)

        interaction.client.get_cog.assert_called_once_with("Shop")
        assert gateway.grants == [("42", BEGINNER.role_id)]
        assert await ledger.get_balance("42") == 5

    @pytest.mark.asyncio
    async def test_stale_buy_id_is_answered(self, cog):
        interaction = make_interaction()
        interaction.client.get_cog = MagicMock(return_value=cog)
        button = await shop_cog.ShopActionButton.from_custom_id(
            interaction,
            discord.ui.Button(custom_id="shop_buy:"),
            re.fullmatch(shop_cog.SHOP_ACTION_TEMPLATE, "shop_buy:"),
        )
        await button.callback(interaction)
        interaction.followup.send.assert_awaited_once_with(shop_cog.STALE_ACTION_MESSAGE, ephemeral=True)

    @pytest.mark.asyncio
    async def test_extension_registers_dynamic_buttons(self):
        bot = MagicMock()
        bot.add_cog = AsyncMock()
        await shop_cog.setup(bot)
        bot.add_dynamic_items.assert_called_once_with(shop_cog.ShopActionButton)
        bot.add_cog.assert_awaited_once()

        await shop_cog.teardown(bot)
        bot.remove_dynamic_items.assert_called_once_with(shop_cog.ShopActionButton)


class TestHandleAction:
    @pytest.mark.asyncio
    async def test_close_removes_buttons(self, cog):
        interaction = make_interaction()
        await cog.handle_action(interaction, "shop_close")
        interaction.edit_original_response.assert_awaited_once_with(view=None)

    @pytest.mark.asyncio
    async def test_unknown_action(self, cog):
        interaction = make_interaction()
        await cog.handle_action(interaction, "shop_refund:1")
        interaction.followup.send.assert_awaited_once_with(shop_cog.STALE_ACTION_MESSAGE, ephemeral=True)

    @pytest.mark.asyncio
    async def test_successful_purchase(self, cog, ledger, gateway):
        await ledger.credit("42", 30)
        interaction = make_interaction()

        await cog.handle_action(interaction, buy_action_id(BEGINNER.role_id))

        assert await ledger.get_balance("42") == 5
        assert gateway.grants == [("42", BEGINNER.role_id)]
        interaction.edit_original_response.assert_awaited_once()
        message = interaction.followup.send.await_args.args[0]
        assert "Chess Beginner" in message

    @pytest.mark.asyncio
    async def test_domain_failure_is_reported(self, cog, ledger):
        interaction = make_interaction()
        await cog.handle_action(interaction, buy_action_id(BEGINNER.role_id))
        interaction.followup.send.assert_awaited_once_with(
            "Insufficient funds to buy this item.", ephemeral=True
        )
        interaction.edit_original_response.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_failure_is_generic(self, cog, ledger, gateway):
        await ledger.credit("42", 30)
        gateway.fail_grant = True
        interaction = make_interaction()

        await cog.handle_action(interaction, buy_action_id(BEGINNER.role_id))

        interaction.followup.send.assert_awaited_once_with(shop_cog.BUTTON_ERROR_MESSAGE, ephemeral=True)
        assert await ledger.get_balance("42") == 30
