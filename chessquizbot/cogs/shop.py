from __future__ import annotations

import logging
import discord
from discord.ext import commands
from discord import app_commands

from chessquizbot.core.errors import GENERIC_ERROR_MESSAGE, QuizBotError, RoleUnavailable, StorageUnavailable
from chessquizbot.core.shop import CLOSE_ACTION, ShopEntryStatus, ShopSnapshot, buy_action_id, parse_shop_action
from chessquizbot.utils.embed_utils import shop_embed
from chessquizbot.utils.interactions import observe

log = logging.getLogger(__name__)

BUTTONS_PER_ROW = 5
STALE_ACTION_MESSAGE = "This button action is no longer valid."
BUTTON_ERROR_MESSAGE = "An error occurred while processing your action."


class DiscordRoleGateway:
    """RoleGateway backed by a live guild. Member state is fetched fresh on every call."""

    def __init__(self, guild: discord.Guild):
        self.guild = guild

    async def _member(self, user_id: str) -> discord.Member:
        return await self.guild.fetch_member(int(user_id))

    async def member_role_ids(self, user_id: str) -> set[str]:
        member = await self._member(user_id)
        return {str(r.id) for r in member.roles}

    async def role_exists(self, role_id: str) -> bool:
        if not str(role_id).isdigit():
            return False
        return self.guild.get_role(int(role_id)) is not None

    async def grant_role(self, user_id: str, role_id: str) -> None:
        role = self.guild.get_role(int(role_id))
        if role is None:
            raise RoleUnavailable()
        member = await self._member(user_id)
        await member.add_roles(role, reason="Shop purchase")


# Matches every shop action id, including malformed buy ids, so stale
# buttons still get an answer from handle_action.
SHOP_ACTION_TEMPLATE = r"shop_(?:buy:.*|close)"


class ShopActionButton(discord.ui.DynamicItem[discord.ui.Button], template=SHOP_ACTION_TEMPLATE):
    """Shop button routed by custom_id, so it keeps working after restarts."""

    def __init__(
        self,
        action_id: str,
        *,
        label: str | None = None,
        emoji: str | None = None,
        style: discord.ButtonStyle = discord.ButtonStyle.primary,
        disabled: bool = False,
        row: int | None = None,
    ):
        super().__init__(
            discord.ui.Button(label=label, emoji=emoji, style=style, disabled=disabled, custom_id=action_id),
            row=row,
        )
        self.action_id = action_id

    @classmethod
    def buy(cls, entry: ShopEntryStatus, row: int) -> "ShopActionButton":
        item = entry.item
        return cls(
            buy_action_id(item.role_id),
            label=f"Owned: {item.name}" if entry.owned else f"Buy {item.name} • {item.price} Coins",
            emoji="🛒",
            style=discord.ButtonStyle.secondary if entry.owned else discord.ButtonStyle.primary,
            disabled=entry.owned,
            row=row,
        )

    @classmethod
    def close(cls, row: int) -> "ShopActionButton":
        return cls(CLOSE_ACTION, label="Close Shop", emoji="🧹", style=discord.ButtonStyle.danger, row=row)

    @classmethod
    async def from_custom_id(cls, interaction: discord.Interaction, item: discord.ui.Button, match, /):
        return cls(item.custom_id)

    async def callback(self, interaction: discord.Interaction):
        cog = interaction.client.get_cog("Shop")
        if cog is None:
            log.warning("Shop action %s arrived with the shop cog unloaded", self.action_id)
            return
        await cog.handle_action(interaction, self.action_id)


class ShopView(discord.ui.View):
    # No timeout: the buttons are dynamic items, the view only lays them out.
    def __init__(self, snapshot: ShopSnapshot):
        super().__init__(timeout=None)
        for i, entry in enumerate(snapshot.entries):
            self.add_item(ShopActionButton.buy(entry, row=i // BUTTONS_PER_ROW))
        close_row = (len(snapshot.entries) + BUTTONS_PER_ROW - 1) // BUTTONS_PER_ROW
        self.add_item(ShopActionButton.close(row=close_row))


class Shop(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        await observe(self.bot, interaction)
        return True

    @app_commands.command(name="shop", description="View shop")
    async def shop(self, interaction: discord.Interaction):
        await interaction.response.defer()
        if not interaction.guild:
            return await interaction.followup.send("Use this in a server.")
        snapshot = await self.bot.shop.snapshot(str(interaction.user.id), DiscordRoleGateway(interaction.guild))
        await interaction.followup.send(embed=shop_embed(snapshot), view=ShopView(snapshot))

    async def _notify(self, interaction: discord.Interaction, message: str):
        try:
            await interaction.followup.send(message, ephemeral=True)
        except discord.HTTPException as e:
            log.warning("Could not send shop notice: %s", e)

    async def handle_action(self, interaction: discord.Interaction, action_id: str):
        """Button entry point: ``shop_buy:<roleId>`` or ``shop_close``."""
        await interaction.response.defer()
        action = parse_shop_action(action_id)
        try:
            if action.kind == "close":
                await interaction.edit_original_response(view=None)
                return
            if action.kind != "buy":
                await self._notify(interaction, STALE_ACTION_MESSAGE)
                return
            if not interaction.guild:
                raise RoleUnavailable()

            await observe(self.bot, interaction)
            gateway = DiscordRoleGateway(interaction.guild)
            result = await self.bot.shop.purchase(str(interaction.user.id), action.role_id, gateway)
            await interaction.edit_original_response(
                embed=shop_embed(result.snapshot),
                view=ShopView(result.snapshot),
            )
            await self._notify(interaction, f"You successfully bought the {result.item.name} role!")
        except StorageUnavailable:
            log.exception("Storage unavailable during shop action %s", action_id)
            await self._notify(interaction, GENERIC_ERROR_MESSAGE)
        except QuizBotError as e:
            await self._notify(interaction, e.user_message)
        except Exception:
            log.exception("Button interaction error (%s)", action_id)
            await self._notify(interaction, BUTTON_ERROR_MESSAGE)


async def setup(bot: commands.Bot):
    bot.add_dynamic_items(ShopActionButton)
    await bot.add_cog(Shop(bot))


async def teardown(bot: commands.Bot):
    bot.remove_dynamic_items(ShopActionButton)
