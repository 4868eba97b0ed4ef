from __future__ import annotations

import discord
from discord.ext import commands
from discord import app_commands

from chessquizbot.utils.embed_utils import balance_embed, daily_embed, leaderboard_embed
from chessquizbot.utils.interactions import ensure_admin, guild_key, observe


class Economy(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        await observe(self.bot, interaction)
        return True

    # ---------- /daily ----------
    @app_commands.command(name="daily", description="Claim your daily 25 coins")
    async def daily(self, interaction: discord.Interaction):
        await interaction.response.defer()
        if not await self.bot.ledger.claim_daily(str(interaction.user.id)):
            return await interaction.followup.send("⏳ Already claimed today!")
        await interaction.followup.send(embed=daily_embed(self.bot.ledger.daily_reward))

    # ---------- /balance ----------
    @app_commands.command(name="balance", description="Check coins")
    @app_commands.describe(user="User to check")
    async def balance(self, interaction: discord.Interaction, user: discord.User | None = None):
        await interaction.response.defer()
        target = user or interaction.user
        account = await self.bot.ledger.get_account(str(target.id))
        await interaction.followup.send(embed=balance_embed(target.name, account.coins))

    # ---------- /leaderboard ----------
    @app_commands.command(name="leaderboard", description="Top 10 players")
    @app_commands.describe(scope="Leaderboard scope")
    @app_commands.choices(scope=[
        app_commands.Choice(name="Global", value="global"),
        app_commands.Choice(name="Server", value="server"),
    ])
    async def leaderboard(self, interaction: discord.Interaction, scope: app_commands.Choice[str] | None = None):
        await interaction.response.defer()
        requested = scope.value if scope else "server"
        gid = guild_key(interaction)
        effective = "server" if requested == "server" and gid else "global"
        size = self.bot.cfg.get_int("leaderboard", "size", default=10)

        rows = await self.bot.ledger.top_balances(size, guild_id=gid if effective == "server" else None)
        await interaction.followup.send(embed=leaderboard_embed(rows, effective))

    # ---------- admin ----------
    @app_commands.command(name="addmoney", description="Admin: Add coins")
    @app_commands.describe(user="User to give coins", amount="Amount of coins to add")
    @app_commands.default_permissions(administrator=True)
    async def addmoney(self, interaction: discord.Interaction, user: discord.User, amount: int):
        await interaction.response.defer()
        ensure_admin(interaction)
        await self.bot.ledger.credit(str(user.id), amount)
        await interaction.followup.send(f"✅ Added **{amount}** coins to <@{user.id}>.")

    @app_commands.command(name="removemoney", description="Admin: Remove coins")
    @app_commands.describe(user="User to remove coins", amount="Amount of coins to remove")
    @app_commands.default_permissions(administrator=True)
    async def removemoney(self, interaction: discord.Interaction, user: discord.User, amount: int):
        await interaction.response.defer()
        ensure_admin(interaction)
        allow_negative = self.bot.cfg.get_bool("economy", "allow_negative_balance", default=True)
        await self.bot.ledger.debit(str(user.id), amount, allow_negative=allow_negative)
        await interaction.followup.send(f"✅ Removed **{amount}** coins from <@{user.id}>.")


async def setup(bot: commands.Bot):
    await bot.add_cog(Economy(bot))
