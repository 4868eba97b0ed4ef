"""
Helpers shared by the cogs: admin guard, guild observation, safe replies.
"""
from __future__ import annotations
import logging
import discord

from chessquizbot.core.errors import PermissionDenied

log = logging.getLogger(__name__)


def is_admin(interaction: discord.Interaction) -> bool:
    """Administrator permission in the invoking guild channel. DMs never qualify."""
    if not interaction.guild_id:
        return False
    perms = getattr(interaction, "permissions", None)
    return bool(perms and perms.administrator)


def ensure_admin(interaction: discord.Interaction):
    """Guard: raise PermissionDenied unless the caller is an administrator."""
    if not is_admin(interaction):
        raise PermissionDenied()


def guild_key(interaction: discord.Interaction) -> str | None:
    return str(interaction.guild_id) if interaction.guild_id else None


async def observe(bot, interaction: discord.Interaction):
    """Record that the user was seen in this guild (for the server leaderboard)."""
    await bot.ledger.observe_member(guild_key(interaction), str(interaction.user.id))


async def reply(
    interaction: discord.Interaction,
    content: str | None = None,
    *,
    embed: discord.Embed | None = None,
    ephemeral: bool = False,
):
    """Send through the response if still open, otherwise as a followup."""
    kwargs = {"content": content, "ephemeral": ephemeral}
    if embed is not None:
        kwargs["embed"] = embed
    try:
        if interaction.response.is_done():
            await interaction.followup.send(**kwargs)
        else:
            await interaction.response.send_message(**kwargs)
    except discord.HTTPException as e:
        log.warning("Could not deliver reply: %s", e)
