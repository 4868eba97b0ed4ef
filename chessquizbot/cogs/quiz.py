from __future__ import annotations

import discord
from discord.ext import commands
from discord import app_commands

from chessquizbot.utils.embed_utils import answer_embed, question_embed, questions_embed
from chessquizbot.utils.interactions import ensure_admin, observe


class Quiz(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        await observe(self.bot, interaction)
        return True

    @app_commands.command(name="chessquiz", description="Get a question (1h 30m cooldown)")
    async def chessquiz(self, interaction: discord.Interaction):
        await interaction.response.defer()
        # CooldownActive / QuestionPending propagate to the tree error handler
        issued = await self.bot.quiz.issue_question(str(interaction.user.id))
        await interaction.followup.send(embed=question_embed(issued))

    @app_commands.command(name="answer", description="Answer the quiz")
    @app_commands.describe(text="Your chess answer")
    async def answer(self, interaction: discord.Interaction, text: str):
        await interaction.response.defer()
        outcome = await self.bot.quiz.submit_answer(str(interaction.user.id), text)
        await interaction.followup.send(embed=answer_embed(outcome))

    @app_commands.command(name="questions", description="Admin: View quiz questions")
    @app_commands.describe(page="Page number")
    @app_commands.default_permissions(administrator=True)
    async def questions(self, interaction: discord.Interaction, page: int | None = None):
        await interaction.response.defer()
        ensure_admin(interaction)
        page_size = self.bot.cfg.get_int("quiz", "page_size", default=20)
        await interaction.followup.send(embed=questions_embed(self.bot.quiz.page_questions(page, page_size)))


async def setup(bot: commands.Bot):
    await bot.add_cog(Quiz(bot))
