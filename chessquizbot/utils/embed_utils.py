"""
Centralized embed builders for the chess quiz bot.
Every reply the cogs send is built here so the cogs stay thin.
"""
from __future__ import annotations
import discord

from chessquizbot.core.ledger import LeaderboardRow
from chessquizbot.core.quiz import AnswerOutcome, IssuedQuestion, QuestionPage
from chessquizbot.core.shop import ShopSnapshot
from chessquizbot.core.utility import fmt, format_remaining

# Embed colors for different message types
COLORS = {
    "info": 0x3498DB,        # Blue - balance, shop, admin views
    "success": 0x2ECC71,     # Green - correct answer
    "error": 0xE74C3C,       # Red - wrong answer
    "quiz": 0x00FF00,        # Bright green - new question, daily reward
    "cooldown": 0x95A5A6,    # Grey - cooldown notice
    "economy": 0xFFD700,     # Gold - leaderboard
}

MEDALS = ("🥇", "🥈", "🥉")


def create_embed(
    description: str,
    title: str | None = None,
    color: str | int = "info",
    fields: list[dict] | None = None,
    footer: str | None = None,
) -> discord.Embed:
    """
    Create a standardized embed.

    Args:
        description: The embed description
        title: Optional embed title
        color: Color name (from COLORS) or hex int
        fields: List of field dicts with 'name', 'value', and optional 'inline'
        footer: Optional footer text
    """
    embed_color = COLORS.get(color, COLORS["info"]) if isinstance(color, str) else color
    embed = discord.Embed(title=title, description=description, color=embed_color)
    for field in fields or []:
        embed.add_field(name=field["name"], value=field["value"], inline=field.get("inline", False))
    if footer:
        embed.set_footer(text=footer)
    return embed


def question_embed(q: IssuedQuestion) -> discord.Embed:
    return create_embed(f"❓ {q.question}", title="🧠 Chess Quiz", color="quiz", footer=f"Reward: {q.reward} coins")


def cooldown_embed(remaining_ms: int) -> discord.Embed:
    return create_embed(
        f"Try again in **{format_remaining(remaining_ms)}**.",
        title="⏳ Cooldown Active",
        color="cooldown",
    )


def answer_embed(outcome: AnswerOutcome) -> discord.Embed:
    if outcome.correct:
        return create_embed(
            f"You earned **{outcome.reward}** coins.\nAnswer: {outcome.answer}",
            title="✅ Correct Answer",
            color="success",
        )
    return create_embed(f"Correct answer: **{outcome.answer}**", title="❌ Wrong Answer", color="error")


def daily_embed(amount: int) -> discord.Embed:
    return create_embed(f"You received {fmt(amount)} coins.", title="🎁 Daily Reward", color="quiz")


def balance_embed(username: str, coins: int) -> discord.Embed:
    return create_embed(f"User: {username}\nCoins: {fmt(coins)}", title="💰 Balance", color="info")


def leaderboard_embed(rows: list[LeaderboardRow], scope: str) -> discord.Embed:
    lines = []
    for i, r in enumerate(rows):
        rank = MEDALS[i] if i < len(MEDALS) else f"**{i + 1}.**"
        lines.append(f"{rank} <@{r.user_id}> • {fmt(r.coins)} coins")
    title = "🏆 Server Leaderboard" if scope == "server" else "🌍 Global Leaderboard"
    return create_embed(
        "\n".join(lines) or "Empty.",
        title=title,
        color="economy",
        footer=f"Top {len(rows)} players" if rows else "Top players",
    )


def questions_embed(page: QuestionPage) -> discord.Embed:
    lines = [f"#{q.id}: ❓ {q.question}" for q in page.questions]
    return create_embed(
        "\n".join(lines) or "Empty.",
        title=f"📚 Questions ({page.page}/{page.total_pages})",
        color="info",
        footer="Admin view",
    )


def shop_embed(snapshot: ShopSnapshot) -> discord.Embed:
    fields = []
    for entry in snapshot.entries:
        item = entry.item
        status = "Already Owned" if entry.owned else ("Affordable" if entry.affordable else "Not Owned")
        fields.append({
            "name": f"♟️ {item.name}",
            "value": (
                f"📝 Description: {item.description}\n"
                f"💰 Price: {fmt(item.price)} coins\n"
                f"🎭 Role: <@&{item.role_id}>\n"
                f"✅ Status: {status}"
            ),
            "inline": False,
        })
    return create_embed(
        f"💰 Balance: {fmt(snapshot.balance)} coins",
        title="🛒 Server Shop",
        color="info",
        fields=fields,
    )
