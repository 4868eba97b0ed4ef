"""
Error taxonomy for quiz, ledger and shop operations.

Every error carries a ``user_message`` that is safe to show in a reply.
Anything that is not a ``QuizBotError`` is treated as internal by the
dispatch boundary and answered with a generic apology.
"""
from __future__ import annotations

from .utility import format_remaining

GENERIC_ERROR_MESSAGE = "⚠️ Error occurred while processing that command."


class QuizBotError(Exception):
    user_message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)
        if message:
            self.user_message = message


class CooldownActive(QuizBotError):
    def __init__(self, remaining_ms: int):
        self.remaining_ms = int(remaining_ms)
        super().__init__(f"⏳ Cooldown active. Try again in **{format_remaining(self.remaining_ms)}**.")


class QuestionPending(QuizBotError):
    user_message = "❗ Answer your current question first!"


class NoActiveQuestion(QuizBotError):
    user_message = "❌ No active quiz. Use `/chessquiz`."


class UnknownEntitlement(QuizBotError):
    user_message = "Item not found."


class AlreadyOwned(QuizBotError):
    user_message = "You already own this role."


class InsufficientFunds(QuizBotError):
    user_message = "Insufficient funds to buy this item."


class RoleUnavailable(QuizBotError):
    user_message = "Role not found in this server."


class PermissionDenied(QuizBotError):
    user_message = "❌ Admins only."


class StorageUnavailable(QuizBotError):
    """Persistence call failed after bounded retries. Safe to retry later."""
    user_message = GENERIC_ERROR_MESSAGE
