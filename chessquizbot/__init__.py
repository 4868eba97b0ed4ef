"""Discord chess quiz bot: trivia questions, coins and a role shop."""

__version__ = "1.0.0"
