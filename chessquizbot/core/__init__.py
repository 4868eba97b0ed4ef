# Core package - centralized exports
# - configurations.py: Config, load_token
# - db.py: Database class and schema
# - ledger.py: LedgerStore (coins, daily claims, leaderboard, guild observations)
# - quiz.py: QuizSessionTracker and its slot/cooldown/history repositories
# - matcher.py: answer normalization and tolerant matching
# - shop.py: EntitlementShop, RoleGateway, shop action ids
# - errors.py: error taxonomy shown to users

# Configurations
from .configurations import Config, ConfigError, load_token

# Database
from .db import Database

# Errors
from .errors import (
    QuizBotError, CooldownActive, QuestionPending, NoActiveQuestion, UnknownEntitlement,
    AlreadyOwned, InsufficientFunds, RoleUnavailable, PermissionDenied, StorageUnavailable,
    GENERIC_ERROR_MESSAGE,
)

# Ledger
from .ledger import LedgerStore, UserAccount, LeaderboardRow

# Quiz
from .matcher import normalize, is_match, matches_any
from .quiz_data import QuizQuestion, QUIZ_POOL, QUIZ_BY_ID
from .quiz import QuizSessionTracker, IssuedQuestion, AnswerOutcome, QuestionPage, select_question

# Shop
from .shop import (
    EntitlementShop, ShopEntitlement, SHOP_ITEMS, RoleGateway, ShopSnapshot, ShopEntryStatus,
    PurchaseResult, ShopAction, parse_shop_action, buy_action_id, catalog_from_config,
    CLOSE_ACTION,
)

# Utility
from .utility import now_ms, fmt, clamp, format_remaining, MINUTE_MS, HOUR_MS, DAY_MS

__all__ = [
    # Configurations
    'Config', 'ConfigError', 'load_token',
    # Database
    'Database',
    # Errors
    'QuizBotError', 'CooldownActive', 'QuestionPending', 'NoActiveQuestion', 'UnknownEntitlement',
    'AlreadyOwned', 'InsufficientFunds', 'RoleUnavailable', 'PermissionDenied', 'StorageUnavailable',
    'GENERIC_ERROR_MESSAGE',
    # Ledger
    'LedgerStore', 'UserAccount', 'LeaderboardRow',
    # Quiz
    'normalize', 'is_match', 'matches_any', 'QuizQuestion', 'QUIZ_POOL', 'QUIZ_BY_ID',
    'QuizSessionTracker', 'IssuedQuestion', 'AnswerOutcome', 'QuestionPage', 'select_question',
    # Shop
    'EntitlementShop', 'ShopEntitlement', 'SHOP_ITEMS', 'RoleGateway', 'ShopSnapshot', 'ShopEntryStatus',
    'PurchaseResult', 'ShopAction', 'parse_shop_action', 'buy_action_id', 'catalog_from_config',
    'CLOSE_ACTION',
    # Utility
    'now_ms', 'fmt', 'clamp', 'format_remaining', 'MINUTE_MS', 'HOUR_MS', 'DAY_MS',
]
