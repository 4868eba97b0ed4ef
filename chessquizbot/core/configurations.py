"""
Configuration loading.
Consolidates: config.yml settings, defaults, bot credential lookup
"""

from __future__ import annotations
import copy
import os
import yaml
from typing import Any

CONFIG_ENV = "CHESSQUIZ_CONFIG"
TOKEN_ENV = "DISCORD_BOT_TOKEN"
DEFAULT_CONFIG_PATH = "config.yml"

DEFAULTS: dict[str, Any] = {
    "token_file": "token.txt",
    "guilds": [],
    "database": {
        "path": "data.sqlite",
        "busy_timeout_ms": 5000,
        "max_retries": 3,
    },
    "quiz": {
        "cooldown_minutes": 90,
        "page_size": 20,
    },
    "economy": {
        "daily_reward": 25,
        "daily_interval_hours": 24,
        "allow_negative_balance": True,
    },
    "leaderboard": {
        "size": 10,
    },
    "logging": {
        "level": "INFO",
    },
}


class ConfigError(Exception):
    pass


def _merge(base: dict, override: dict) -> dict:
    out = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


# ============================================================================
# CONFIG
# ============================================================================

class Config(dict):
    @staticmethod
    def load(path: str | None = None) -> "Config":
        """Load config.yml over the defaults. A missing file means all defaults."""
        path = path or os.getenv(CONFIG_ENV) or DEFAULT_CONFIG_PATH
        data: dict = {}
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ConfigError(f"{path} must contain a mapping at the top level")
        return Config(_merge(DEFAULTS, data))

    @staticmethod
    def defaults() -> "Config":
        return Config(copy.deepcopy(DEFAULTS))

    def get(self, *keys, default=None):
        cur: Any = self
        for k in keys:
            if isinstance(cur, dict) and k in cur:
                cur = cur[k]
            else:
                return default
        return cur

    def get_int(self, *keys, default: int = 0) -> int:
        try:
            return int(self.get(*keys, default=default))
        except (TypeError, ValueError):
            return default

    def get_bool(self, *keys, default: bool = False) -> bool:
        v = self.get(*keys, default=default)
        if isinstance(v, str):
            return v.strip().lower() in ("1", "true", "yes", "on")
        return bool(v)

    def guild_ids(self) -> list[int]:
        """Guild IDs for command sync. Accepts a list or a comma-separated string."""
        raw = self.get("guilds", default=[]) or []
        if isinstance(raw, (str, int)):
            raw = str(raw).split(",")
        out = []
        for item in raw:
            item = str(item).strip()
            if item.isdigit():
                out.append(int(item))
        return out


def load_token(cfg: Config) -> str | None:
    """Bot credential: DISCORD_BOT_TOKEN wins, otherwise the first line of ``token_file``."""
    env_token = os.getenv(TOKEN_ENV, "").strip()
    if env_token:
        return env_token
    path = cfg.get("token_file", default="token.txt")
    try:
        with open(path, "r", encoding="utf-8") as f:
            token = f.read().strip()
    except OSError:
        return None
    return token or None
