"""
Role shop.

Ownership is never stored locally: a role is "owned" when the member
currently holds it in the guild, as reported by a ``RoleGateway``.
Purchases debit first (conditionally, so racing purchases cannot
overspend) and refund if the role grant then fails.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

from .configurations import ConfigError
from .errors import AlreadyOwned, InsufficientFunds, RoleUnavailable, UnknownEntitlement
from .ledger import LedgerStore

log = logging.getLogger(__name__)

BUY_PREFIX = "shop_buy:"
CLOSE_ACTION = "shop_close"

# Four rows of five buy buttons; the close button takes the fifth row.
MAX_SHOP_ITEMS = 20


@dataclass(frozen=True)
class ShopEntitlement:
    name: str
    description: str
    price: int
    role_id: str


SHOP_ITEMS: tuple[ShopEntitlement, ...] = (
    ShopEntitlement("Chess Beginner", "Starter role for new players.", 25, "1455250623510614157"),
    ShopEntitlement("Chess Improver", "Shows dedication to improving.", 75, "1455250690892107961"),
    ShopEntitlement("Chess Pro", "Recognizes strong consistent play.", 200, "1455250740653330453"),
    ShopEntitlement("Chess Master", "Highlights elite skill and strategy.", 500, "1455250877999747214"),
    ShopEntitlement("Chess GOAT", "Top-tier recognition across the server.", 1000, "1455250931473191148"),
)


def catalog_from_config(entries: Iterable[dict] | None) -> tuple[ShopEntitlement, ...]:
    """Build the shop from ``shop.items`` in config.yml, or the built-in catalog.

    Raises ConfigError for malformed entries, duplicate role ids, or more
    items than the shop message can hold.
    """
    if not entries:
        return SHOP_ITEMS
    items = []
    seen = set()
    for i, e in enumerate(entries):
        try:
            item = ShopEntitlement(
                name=str(e["name"]),
                description=str(e.get("description", "")),
                price=max(0, int(e["price"])),
                role_id=str(e["role_id"]).strip(),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as err:
            raise ConfigError(f"shop.items[{i}] is invalid: {err!r}") from err
        if not item.role_id.isdigit():
            raise ConfigError(f"shop.items[{i}].role_id must be a numeric role id")
        if item.role_id in seen:
            raise ConfigError(f"shop.items[{i}] repeats role_id {item.role_id}")
        seen.add(item.role_id)
        items.append(item)
    if len(items) > MAX_SHOP_ITEMS:
        raise ConfigError(f"shop.items holds {len(items)} items, at most {MAX_SHOP_ITEMS} fit")
    return tuple(items)


@dataclass(frozen=True)
class ShopAction:
    kind: str  # "buy" | "close" | "unknown"
    role_id: str | None = None


def buy_action_id(role_id: str) -> str:
    return f"{BUY_PREFIX}{role_id}"


def parse_shop_action(action_id: str | None) -> ShopAction:
    action_id = action_id or ""
    if action_id == CLOSE_ACTION:
        return ShopAction("close")
    if action_id.startswith(BUY_PREFIX):
        role_id = action_id[len(BUY_PREFIX):]
        if role_id:
            return ShopAction("buy", role_id)
    return ShopAction("unknown")


class RoleGateway(Protocol):
    """Guild role state for one guild, as seen by the platform."""

    async def member_role_ids(self, user_id: str) -> set[str]: ...

    async def role_exists(self, role_id: str) -> bool: ...

    async def grant_role(self, user_id: str, role_id: str) -> None: ...


@dataclass(frozen=True)
class ShopEntryStatus:
    item: ShopEntitlement
    owned: bool
    affordable: bool


@dataclass(frozen=True)
class ShopSnapshot:
    balance: int
    entries: tuple[ShopEntryStatus, ...]


@dataclass(frozen=True)
class PurchaseResult:
    item: ShopEntitlement
    snapshot: ShopSnapshot


class EntitlementShop:
    def __init__(self, ledger: LedgerStore, catalog: Iterable[ShopEntitlement] = SHOP_ITEMS):
        self.ledger = ledger
        self.catalog = tuple(catalog)
        self._by_role = {item.role_id: item for item in self.catalog}

    def find(self, role_id: str) -> ShopEntitlement | None:
        return self._by_role.get(str(role_id))

    async def snapshot(self, user_id: str, gateway: RoleGateway) -> ShopSnapshot:
        balance = await self.ledger.get_balance(user_id)
        held = await gateway.member_role_ids(user_id)
        entries = tuple(
            ShopEntryStatus(item, owned=item.role_id in held, affordable=balance >= item.price)
            for item in self.catalog
        )
        return ShopSnapshot(balance, entries)

    async def purchase(self, user_id: str, role_id: str, gateway: RoleGateway) -> PurchaseResult:
        user_id = str(user_id)
        item = self.find(role_id)
        if item is None:
            raise UnknownEntitlement()

        if item.role_id in await gateway.member_role_ids(user_id):
            raise AlreadyOwned()

        if await self.ledger.get_balance(user_id) < item.price:
            raise InsufficientFunds()

        if not await gateway.role_exists(item.role_id):
            raise RoleUnavailable()

        # Balance may have moved since the check above.
        if not await self.ledger.try_spend(user_id, item.price):
            raise InsufficientFunds()

        try:
            await gateway.grant_role(user_id, item.role_id)
        except Exception:
            log.exception("Role grant failed for %s (%s), refunding %d", user_id, item.role_id, item.price)
            await self.ledger.credit(user_id, item.price)
            raise

        log.info("User %s bought %s for %d", user_id, item.name, item.price)
        return PurchaseResult(item, await self.snapshot(user_id, gateway))
