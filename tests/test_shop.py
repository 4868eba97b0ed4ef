import asyncio

import pytest

from chessquizbot.core.configurations import ConfigError
from chessquizbot.core.errors import AlreadyOwned, InsufficientFunds, RoleUnavailable, UnknownEntitlement
from chessquizbot.core.shop import (
    MAX_SHOP_ITEMS,
    SHOP_ITEMS,
    ShopAction,
    buy_action_id,
    catalog_from_config,
    parse_shop_action,
)

from conftest import FakeRoleGateway

BEGINNER = SHOP_ITEMS[0]
IMPROVER = SHOP_ITEMS[1]


class TestCatalog:
    def test_builtin_prices(self):
        assert [i.price for i in SHOP_ITEMS] == [25, 75, 200, 500, 1000]
        assert len({i.role_id for i in SHOP_ITEMS}) == len(SHOP_ITEMS)

    def test_config_override(self):
        items = catalog_from_config([
            {"name": "Patzer", "price": 3, "role_id": 42},
            {"name": "Club Player", "description": "Regular", "price": "40", "role_id": "43"},
        ])
        assert [(i.name, i.price, i.role_id) for i in items] == [("Patzer", 3, "42"), ("Club Player", 40, "43")]
        assert items[0].description == ""

    def test_empty_config_keeps_builtin(self):
        assert catalog_from_config(None) == SHOP_ITEMS
        assert catalog_from_config([]) == SHOP_ITEMS

    def test_full_catalog_fits(self):
        entries = [{"name": f"R{i}", "price": i, "role_id": str(1000 + i)} for i in range(MAX_SHOP_ITEMS)]
        assert len(catalog_from_config(entries)) == MAX_SHOP_ITEMS

    def test_too_many_items_rejected(self):
        entries = [{"name": f"R{i}", "price": i, "role_id": str(1000 + i)} for i in range(MAX_SHOP_ITEMS + 1)]
        with pytest.raises(ConfigError):
            catalog_from_config(entries)

    def test_duplicate_role_ids_rejected(self):
        with pytest.raises(ConfigError):
            catalog_from_config([
                {"name": "A", "price": 1, "role_id": "7"},
                {"name": "B", "price": 2, "role_id": 7},
            ])

    def test_malformed_entries_rejected(self):
        for entry in ({"price": 1, "role_id": "7"}, {"name": "A", "price": "lots", "role_id": "7"},
                      {"name": "A", "price": 1, "role_id": "admin"}, "just a string"):
            with pytest.raises(ConfigError):
                catalog_from_config([entry])


class TestShopActions:
    def test_buy(self):
        assert parse_shop_action(buy_action_id("123")) == ShopAction("buy", "123")

    def test_close(self):
        assert parse_shop_action("shop_close") == ShopAction("close")

    def test_unknown(self):
        assert parse_shop_action("shop_buy:").kind == "unknown"
        assert parse_shop_action("something_else").kind == "unknown"
        assert parse_shop_action(None).kind == "unknown"


class TestSnapshot:
    @pytest.mark.asyncio
    async def test_flags_follow_balance_and_roles(self, shop, ledger):
        await ledger.credit("u1", 80)
        gateway = FakeRoleGateway(held={"u1": {BEGINNER.role_id}})

        snap = await shop.snapshot("u1", gateway)

        assert snap.balance == 80
        by_name = {e.item.name: e for e in snap.entries}
        assert by_name["Chess Beginner"].owned
        assert by_name["Chess Improver"].affordable
        assert not by_name["Chess Improver"].owned
        assert not by_name["Chess Pro"].affordable


class TestPurchase:
    @pytest.mark.asyncio
    async def test_success_debits_exact_price_and_grants(self, shop, ledger, gateway):
        await ledger.credit("u1", 100)

        result = await shop.purchase("u1", IMPROVER.role_id, gateway)

        assert result.item == IMPROVER
        assert await ledger.get_balance("u1") == 25
        assert gateway.grants == [("u1", IMPROVER.role_id)]
        assert result.snapshot.balance == 25
        owned = [e.item for e in result.snapshot.entries if e.owned]
        assert owned == [IMPROVER]

    @pytest.mark.asyncio
    async def test_exact_balance_is_enough(self, shop, ledger, gateway):
        await ledger.credit("u1", 25)
        await shop.purchase("u1", BEGINNER.role_id, gateway)
        assert await ledger.get_balance("u1") == 0

    @pytest.mark.asyncio
    async def test_unknown_role(self, shop, ledger, gateway):
        await ledger.credit("u1", 5000)
        with pytest.raises(UnknownEntitlement):
            await shop.purchase("u1", "999", gateway)
        assert await ledger.get_balance("u1") == 5000

    @pytest.mark.asyncio
    async def test_already_owned(self, shop, ledger):
        await ledger.credit("u1", 5000)
        gateway = FakeRoleGateway(held={"u1": {BEGINNER.role_id}})
        with pytest.raises(AlreadyOwned):
            await shop.purchase("u1", BEGINNER.role_id, gateway)
        assert await ledger.get_balance("u1") == 5000

    @pytest.mark.asyncio
    async def test_insufficient_funds(self, shop, ledger, gateway):
        await ledger.credit("u1", 74)
        with pytest.raises(InsufficientFunds):
            await shop.purchase("u1", IMPROVER.role_id, gateway)
        assert await ledger.get_balance("u1") == 74
        assert gateway.grants == []

    @pytest.mark.asyncio
    async def test_role_missing_from_guild(self, shop, ledger):
        await ledger.credit("u1", 5000)
        gateway = FakeRoleGateway(existing=set())
        with pytest.raises(RoleUnavailable):
            await shop.purchase("u1", BEGINNER.role_id, gateway)
        assert await ledger.get_balance("u1") == 5000

    @pytest.mark.asyncio
    async def test_failed_grant_refunds(self, shop, ledger, gateway):
        await ledger.credit("u1", 100)
        gateway.fail_grant = True
        with pytest.raises(RuntimeError):
            await shop.purchase("u1", IMPROVER.role_id, gateway)
        assert await ledger.get_balance("u1") == 100

    @pytest.mark.asyncio
    async def test_racing_purchases_never_overspend(self, shop, ledger, gateway):
        await ledger.credit("u1", 80)

        results = await asyncio.gather(
            shop.purchase("u1", IMPROVER.role_id, gateway),
            shop.purchase("u1", BEGINNER.role_id, gateway),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], InsufficientFunds)
        assert len(gateway.grants) == 1
        balance = await ledger.get_balance("u1")
        assert balance in (5, 55)
        assert balance >= 0
