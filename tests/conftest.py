import random

import pytest
import pytest_asyncio

from chessquizbot.core.db import Database
from chessquizbot.core.ledger import LedgerStore
from chessquizbot.core.quiz import QuizSessionTracker
from chessquizbot.core.quiz_data import QuizQuestion
from chessquizbot.core.shop import SHOP_ITEMS, EntitlementShop

START_MS = 1_700_000_000_000

SMALL_CATALOG = (
    QuizQuestion(1, "How many squares are on a chessboard?", "64", reward=5),
    QuizQuestion(2, "Which piece moves in an L-shape?", "Knight", aliases=("horse",), reward=10),
    QuizQuestion(3, "What is the final aim of chess?", "Checkmate", aliases=("mate",), reward=15),
)


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, start: int = START_MS):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int):
        self.now += ms


class FakeRoleGateway:
    def __init__(self, existing=None, held=None):
        self.existing = set(existing if existing is not None else (i.role_id for i in SHOP_ITEMS))
        self.held = {k: set(v) for k, v in (held or {}).items()}
        self.fail_grant = False
        self.grants = []

    async def member_role_ids(self, user_id):
        return set(self.held.get(user_id, set()))

    async def role_exists(self, role_id):
        return role_id in self.existing

    async def grant_role(self, user_id, role_id):
        if self.fail_grant:
            raise RuntimeError("role grant rejected")
        self.held.setdefault(user_id, set()).add(role_id)
        self.grants.append((user_id, role_id))


@pytest_asyncio.fixture
async def db(tmp_path):
    database = Database(str(tmp_path / "quiz.sqlite"), retry_base_delay=0)
    await database.connect()
    await database.migrate()
    yield database
    await database.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ledger(db, clock):
    return LedgerStore(db, clock=clock)


@pytest.fixture
def tracker(db, ledger, clock):
    return QuizSessionTracker(db, ledger, clock=clock, rng=random.Random(1234))


@pytest.fixture
def small_tracker(db, ledger, clock):
    return QuizSessionTracker(db, ledger, catalog=SMALL_CATALOG, clock=clock, rng=random.Random(99))


@pytest.fixture
def shop(ledger):
    return EntitlementShop(ledger)


@pytest.fixture
def gateway():
    return FakeRoleGateway()
