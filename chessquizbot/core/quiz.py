"""
Per-user quiz state.

A user is either idle or awaiting an answer to exactly one question. Three
independent tables back this:

- ``user_quiz``: the active slot (primary key on user, so one per user)
- ``quiz_cooldown``: when the user last submitted an answer
- ``quiz_history``: question ids already shown, reset after full coverage

Issuance and submission each run inside one ``Database.transaction()`` so
the check-then-write steps cannot interleave with another request.
"""

from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from typing import Callable, Sequence

from .db import Database
from .errors import CooldownActive, NoActiveQuestion, QuestionPending
from .ledger import LedgerStore
from .matcher import matches_any
from .quiz_data import QUIZ_POOL, QuizQuestion
from .utility import MINUTE_MS, clamp, now_ms

log = logging.getLogger(__name__)

COOLDOWN_MS = 90 * MINUTE_MS
PAGE_SIZE = 20


@dataclass(frozen=True)
class ActiveSlot:
    user_id: str
    question_id: int
    asked_at: int


@dataclass(frozen=True)
class IssuedQuestion:
    question_id: int
    question: str
    reward: int


@dataclass(frozen=True)
class AnswerOutcome:
    correct: bool
    question_id: int
    answer: str
    reward: int


@dataclass(frozen=True)
class QuestionPage:
    page: int
    total_pages: int
    questions: tuple[QuizQuestion, ...]


def parse_history(raw: str | None) -> list[int]:
    """Decode the comma-joined ``askedIds`` column, skipping junk entries."""
    out: list[int] = []
    for part in (raw or "").split(","):
        part = part.strip()
        if part.lstrip("-").isdigit():
            out.append(int(part))
    return out


def select_question(
    catalog: Sequence[QuizQuestion],
    history: Sequence[int],
    rng: random.Random,
) -> tuple[QuizQuestion, bool]:
    """Pick an unseen question. Returns (question, history_was_reset)."""
    seen = set(history)
    remaining = [q for q in catalog if q.id not in seen]
    if not remaining:
        return rng.choice(catalog), True
    return rng.choice(remaining), False


# ============================================================================
# REPOSITORIES
# ============================================================================

class ActiveSlotRepository:
    def __init__(self, db: Database):
        self.db = db

    async def get(self, user_id: str) -> ActiveSlot | None:
        row = await self.db.fetchone(
            "SELECT quizId, askedAt FROM user_quiz WHERE userId = ?",
            (str(user_id),),
        )
        if not row:
            return None
        return ActiveSlot(str(user_id), int(row["quizId"]), int(row["askedAt"]))

    async def try_insert(self, user_id: str, question_id: int, asked_at: int) -> bool:
        """Insert the slot unless one exists. The primary key makes this a compare-and-set."""
        changed = await self.db.execute(
            "INSERT OR IGNORE INTO user_quiz (userId, quizId, askedAt) VALUES (?, ?, ?)",
            (str(user_id), int(question_id), int(asked_at)),
        )
        return changed > 0

    async def clear(self, user_id: str) -> bool:
        changed = await self.db.execute("DELETE FROM user_quiz WHERE userId = ?", (str(user_id),))
        return changed > 0


class CooldownRepository:
    def __init__(self, db: Database):
        self.db = db

    async def last_used(self, user_id: str) -> int | None:
        row = await self.db.fetchone(
            "SELECT lastUsed FROM quiz_cooldown WHERE userId = ?",
            (str(user_id),),
        )
        return int(row["lastUsed"]) if row else None

    async def stamp(self, user_id: str, ts: int):
        await self.db.execute(
            """
            INSERT INTO quiz_cooldown (userId, lastUsed) VALUES (?, ?)
            ON CONFLICT(userId) DO UPDATE SET lastUsed = excluded.lastUsed
            """,
            (str(user_id), int(ts)),
        )


class HistoryRepository:
    def __init__(self, db: Database):
        self.db = db

    async def get(self, user_id: str) -> list[int]:
        row = await self.db.fetchone(
            "SELECT askedIds FROM quiz_history WHERE userId = ?",
            (str(user_id),),
        )
        return parse_history(row["askedIds"]) if row else []

    async def add(self, user_id: str, question_id: int):
        history = await self.get(user_id)
        if int(question_id) in history:
            return
        history.append(int(question_id))
        await self.db.execute(
            """
            INSERT INTO quiz_history (userId, askedIds) VALUES (?, ?)
            ON CONFLICT(userId) DO UPDATE SET askedIds = excluded.askedIds
            """,
            (str(user_id), ",".join(str(i) for i in history)),
        )

    async def reset(self, user_id: str):
        await self.db.execute("DELETE FROM quiz_history WHERE userId = ?", (str(user_id),))


# ============================================================================
# SESSION TRACKER
# ============================================================================

class QuizSessionTracker:
    def __init__(
        self,
        db: Database,
        ledger: LedgerStore,
        catalog: Sequence[QuizQuestion] = QUIZ_POOL,
        clock: Callable[[], int] = now_ms,
        cooldown_ms: int = COOLDOWN_MS,
        rng: random.Random | None = None,
    ):
        if not catalog:
            raise ValueError("quiz catalog is empty")
        self.db = db
        self.ledger = ledger
        self.catalog = tuple(catalog)
        self._by_id = {q.id: q for q in self.catalog}
        self.clock = clock
        self.cooldown_ms = int(cooldown_ms)
        self.rng = rng or random.Random()

        self.slots = ActiveSlotRepository(db)
        self.cooldowns = CooldownRepository(db)
        self.history = HistoryRepository(db)

    def get_question(self, question_id: int) -> QuizQuestion | None:
        return self._by_id.get(int(question_id))

    async def cooldown_remaining(self, user_id: str) -> int:
        """Milliseconds until issuance is allowed again (0 when free)."""
        last = await self.cooldowns.last_used(user_id)
        if last is None:
            return 0
        elapsed = self.clock() - last
        if elapsed >= self.cooldown_ms:
            return 0
        return self.cooldown_ms - elapsed

    async def issue_question(self, user_id: str) -> IssuedQuestion:
        user_id = str(user_id)
        async with self.db.transaction():
            remaining = await self.cooldown_remaining(user_id)
            if remaining > 0:
                raise CooldownActive(remaining)

            if await self.slots.get(user_id) is not None:
                raise QuestionPending()

            history = await self.history.get(user_id)
            question, reset = select_question(self.catalog, history, self.rng)
            if reset:
                log.info("User %s exhausted the catalog, history reset", user_id)
                await self.history.reset(user_id)

            if not await self.slots.try_insert(user_id, question.id, self.clock()):
                raise QuestionPending()
            # Presented counts as seen; the append on answer is then a no-op.
            await self.history.add(user_id, question.id)

        log.debug("Issued question %s to %s", question.id, user_id)
        return IssuedQuestion(question.id, question.question, question.reward)

    async def submit_answer(self, user_id: str, raw_text: str) -> AnswerOutcome:
        user_id = str(user_id)
        async with self.db.transaction():
            slot = await self.slots.get(user_id)
            if slot is None:
                raise NoActiveQuestion()

            question = self.get_question(slot.question_id)
            if question is not None:
                correct = matches_any(raw_text, question.accepted_answers)
                await self.cooldowns.stamp(user_id, self.clock())
                await self.history.add(user_id, question.id)
                if correct:
                    await self.ledger.credit(user_id, question.reward)
            await self.slots.clear(user_id)

        if question is None:
            # Slot pointed at a question removed from the catalog; it is cleared above.
            log.warning("User %s held unknown question id %s", user_id, slot.question_id)
            raise NoActiveQuestion()

        log.debug("User %s answered question %s (correct=%s)", user_id, question.id, correct)
        return AnswerOutcome(
            correct=correct,
            question_id=question.id,
            answer=question.answer,
            reward=question.reward if correct else 0,
        )

    def page_questions(self, page: int | None = None, page_size: int = PAGE_SIZE) -> QuestionPage:
        page_size = max(1, int(page_size))
        total_pages = max(1, math.ceil(len(self.catalog) / page_size))
        page = clamp(int(page or 1), 1, total_pages)
        start = (page - 1) * page_size
        return QuestionPage(page, total_pages, self.catalog[start:start + page_size])
