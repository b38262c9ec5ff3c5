from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from chatcore.domain.value_objects import ConversationId, UserId

try:
    from chatcore.infrastructure.persistence.prisma_participant_repository import (
        PrismaParticipantRepository,
    )
except (ImportError, RuntimeError):
    # prisma raises RuntimeError until `prisma generate` has run
    pytest.skip("Prisma client is not generated", allow_module_level=True)

CONVERSATION = ConversationId("11111111-1111-4111-8111-111111111111")
USER = UserId("22222222-2222-4222-8222-222222222222")


class FakeParticipantTable:
    """Mimics the Postgres column: left_at keeps milliseconds only."""

    def __init__(self, rows):
        self.rows = rows
        self.unique_lookups = []

    def _matches(self, row, where):
        return all(getattr(row, key) == value for key, value in where.items())

    async def find_first(self, where, order):
        matches = [r for r in self.rows if self._matches(r, where)]
        return max(matches, key=lambda r: r.id) if matches else None

    async def update_many(self, where, data):
        matches = [r for r in self.rows if self._matches(r, where)]
        for row in matches:
            when = data["left_at"]
            row.left_at = when.replace(microsecond=when.microsecond // 1000 * 1000)
        return len(matches)

    async def find_unique(self, where):
        self.unique_lookups.append(where)
        return next((r for r in self.rows if r.id == where["id"]), None)


def _row(row_id, left_at=None):
    return SimpleNamespace(
        id=row_id,
        conversation_id=CONVERSATION.value,
        user_id=USER.value,
        role="member",
        joined_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        left_at=left_at,
    )


def _repository(rows):
    table = FakeParticipantTable(rows)
    return PrismaParticipantRepository(SimpleNamespace(participant=table)), table


async def test_set_left_returns_row_despite_rounded_timestamp():
    earlier = _row(1, left_at=datetime(2024, 1, 2, tzinfo=timezone.utc))
    repository, table = _repository([earlier, _row(2)])
    when = datetime(2024, 2, 1, 9, 30, 15, 123456, tzinfo=timezone.utc)

    left = await repository.set_left(CONVERSATION, USER, when)

    assert left is not None
    assert left.left_at == when.replace(microsecond=123000)
    assert table.unique_lookups == [{"id": 2}]
    assert earlier.left_at == datetime(2024, 1, 2, tzinfo=timezone.utc)


async def test_set_left_without_active_row():
    past = _row(1, left_at=datetime(2024, 1, 2, tzinfo=timezone.utc))
    repository, table = _repository([past])

    left = await repository.set_left(
        CONVERSATION, USER, datetime(2024, 2, 1, tzinfo=timezone.utc)
    )

    assert left is None
    assert table.unique_lookups == []
