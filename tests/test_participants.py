import asyncio

import pytest

from chatcore.domain.entities import ConversationKind, ParticipantRole, SystemEvent
from chatcore.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatcore.domain.value_objects import ConversationId

from conftest import new_user_id


@pytest.fixture()
async def trip(facade, alice, bob):
    return await facade.create_conversation(
        ConversationKind.GROUP, [alice, bob], name="Trip"
    )


async def test_add_participant(facade, trip, alice, carol):
    participant = await facade.add_participant(
        trip.id, carol, ParticipantRole.ADMIN, caller_user_id=alice
    )

    assert participant.is_active
    assert participant.role == ParticipantRole.ADMIN
    conversation = await facade.get_conversation(trip.id)
    assert carol in {p.user_id for p in conversation.active_participants}


async def test_adding_active_participant_twice_conflicts(facade, trip, alice, carol):
    await facade.add_participant(trip.id, carol, caller_user_id=alice)

    with pytest.raises(ConflictError):
        await facade.add_participant(trip.id, carol, caller_user_id=alice)


async def test_concurrent_adds_of_same_user_admit_one(facade, store, trip, alice, carol):
    results = await asyncio.gather(
        facade.add_participant(trip.id, carol, caller_user_id=alice),
        facade.add_participant(trip.id, carol, caller_user_id=alice),
        return_exceptions=True,
    )

    assert sum(isinstance(r, ConflictError) for r in results) == 1
    assert sum(not isinstance(r, Exception) for r in results) == 1
    active = [p for p in store.participants if p.user_id == carol and p.is_active]
    assert len(active) == 1


async def test_creator_cannot_be_added_again(facade, trip, alice):
    with pytest.raises(ConflictError):
        await facade.add_participant(trip.id, alice, caller_user_id=alice)


async def test_strangers_cannot_add_themselves(facade, trip, alice):
    outsider = new_user_id()

    with pytest.raises(AccessDeniedError):
        await facade.add_participant(trip.id, outsider, caller_user_id=outsider)

    page = await facade.list_messages(trip.id, alice)
    assert page.messages == []


async def test_former_members_cannot_add_anyone(facade, trip, bob, carol):
    await facade.leave_conversation(trip.id, bob)

    with pytest.raises(AccessDeniedError):
        await facade.add_participant(trip.id, carol, caller_user_id=bob)


async def test_add_to_unknown_conversation(facade, alice, carol):
    with pytest.raises(EntityNotFoundError):
        await facade.add_participant(
            ConversationId("00000000-0000-4000-8000-000000000000"),
            carol,
            caller_user_id=alice,
        )


async def test_direct_conversations_are_closed(facade, alice, bob, carol):
    direct = await facade.create_conversation(ConversationKind.DIRECT, [alice, bob])

    with pytest.raises(DomainValidationError):
        await facade.add_participant(direct.id, carol, caller_user_id=alice)


async def test_get_conversation_lists_every_membership_row(facade, trip, bob):
    await facade.leave_conversation(trip.id, bob)

    conversation = await facade.get_conversation(trip.id)

    assert len(conversation.participants) == 2
    assert [p.user_id for p in conversation.participants if not p.is_active] == [bob]


async def test_leave_twice_fails(facade, trip, bob):
    left = await facade.leave_conversation(trip.id, bob)
    assert left.left_at is not None

    with pytest.raises(EntityNotFoundError):
        await facade.leave_conversation(trip.id, bob)


async def test_rejoin_appends_new_membership_row(facade, trip, alice, bob):
    await facade.leave_conversation(trip.id, bob)
    await facade.add_participant(trip.id, bob, caller_user_id=alice)

    conversation = await facade.get_conversation(trip.id)
    rows = [p for p in conversation.participants if p.user_id == bob]
    assert len(rows) == 2
    assert not rows[0].is_active
    assert rows[1].is_active


async def test_join_and_leave_post_system_messages(facade, trip, alice, carol):
    await facade.add_participant(trip.id, carol, caller_user_id=alice)
    await facade.leave_conversation(trip.id, carol)

    page = await facade.list_messages(trip.id, alice)
    events = [(m.system_event, m.text) for m in page.messages]

    assert events == [
        (SystemEvent.LEAVE, f"{carol.value} left"),
        (SystemEvent.JOIN, f"{carol.value} joined"),
    ]
    assert all(m.sender_user_id is None for m in page.messages)
