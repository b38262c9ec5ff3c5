import pytest

from chatcore.domain.entities import ConversationKind, ParticipantRole
from chatcore.domain.exceptions import DomainValidationError, EntityNotFoundError
from chatcore.domain.value_objects import ConversationId
from chatcore.infrastructure.persistence.memory import InMemoryConversationRepository

from conftest import new_user_id


async def test_direct_conversation_has_two_active_members_and_no_name(facade, alice, bob):
    conversation = await facade.create_conversation(ConversationKind.DIRECT, [alice, bob])

    assert conversation.name is None
    assert conversation.kind == ConversationKind.DIRECT
    assert [p.user_id for p in conversation.active_participants] == [alice, bob]


@pytest.mark.parametrize("count", [1, 3])
async def test_direct_conversation_requires_exactly_two(facade, count):
    users = [new_user_id() for _ in range(count)]

    with pytest.raises(DomainValidationError):
        await facade.create_conversation(ConversationKind.DIRECT, users)


async def test_direct_conversation_rejects_name(facade, alice, bob):
    with pytest.raises(DomainValidationError):
        await facade.create_conversation(ConversationKind.DIRECT, [alice, bob], name="Us")


@pytest.mark.parametrize("name", [None, "", "   "])
async def test_group_requires_name(facade, alice, bob, name):
    with pytest.raises(DomainValidationError):
        await facade.create_conversation(ConversationKind.GROUP, [alice, bob], name=name)


async def test_group_members_are_active_with_member_role(facade, alice, bob):
    conversation = await facade.create_conversation(
        ConversationKind.GROUP, [alice, bob], name="Trip"
    )

    assert conversation.name == "Trip"
    assert {p.user_id for p in conversation.active_participants} == {alice, bob}
    assert all(p.role == ParticipantRole.MEMBER for p in conversation.participants)


async def test_duplicate_ids_collapse_before_count_rules(facade, alice):
    with pytest.raises(DomainValidationError):
        await facade.create_conversation(ConversationKind.DIRECT, [alice, alice])


async def test_rejected_creation_leaves_no_trace(facade, store, alice):
    with pytest.raises(DomainValidationError):
        await facade.create_conversation(ConversationKind.GROUP, [alice], name="Solo")

    assert store.conversations == {}
    assert store.participants == []


async def test_get_unknown_conversation(facade):
    with pytest.raises(EntityNotFoundError):
        await facade.get_conversation(
            ConversationId("00000000-0000-4000-8000-000000000000")
        )


async def test_membership_comes_from_participant_rows(facade, store, alice, bob):
    trip = await facade.create_conversation(
        ConversationKind.GROUP, [alice, bob], name="Trip"
    )
    await facade.leave_conversation(trip.id, bob)

    bare = await InMemoryConversationRepository(store).get_by_id(trip.id)
    full = await facade.get_conversation(trip.id)

    assert bare.participants == []
    assert [p.user_id for p in full.participants] == [alice, bob]
    assert [p.user_id for p in full.active_participants] == [alice]


async def test_list_for_user_orders_by_recent_activity(facade, alice, bob, carol):
    older = await facade.create_conversation(
        ConversationKind.GROUP, [alice, bob], name="Older"
    )
    newer = await facade.create_conversation(ConversationKind.DIRECT, [alice, carol])
    # A message makes the older conversation the most recently active
    await facade.send_message(older.id, bob, "ping")

    listed = await facade.list_conversations(alice)

    assert [c.id for c in listed] == [older.id, newer.id]
    assert listed[0].last_message_at is not None


async def test_list_for_user_skips_conversations_left(facade, alice, bob, carol):
    conversation = await facade.create_conversation(
        ConversationKind.GROUP, [alice, bob, carol], name="Trip"
    )
    await facade.leave_conversation(conversation.id, carol)

    assert await facade.list_conversations(carol) == []
    assert [c.id for c in await facade.list_conversations(alice)] == [conversation.id]
