import asyncio
import logging

import pytest

from chatcore.application.services.chat_facade import ChatFacade
from chatcore.domain.entities import ConversationKind, SystemEvent
from chatcore.domain.exceptions import StorageUnavailableError
from chatcore.domain.value_objects import Emoji
from chatcore.infrastructure.persistence.memory import (
    InMemoryBookmarkRepository,
    InMemoryConversationRepository,
    InMemoryMessageRepository,
    InMemoryParticipantRepository,
    InMemoryReactionRepository,
)


class SystemMessagesDown(InMemoryMessageRepository):
    async def insert(self, conversation_id, sender_user_id, text, system_event=None):
        if system_event is not None:
            raise StorageUnavailableError("message table unreachable")
        return await super().insert(conversation_id, sender_user_id, text, system_event)


class SlowConversations(InMemoryConversationRepository):
    async def get_by_id(self, conversation_id):
        await asyncio.sleep(1)
        return await super().get_by_id(conversation_id)


def _facade(store, conversations=None, messages=None) -> ChatFacade:
    return ChatFacade(
        conversations or InMemoryConversationRepository(store),
        InMemoryParticipantRepository(store),
        messages or InMemoryMessageRepository(store),
        InMemoryReactionRepository(store),
        InMemoryBookmarkRepository(store),
    )


async def test_trip_end_to_end(facade, alice, bob, carol):
    trip = await facade.create_conversation(
        ConversationKind.GROUP, [alice, bob, carol], name="Trip"
    )
    message = await facade.send_message(trip.id, alice, "hi")
    await facade.add_reaction(message.id, bob, Emoji("👍"))
    await facade.remove_reaction(message.id, Emoji("👍"), bob)
    await facade.add_bookmark(message.id, alice)

    saved = await facade.list_bookmarks(alice)

    assert len(saved) == 1
    assert saved[0].message_id == message.id
    assert saved[0].conversation_id == trip.id


async def test_membership_survives_failed_system_message(store, alice, bob, carol, caplog):
    facade = _facade(store, messages=SystemMessagesDown(store))
    trip = await facade.create_conversation(
        ConversationKind.GROUP, [alice, bob], name="Trip"
    )

    with caplog.at_level(logging.ERROR, logger="chatcore"):
        participant = await facade.add_participant(
            trip.id, carol, caller_user_id=alice
        )
        left = await facade.leave_conversation(trip.id, carol)

    assert participant.user_id == carol
    assert left.left_at is not None
    failures = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(failures) == 2
    assert all(r.exc_info for r in failures)
    assert store.messages == {}


async def test_emit_system_message_directly(facade, alice, bob):
    trip = await facade.create_conversation(ConversationKind.DIRECT, [alice, bob])

    message = await facade.emit_system_message(trip.id, SystemEvent.JOIN, "welcome")

    assert message.is_system
    assert message.sender_user_id is None


async def test_expired_deadline_is_unavailable(store, alice, bob):
    facade = _facade(store, conversations=SlowConversations(store))
    trip = await facade.create_conversation(ConversationKind.DIRECT, [alice, bob])

    with pytest.raises(StorageUnavailableError):
        await facade.get_conversation(trip.id, timeout=0.01)


async def test_generous_deadline_succeeds(facade, alice, bob):
    trip = await facade.create_conversation(
        ConversationKind.DIRECT, [alice, bob], timeout=5
    )

    assert (await facade.get_conversation(trip.id, timeout=5)).id == trip.id


async def test_storage_outage_propagates(facade, store, alice, bob):
    trip = await facade.create_conversation(ConversationKind.DIRECT, [alice, bob])
    store.available = False

    with pytest.raises(StorageUnavailableError):
        await facade.send_message(trip.id, alice, "anyone?")
    with pytest.raises(StorageUnavailableError):
        await facade.list_conversations(alice)
