"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- conversation.py → ConversationDTO, ParticipantDTO
- message.py      → MessageDTO, MessagePageDTO
- social.py       → ReactionDTO, BookmarkDTO, SavedMessageDTO
- user.py         → UserDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from chatcore.application.dto.conversation import ConversationDTO, ParticipantDTO
from chatcore.application.dto.message import MessageDTO, MessagePageDTO
from chatcore.application.dto.social import BookmarkDTO, ReactionDTO, SavedMessageDTO
from chatcore.application.dto.user import UserDTO

__all__ = [
    "ConversationDTO",
    "ParticipantDTO",
    "MessageDTO",
    "MessagePageDTO",
    "ReactionDTO",
    "BookmarkDTO",
    "SavedMessageDTO",
    "UserDTO",
]
