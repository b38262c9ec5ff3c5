"""Application services - orchestration across several handlers."""

from chatcore.application.services.chat_facade import ChatFacade

__all__ = ["ChatFacade"]
