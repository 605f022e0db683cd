"""Abstract interface for showing messages to the user."""

from abc import ABC, abstractmethod

from voice_dictation.domain.models import MessageRequest, MessageResponse


class MessageHost(ABC):
    """Abstract base class for user-facing message dialogs."""

    @abstractmethod
    async def show_message(self, request: MessageRequest) -> MessageResponse:
        """Displays a message and waits for the user's choice, if any."""
        pass
