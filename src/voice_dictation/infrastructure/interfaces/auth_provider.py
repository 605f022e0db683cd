"""Abstract interface for the account sign-in state."""

from abc import ABC, abstractmethod

from voice_dictation.domain.models import UserInfo


class AuthProvider(ABC):
    """Abstract base class for sign-in state providers."""

    @abstractmethod
    def get_info(self) -> UserInfo | None:
        """
        Returns the cached sign-in state without any network round trip.

        Returns:
            The signed-in user's profile, or None when nobody is signed in.
        """
        pass

    @abstractmethod
    async def create_auth_request(self) -> None:
        """Starts the interactive sign-in flow."""
        pass
