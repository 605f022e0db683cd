"""Abstract interface for the assistant task host."""

from abc import ABC, abstractmethod


class TaskHost(ABC):
    """Abstract base class for hosts that run assistant tasks."""

    @property
    @abstractmethod
    def current_task_id(self) -> str | None:
        """Identifier of the task currently open, if any."""
        pass

    @abstractmethod
    async def init_task(self, prompt: str) -> None:
        """Starts a new task seeded with the given prompt."""
        pass
