from abc import ABC, abstractmethod


class IEventQueryRepo(ABC):
    """Existence check against the event catalogue owned by another module"""

    @abstractmethod
    async def exists(self, *, event_id: int) -> bool:
        pass
