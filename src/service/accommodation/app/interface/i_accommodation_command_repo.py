"""
Accommodation Command Repository Interface

Write side of the inventory store. Used inside a unit of work so every call shares
one transaction.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.accommodation.domain.entity.accommodation_entity import Accommodation, Room


class IAccommodationCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, accommodation_id: int) -> Optional[Accommodation]:
        pass

    @abstractmethod
    async def create(self, *, accommodation: Accommodation) -> Accommodation:
        pass

    @abstractmethod
    async def update(self, *, accommodation: Accommodation) -> Accommodation:
        pass

    @abstractmethod
    async def delete(self, *, accommodation_id: int) -> bool:
        """Hard delete; rooms go with it. Returns False when nothing was deleted."""
        pass

    @abstractmethod
    async def get_room(self, *, room_id: int) -> Optional[Room]:
        pass

    @abstractmethod
    async def get_room_for_update(self, *, room_id: int) -> Optional[Room]:
        """
        Load a room and hold a row lock on it until the transaction ends

        Serialises concurrent bookings of the same room: the second caller waits here
        and then sees the first caller's committed booking.
        """
        pass

    @abstractmethod
    async def room_number_exists(
        self, *, accommodation_id: int, room_number: str, exclude_room_id: Optional[int] = None
    ) -> bool:
        pass

    @abstractmethod
    async def add_room(self, *, room: Room) -> Room:
        pass

    @abstractmethod
    async def update_room(self, *, room: Room) -> Room:
        pass

    @abstractmethod
    async def delete_room(self, *, room_id: int) -> bool:
        """Returns False when the room did not exist"""
        pass

    @abstractmethod
    async def list_room_ids(self, *, accommodation_id: int) -> List[int]:
        pass
