"""
Booking Command Repository Interface

Bookings are never deleted: creation and in-place status updates only.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.accommodation.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    """
    Repository interface for booking writes.

    Responsibilities:
    - Insert a booking after the availability re-check
    - Lock a booking row while its ledger is reconciled
    - Persist status and payment_status changes
    """

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Booking | None:
        pass

    @abstractmethod
    async def get_by_id_for_update(self, *, booking_id: int) -> Booking | None:
        """
        Get booking and lock its row until commit/rollback

        Args:
            booking_id: Booking ID

        Returns:
            Booking entity or None if not found
        """
        pass

    @abstractmethod
    async def list_by_room(self, *, room_id: int) -> List[Booking]:
        """All bookings of the room, cancelled ones included (callers filter)"""
        pass

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Insert booking

        Raises:
            ConflictError: The store rejected an overlapping live booking for the room
        """
        pass

    @abstractmethod
    async def update(self, *, booking: Booking) -> Booking:
        """Persist status, payment_status and updated_at"""
        pass

    @abstractmethod
    async def exists_for_rooms(self, *, room_ids: List[int]) -> bool:
        """Whether any booking (any status) references one of the rooms"""
        pass
