from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.accommodation.app.dto.booking_detail import BookingDetail
from src.service.accommodation.app.dto.query_filter import BookingListFilter
from src.service.accommodation.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_detail(self, *, booking_id: int) -> Optional[BookingDetail]:
        """Booking with room, accommodation, event labels and its payments by payment date"""
        pass

    @abstractmethod
    async def list(self, *, query_filter: BookingListFilter) -> List[BookingDetail]:
        """Newest first; payments are not loaded"""
        pass

    @abstractmethod
    async def list_by_room(self, *, room_id: int) -> List[Booking]:
        pass

    @abstractmethod
    async def list_by_accommodation(self, *, accommodation_id: int) -> List[Booking]:
        pass
