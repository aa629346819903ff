from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.accommodation.app.dto.booking_detail import AvailabilitySummaryItem
from src.service.accommodation.app.dto.query_filter import AccommodationListFilter
from src.service.accommodation.domain.entity.accommodation_entity import Accommodation, Room


class IAccommodationQueryRepo(ABC):
    """Repository interface for inventory reads"""

    @abstractmethod
    async def get_by_id(self, *, accommodation_id: int) -> Optional[Accommodation]:
        """Accommodation with its rooms loaded"""
        pass

    @abstractmethod
    async def list(self, *, query_filter: AccommodationListFilter) -> List[Accommodation]:
        """Ordered by price_per_night ascending; rooms are not loaded"""
        pass

    @abstractmethod
    async def get_room(self, *, room_id: int) -> Optional[Room]:
        pass

    @abstractmethod
    async def availability_summary(self) -> List[AvailabilitySummaryItem]:
        """Active accommodations with room count and in-service room count, cheapest first"""
        pass
