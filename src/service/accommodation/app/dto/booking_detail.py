"""Read models returned by query use cases."""

from decimal import Decimal
from typing import List, Optional

import attrs

from src.service.accommodation.domain.entity.accommodation_entity import RoomType
from src.service.accommodation.domain.entity.booking_entity import Booking
from src.service.accommodation.domain.entity.payment_entity import Payment


@attrs.define(frozen=True)
class BookingDetail:
    """Booking with the labels a guest or operator needs to recognise it"""

    booking: Booking
    room_number: str
    room_type: RoomType
    accommodation_id: int
    accommodation_name: str
    accommodation_location: str
    event_title: Optional[str] = None
    payments: List[Payment] = attrs.field(factory=list)


@attrs.define(frozen=True)
class AvailabilitySummaryItem:
    id: int
    name: str
    location: str
    price_per_night: Decimal
    total_rooms: int
    available_rooms: int
