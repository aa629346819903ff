"""
Availability rules

Pure functions over already-loaded rooms and bookings. The caller decides how fresh the
data must be: the booking command re-reads under a room lock, queries read without one.
"""

from typing import Iterable, List

from src.service.accommodation.domain.entity.accommodation_entity import ROOM_TYPE_ORDER, Room
from src.service.accommodation.domain.entity.booking_entity import Booking
from src.service.accommodation.domain.value_object.stay_period import StayPeriod


def find_conflicts(*, stay: StayPeriod, bookings: Iterable[Booking]) -> List[Booking]:
    return [booking for booking in bookings if booking.is_active and booking.stay.overlaps(stay)]


def has_conflict(*, stay: StayPeriod, bookings: Iterable[Booking]) -> bool:
    return any(booking.is_active and booking.stay.overlaps(stay) for booking in bookings)


def filter_available_rooms(
    *, rooms: Iterable[Room], bookings: Iterable[Booking], stay: StayPeriod
) -> List[Room]:
    """Rooms in service with no live booking overlapping the stay, ordered by type then number"""
    taken_room_ids = {booking.room_id for booking in find_conflicts(stay=stay, bookings=bookings)}
    available = [room for room in rooms if room.is_available and room.id not in taken_room_ids]
    return sorted(available, key=lambda room: (ROOM_TYPE_ORDER[room.room_type], room.room_number))
