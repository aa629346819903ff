from datetime import date, timedelta

import pytest

from src.service.accommodation.domain.entity.accommodation_entity import Accommodation, Room
from test.service.accommodation.fakes import InMemoryStore
from test.util_constant import (
    DEFAULT_ACCOMMODATION_NAME,
    DEFAULT_EVENT_TITLE,
    DEFAULT_LOCATION,
    DEFAULT_PRICE_PER_NIGHT,
)


def days_ahead(days: int) -> str:
    """ISO date relative to the real today; bookings must not start in the past"""
    return (date.today() + timedelta(days=days)).isoformat()


@pytest.fixture
def event_id(store: InMemoryStore) -> int:
    return store.add_event(title=DEFAULT_EVENT_TITLE)


@pytest.fixture
def hotel(store: InMemoryStore) -> Accommodation:
    return store.add_accommodation(
        name=DEFAULT_ACCOMMODATION_NAME,
        location=DEFAULT_LOCATION,
        total_rooms=10,
        price_per_night=DEFAULT_PRICE_PER_NIGHT,
    )


@pytest.fixture
def room(store: InMemoryStore, hotel: Accommodation) -> Room:
    return store.add_room(accommodation_id=hotel.id, room_number='101', room_type='double')


@pytest.fixture
def booking_payload(event_id: int, room: Room) -> dict:
    """Four nights, 30 days from now (400.00 at the default rate)"""
    return {
        'event_id': event_id,
        'room_id': room.id,
        'check_in_date': days_ahead(30),
        'check_out_date': days_ahead(34),
    }
