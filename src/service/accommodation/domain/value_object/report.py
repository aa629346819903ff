from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

import attrs

from src.service.accommodation.domain.entity.accommodation_entity import RoomType
from src.service.accommodation.domain.entity.booking_entity import BookingStatus, PaymentStatus
from src.service.accommodation.domain.value_object.stay_period import StayPeriod


@attrs.define(frozen=True)
class ReportFilter:
    """Reporting window: a booking is in it when it starts and ends inside the bounds"""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    event_id: Optional[int] = None
    accommodation_id: Optional[int] = None

    def matches(self, row: 'BookingReportRow') -> bool:
        if self.start_date is not None and row.check_in_date < self.start_date:
            return False
        if self.end_date is not None and row.check_out_date > self.end_date:
            return False
        if self.event_id is not None and row.event_id != self.event_id:
            return False
        if self.accommodation_id is not None and row.accommodation_id != self.accommodation_id:
            return False
        return True


@attrs.define(frozen=True)
class BookingReportRow:
    """Booking flattened with its room, accommodation and event labels"""

    id: int
    user_id: int
    event_id: int
    room_id: int
    room_number: str
    room_type: RoomType
    accommodation_id: int
    accommodation_name: str
    check_in_date: date
    check_out_date: date
    status: BookingStatus
    payment_status: PaymentStatus
    total_price: Decimal
    event_title: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status != BookingStatus.CANCELLED

    @property
    def nights(self) -> int:
        return StayPeriod(check_in=self.check_in_date, check_out=self.check_out_date).nights


@attrs.define(frozen=True)
class RevenueSummary:
    total_bookings: int
    total_revenue: Decimal
    collected_revenue: Decimal
    pending_revenue: Decimal


@attrs.define(frozen=True)
class StatusBreakdownItem:
    status: BookingStatus
    count: int
    revenue: Decimal


@attrs.define(frozen=True)
class OccupancyRate:
    id: int
    name: str
    location: str
    total_rooms: int
    booked_rooms: int
    occupancy_rate: Decimal
    total_revenue: Decimal
    rate_per_night: Decimal
    total_nights_booked: int


@attrs.define(frozen=True)
class RoomTypePopularity:
    room_type: RoomType
    total_rooms: int
    bookings: int
    popularity_percent: Decimal


@attrs.define(frozen=True)
class TimelineBucket:
    month: str
    bookings: int
    revenue: Decimal


@attrs.define(frozen=True)
class EventBreakdownItem:
    event_id: int
    event_title: Optional[str]
    booking_count: int
    total_revenue: Decimal


@attrs.define(frozen=True)
class AccommodationReport:
    summary: RevenueSummary
    status_breakdown: List[StatusBreakdownItem]
    occupancy_rates: List[OccupancyRate]
    room_type_popularity: List[RoomTypePopularity]
    booking_timeline: List[TimelineBucket]
    event_breakdown: List[EventBreakdownItem]
    recent_bookings: List[BookingReportRow]
