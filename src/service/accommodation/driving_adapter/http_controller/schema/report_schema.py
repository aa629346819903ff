from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.service.accommodation.domain.entity.accommodation_entity import RoomType
from src.service.accommodation.domain.entity.booking_entity import BookingStatus, PaymentStatus


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class RevenueSummaryResponse(_FromAttributes):
    total_bookings: int
    total_revenue: Decimal
    collected_revenue: Decimal
    pending_revenue: Decimal


class StatusBreakdownResponse(_FromAttributes):
    status: BookingStatus
    count: int
    revenue: Decimal


class OccupancyRateResponse(_FromAttributes):
    id: int
    name: str
    location: str
    total_rooms: int
    booked_rooms: int
    occupancy_rate: Decimal
    total_revenue: Decimal
    rate_per_night: Decimal
    total_nights_booked: int


class RoomTypePopularityResponse(_FromAttributes):
    room_type: RoomType
    total_rooms: int
    bookings: int
    popularity_percent: Decimal


class TimelineBucketResponse(_FromAttributes):
    month: str
    bookings: int
    revenue: Decimal


class EventBreakdownResponse(_FromAttributes):
    event_id: int
    event_title: Optional[str] = None
    booking_count: int
    total_revenue: Decimal


class RecentBookingResponse(_FromAttributes):
    id: int
    user_id: int
    event_id: int
    event_title: Optional[str] = None
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
    created_at: Optional[datetime] = None


class AccommodationReportResponse(_FromAttributes):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'summary': {
                    'total_bookings': 7,
                    'total_revenue': '2800.00',
                    'collected_revenue': '1200.00',
                    'pending_revenue': '1600.00',
                },
                'occupancy_rates': [
                    {
                        'id': 1,
                        'name': 'Harbour View Hotel',
                        'location': 'Keelung',
                        'total_rooms': 10,
                        'booked_rooms': 7,
                        'occupancy_rate': '70.00',
                        'total_revenue': '2800.00',
                        'rate_per_night': '100.00',
                        'total_nights_booked': 28,
                    }
                ],
            }
        },
    )

    summary: RevenueSummaryResponse
    status_breakdown: List[StatusBreakdownResponse]
    occupancy_rates: List[OccupancyRateResponse]
    room_type_popularity: List[RoomTypePopularityResponse]
    booking_timeline: List[TimelineBucketResponse]
    event_breakdown: List[EventBreakdownResponse]
    recent_bookings: List[RecentBookingResponse]
