from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.service.accommodation.app.dto.booking_detail import BookingDetail
from src.service.accommodation.domain.entity.accommodation_entity import RoomType
from src.service.accommodation.domain.entity.booking_entity import (
    BookingPaymentMethod,
    BookingStatus,
    PaymentStatus,
)
from src.service.accommodation.driving_adapter.http_controller.schema.payment_schema import (
    PaymentResponse,
)


class BookingCreateRequest(BaseModel):
    event_id: int
    room_id: int
    check_in_date: date
    check_out_date: date
    payment_method: Optional[str] = None
    special_requests: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'event_id': 1,
                'room_id': 3,
                'check_in_date': '2025-06-01',
                'check_out_date': '2025-06-05',
                'payment_method': 'online',
                'special_requests': 'Late arrival',
            }
        }


class BookingStatusUpdateRequest(BaseModel):
    status: str

    class Config:
        json_schema_extra = {'example': {'status': 'confirmed'}}


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': 12,
                'user_id': 7,
                'event_id': 1,
                'room_id': 3,
                'check_in_date': '2025-06-01',
                'check_out_date': '2025-06-05',
                'total_price': '400.00',
                'status': 'pending',
                'payment_status': 'pending',
                'payment_method': 'online',
                'special_requests': None,
                'created_at': '2025-05-10T10:30:00Z',
            }
        },
    )

    id: int
    user_id: int
    event_id: int
    room_id: int
    check_in_date: date
    check_out_date: date
    total_price: Decimal
    status: BookingStatus
    payment_status: PaymentStatus
    payment_method: Optional[BookingPaymentMethod] = None
    special_requests: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingWithDetailsResponse(BookingResponse):
    """Booking with room, accommodation and event labels, plus its payments when loaded"""

    room_number: str
    room_type: RoomType
    accommodation_id: int
    accommodation_name: str
    accommodation_location: str
    event_title: Optional[str] = None
    payments: List[PaymentResponse] = []

    @classmethod
    def from_detail(cls, detail: BookingDetail) -> 'BookingWithDetailsResponse':
        return cls(
            **BookingResponse.model_validate(detail.booking).model_dump(),
            room_number=detail.room_number,
            room_type=detail.room_type,
            accommodation_id=detail.accommodation_id,
            accommodation_name=detail.accommodation_name,
            accommodation_location=detail.accommodation_location,
            event_title=detail.event_title,
            payments=[PaymentResponse.model_validate(p) for p in detail.payments],
        )
