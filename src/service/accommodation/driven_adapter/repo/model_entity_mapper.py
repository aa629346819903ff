"""
ORM model -> domain entity conversion shared by the repository adapters

Relationships are declared lazy='raise', so callers must say whether rooms were loaded.
"""

from src.service.accommodation.domain.entity.accommodation_entity import (
    Accommodation,
    Room,
    RoomType,
)
from src.service.accommodation.domain.entity.booking_entity import (
    Booking,
    BookingPaymentMethod,
    BookingStatus,
    PaymentStatus,
)
from src.service.accommodation.domain.entity.payment_entity import Payment, PaymentMethod
from src.service.accommodation.driven_adapter.model.accommodation_model import (
    AccommodationModel,
    RoomModel,
)
from src.service.accommodation.driven_adapter.model.booking_model import BookingModel
from src.service.accommodation.driven_adapter.model.payment_model import PaymentModel


def room_to_entity(db_room: RoomModel) -> Room:
    return Room(
        accommodation_id=db_room.accommodation_id,
        room_number=db_room.room_number,
        room_type=RoomType(db_room.room_type),
        capacity=db_room.capacity,
        is_available=db_room.is_available,
        id=db_room.id,
        created_at=db_room.created_at,
        updated_at=db_room.updated_at,
    )


def accommodation_to_entity(
    db_accommodation: AccommodationModel, *, with_rooms: bool = False
) -> Accommodation:
    return Accommodation(
        name=db_accommodation.name,
        location=db_accommodation.location,
        total_rooms=db_accommodation.total_rooms,
        price_per_night=db_accommodation.price_per_night,
        description=db_accommodation.description,
        amenities=db_accommodation.amenities,
        image_url=db_accommodation.image_url,
        is_active=db_accommodation.is_active,
        id=db_accommodation.id,
        created_at=db_accommodation.created_at,
        updated_at=db_accommodation.updated_at,
        rooms=[room_to_entity(r) for r in db_accommodation.rooms] if with_rooms else [],
    )


def booking_to_entity(db_booking: BookingModel) -> Booking:
    return Booking(
        user_id=db_booking.user_id,
        event_id=db_booking.event_id,
        room_id=db_booking.room_id,
        check_in_date=db_booking.check_in_date,
        check_out_date=db_booking.check_out_date,
        total_price=db_booking.total_price,
        status=BookingStatus(db_booking.status),
        payment_status=PaymentStatus(db_booking.payment_status),
        payment_method=(
            BookingPaymentMethod(db_booking.payment_method) if db_booking.payment_method else None
        ),
        special_requests=db_booking.special_requests,
        id=db_booking.id,
        created_at=db_booking.created_at,
        updated_at=db_booking.updated_at,
    )


def payment_to_entity(db_payment: PaymentModel) -> Payment:
    return Payment(
        booking_id=db_payment.booking_id,
        amount=db_payment.amount,
        payment_date=db_payment.payment_date,
        payment_method=PaymentMethod(db_payment.payment_method),
        reference_number=db_payment.reference_number,
        receipt_url=db_payment.receipt_url,
        notes=db_payment.notes,
        id=db_payment.id,
        created_at=db_payment.created_at,
    )
