"""Import every model so relationship() strings resolve and Base.metadata is complete."""

from src.service.accommodation.driven_adapter.model.accommodation_model import (
    AccommodationModel,
    RoomModel,
)
from src.service.accommodation.driven_adapter.model.booking_model import BookingModel
from src.service.accommodation.driven_adapter.model.event_model import EventModel
from src.service.accommodation.driven_adapter.model.payment_model import PaymentModel


__all__ = [
    'AccommodationModel',
    'BookingModel',
    'EventModel',
    'PaymentModel',
    'RoomModel',
]
