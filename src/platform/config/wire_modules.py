"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.accommodation.app.command import (
    add_payment_use_case,
    add_room_use_case,
    cancel_booking_use_case,
    create_accommodation_use_case,
    create_booking_use_case,
    delete_accommodation_use_case,
    delete_room_use_case,
    update_accommodation_use_case,
    update_booking_status_use_case,
    update_room_use_case,
)
from src.service.accommodation.app.query import (
    find_available_rooms_use_case,
    generate_report_use_case,
    get_accommodation_use_case,
    get_booking_use_case,
    list_accommodations_use_case,
    list_bookings_use_case,
    list_payments_use_case,
)
from src.service.accommodation.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    # inventory
    create_accommodation_use_case,
    update_accommodation_use_case,
    delete_accommodation_use_case,
    add_room_use_case,
    update_room_use_case,
    delete_room_use_case,
    get_accommodation_use_case,
    list_accommodations_use_case,
    find_available_rooms_use_case,
    # bookings and payments
    create_booking_use_case,
    update_booking_status_use_case,
    cancel_booking_use_case,
    add_payment_use_case,
    get_booking_use_case,
    list_bookings_use_case,
    list_payments_use_case,
    # reporting
    generate_report_use_case,
    role_auth,
]
