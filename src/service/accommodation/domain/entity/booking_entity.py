from datetime import date, datetime, timezone
from decimal import Decimal
from enum import StrEnum
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import PolicyError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.domain.value_object.money import to_money
from src.service.accommodation.domain.value_object.stay_period import StayPeriod


class BookingStatus(StrEnum):
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    CHECKED_IN = 'checked_in'
    CHECKED_OUT = 'checked_out'
    CANCELLED = 'cancelled'


class PaymentStatus(StrEnum):
    PENDING = 'pending'
    PARTIAL = 'partial'
    COMPLETED = 'completed'


class BookingPaymentMethod(StrEnum):
    """How the guest intends to pay (individual ledger entries carry their own method)"""

    ONLINE = 'online'
    BANK_TRANSFER = 'bank_transfer'
    CASH = 'cash'
    OTHER = 'other'


# Forward-only lifecycle; checked_out and cancelled have no way out
ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.CONFIRMED, BookingStatus.CANCELLED}),
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CHECKED_IN, BookingStatus.CANCELLED}),
    BookingStatus.CHECKED_IN: frozenset({BookingStatus.CHECKED_OUT}),
    BookingStatus.CHECKED_OUT: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def parse_booking_status(value: Any) -> BookingStatus:
    try:
        return BookingStatus(value)
    except ValueError:
        valid = ', '.join(s.value for s in BookingStatus)
        raise ValidationError(f'Invalid status. Must be one of: {valid}') from None


def parse_booking_payment_method(value: Any) -> Optional[BookingPaymentMethod]:
    if value is None:
        return None
    try:
        return BookingPaymentMethod(value)
    except ValueError:
        valid = ', '.join(m.value for m in BookingPaymentMethod)
        raise ValidationError(f'Invalid payment_method. Must be one of: {valid}') from None


@attrs.define
class Booking:
    user_id: int
    event_id: int
    room_id: int
    check_in_date: date
    check_out_date: date
    total_price: Decimal
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: Optional[BookingPaymentMethod] = None
    special_requests: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def stay(self) -> StayPeriod:
        return StayPeriod(check_in=self.check_in_date, check_out=self.check_out_date)

    @property
    def nights(self) -> int:
        return self.stay.nights

    @property
    def is_active(self) -> bool:
        """Cancelled bookings no longer hold the room"""
        return self.status != BookingStatus.CANCELLED

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: int,
        event_id: int,
        room_id: int,
        stay: StayPeriod,
        price_per_night: Decimal,
        payment_method: Any = None,
        special_requests: Optional[str] = None,
    ) -> 'Booking':
        """
        Build a new pending booking priced at rate x nights

        The stay is expected to be validated already (see StayPeriod.of).
        """
        now = datetime.now(timezone.utc)
        return cls(
            user_id=user_id,
            event_id=event_id,
            room_id=room_id,
            check_in_date=stay.check_in,
            check_out_date=stay.check_out,
            total_price=to_money(to_money(price_per_night) * stay.nights),
            status=BookingStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
            payment_method=parse_booking_payment_method(payment_method),
            special_requests=special_requests,
            created_at=now,
            updated_at=now,
        )

    def can_transition_to(self, new_status: BookingStatus) -> bool:
        return new_status in ALLOWED_TRANSITIONS[self.status]

    @Logger.io
    def transition_to(self, new_status: BookingStatus) -> 'Booking':
        """
        Move along the lifecycle

        Raises:
            PolicyError: When the edge is not in ALLOWED_TRANSITIONS
        """
        if not self.can_transition_to(new_status):
            raise PolicyError(
                f"Cannot change booking status from '{self.status}' to '{new_status}'"
            )
        return attrs.evolve(self, status=new_status, updated_at=datetime.now(timezone.utc))

    @Logger.io
    def cancel(self) -> 'Booking':
        """
        Cancel booking; payment_status is left as recorded

        Raises:
            PolicyError: When the guest is already in the room, has left, or it is already cancelled
        """
        if self.status == BookingStatus.CANCELLED:
            raise PolicyError('Booking is already cancelled')
        if not self.can_transition_to(BookingStatus.CANCELLED):
            raise PolicyError(f"Cannot cancel booking in '{self.status}' status")
        return attrs.evolve(
            self, status=BookingStatus.CANCELLED, updated_at=datetime.now(timezone.utc)
        )

    @Logger.io
    def validate_can_accept_payment(self) -> None:
        if self.status == BookingStatus.CANCELLED:
            raise PolicyError('Cannot add payment to a cancelled booking')

    def with_payment_status(self, payment_status: PaymentStatus) -> 'Booking':
        return attrs.evolve(
            self, payment_status=payment_status, updated_at=datetime.now(timezone.utc)
        )
