"""Filters passed from controllers through use cases into query repositories."""

from datetime import date
from decimal import Decimal
from typing import Optional

import attrs

from src.service.accommodation.domain.entity.booking_entity import BookingStatus, PaymentStatus


@attrs.define(frozen=True)
class AccommodationListFilter:
    is_active: Optional[bool] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    location: Optional[str] = None  # case-insensitive substring


@attrs.define(frozen=True)
class BookingListFilter:
    status: Optional[BookingStatus] = None
    event_id: Optional[int] = None
    user_id: Optional[int] = None
    accommodation_id: Optional[int] = None
    start_date: Optional[date] = None  # check_in_date >= start_date
    end_date: Optional[date] = None  # check_out_date <= end_date
    payment_status: Optional[PaymentStatus] = None
    limit: Optional[int] = None
    offset: int = 0
