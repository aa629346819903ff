from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ExcludeConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


if TYPE_CHECKING:
    from src.service.accommodation.driven_adapter.model.accommodation_model import RoomModel


NO_OVERLAP_CONSTRAINT = 'ex_accommodation_bookings_no_overlap'


class BookingModel(Base):
    __tablename__ = 'accommodation_bookings'
    __table_args__ = (
        CheckConstraint('check_out_date > check_in_date', name='ck_bookings_dates_ordered'),
        CheckConstraint(
            "status IN ('pending', 'confirmed', 'checked_in', 'checked_out', 'cancelled')",
            name='ck_bookings_status',
        ),
        CheckConstraint(
            "payment_status IN ('pending', 'partial', 'completed')",
            name='ck_bookings_payment_status',
        ),
        # Store-level guard: no two live bookings of a room may share a night (needs btree_gist)
        ExcludeConstraint(
            ('room_id', '='),
            (text("daterange(check_in_date, check_out_date, '[)')"), '&&'),
            name=NO_OVERLAP_CONSTRAINT,
            using='gist',
            where=text("status <> 'cancelled'"),
        ),
        Index('ix_bookings_room_dates', 'room_id', 'check_in_date', 'check_out_date'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    event_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    room_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('accommodation_rooms.id', ondelete='RESTRICT'), nullable=False
    )
    check_in_date: Mapped[date] = mapped_column(Date, nullable=False)
    check_out_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='pending', nullable=False)
    total_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    payment_status: Mapped[str] = mapped_column(String(20), default='pending', nullable=False)
    payment_method: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    special_requests: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    room: Mapped['RoomModel'] = relationship('RoomModel', lazy='raise')
