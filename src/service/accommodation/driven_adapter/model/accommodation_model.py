from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


ROOM_NUMBER_CONSTRAINT = 'uq_rooms_accommodation_number'


class AccommodationModel(Base):
    __tablename__ = 'accommodations'
    __table_args__ = (
        CheckConstraint('total_rooms >= 1', name='ck_accommodations_total_rooms_positive'),
        CheckConstraint('price_per_night > 0', name='ck_accommodations_price_positive'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    total_rooms: Mapped[int] = mapped_column(Integer, nullable=False)
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    amenities: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    rooms: Mapped[List['RoomModel']] = relationship(
        'RoomModel',
        back_populates='accommodation',
        cascade='all, delete-orphan',
        passive_deletes=True,
        order_by='RoomModel.id',
        lazy='raise',
    )


class RoomModel(Base):
    __tablename__ = 'accommodation_rooms'
    __table_args__ = (
        UniqueConstraint('accommodation_id', 'room_number', name=ROOM_NUMBER_CONSTRAINT),
        CheckConstraint(
            "room_type IN ('single', 'double', 'suite', 'dormitory')",
            name='ck_rooms_room_type',
        ),
        CheckConstraint('capacity >= 1', name='ck_rooms_capacity_positive'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    accommodation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('accommodations.id', ondelete='CASCADE'), nullable=False, index=True
    )
    room_number: Mapped[str] = mapped_column(String(50), nullable=False)
    room_type: Mapped[str] = mapped_column(String(20), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    accommodation: Mapped['AccommodationModel'] = relationship(
        'AccommodationModel', back_populates='rooms', lazy='raise'
    )
