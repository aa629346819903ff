from datetime import datetime, timezone
from decimal import Decimal
from enum import StrEnum
from typing import Any, List, Optional

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.domain.value_object.money import to_money


class RoomType(StrEnum):
    SINGLE = 'single'
    DOUBLE = 'double'
    SUITE = 'suite'
    DORMITORY = 'dormitory'


# Listing order for rooms, matches the declaration order above
ROOM_TYPE_ORDER = {room_type: index for index, room_type in enumerate(RoomType)}


def parse_room_type(value: Any) -> RoomType:
    try:
        return RoomType(value)
    except ValueError:
        valid = ', '.join(t.value for t in RoomType)
        raise ValidationError(f'Invalid room_type. Must be one of: {valid}') from None


@attrs.define
class Room:
    accommodation_id: int
    room_number: str
    room_type: RoomType
    capacity: int = 1
    is_available: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        accommodation_id: int,
        room_number: Optional[str],
        room_type: Any,
        capacity: Optional[int] = None,
        is_available: Optional[bool] = None,
    ) -> 'Room':
        if not room_number or not str(room_number).strip() or not room_type:
            raise ValidationError('Please provide room_number and room_type')
        capacity = 1 if capacity is None else capacity
        if capacity < 1:
            raise ValidationError('capacity must be at least 1')

        now = datetime.now(timezone.utc)
        return cls(
            accommodation_id=accommodation_id,
            room_number=str(room_number).strip(),
            room_type=parse_room_type(room_type),
            capacity=capacity,
            is_available=True if is_available is None else is_available,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def apply_update(
        self,
        *,
        room_number: Optional[str] = None,
        room_type: Any = None,
        capacity: Optional[int] = None,
        is_available: Optional[bool] = None,
    ) -> 'Room':
        """Only supplied fields change; an explicitly empty room_number or room_type is rejected"""
        changes: dict[str, Any] = {}
        if room_number is not None:
            if not room_number.strip():
                raise ValidationError('room_number cannot be empty')
            changes['room_number'] = room_number.strip()
        if room_type is not None:
            if room_type == '':
                raise ValidationError('room_type cannot be empty')
            changes['room_type'] = parse_room_type(room_type)
        if capacity is not None:
            if capacity < 1:
                raise ValidationError('capacity must be at least 1')
            changes['capacity'] = capacity
        if is_available is not None:
            changes['is_available'] = is_available

        return attrs.evolve(self, **changes, updated_at=datetime.now(timezone.utc))


@attrs.define
class Accommodation:
    name: str
    location: str
    total_rooms: int
    price_per_night: Decimal
    description: Optional[str] = None
    amenities: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    rooms: List[Room] = attrs.field(factory=list)

    @staticmethod
    def _validate_total_rooms(total_rooms: int) -> None:
        if total_rooms < 1:
            raise ValidationError('total_rooms must be at least 1')

    @staticmethod
    def _validate_price(price_per_night: Any) -> Decimal:
        try:
            price = to_money(price_per_night)
        except ValueError as e:
            raise ValidationError(str(e)) from None
        if price <= 0:
            raise ValidationError('price_per_night must be greater than 0')
        return price

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        name: Optional[str],
        location: Optional[str],
        total_rooms: Optional[int],
        price_per_night: Any,
        description: Optional[str] = None,
        amenities: Optional[str] = None,
        image_url: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> 'Accommodation':
        if not name or not location or total_rooms is None or price_per_night is None:
            raise ValidationError(
                'Please provide name, location, total_rooms, and price_per_night'
            )
        cls._validate_total_rooms(total_rooms)
        price = cls._validate_price(price_per_night)

        now = datetime.now(timezone.utc)
        return cls(
            name=name.strip(),
            location=location.strip(),
            total_rooms=total_rooms,
            price_per_night=price,
            description=description,
            amenities=amenities,
            image_url=image_url,
            is_active=True if is_active is None else is_active,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def apply_update(self, **changes: Any) -> 'Accommodation':
        """Partial update: keys with a None value are left untouched"""
        supplied = {key: value for key, value in changes.items() if value is not None}
        if 'name' in supplied and not str(supplied['name']).strip():
            raise ValidationError('name cannot be empty')
        if 'location' in supplied and not str(supplied['location']).strip():
            raise ValidationError('location cannot be empty')
        if 'total_rooms' in supplied:
            self._validate_total_rooms(supplied['total_rooms'])
        if 'price_per_night' in supplied:
            supplied['price_per_night'] = self._validate_price(supplied['price_per_night'])

        return attrs.evolve(self, **supplied, updated_at=datetime.now(timezone.utc))
