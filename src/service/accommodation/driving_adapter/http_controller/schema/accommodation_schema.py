from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.accommodation.domain.entity.accommodation_entity import RoomType


class AccommodationCreateRequest(BaseModel):
    name: str
    location: str
    total_rooms: int
    price_per_night: Decimal
    description: Optional[str] = None
    amenities: Optional[str] = None
    image_url: Optional[str] = None
    is_active: Optional[bool] = None

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Harbour View Hotel',
                'location': 'Keelung',
                'total_rooms': 40,
                'price_per_night': '120.00',
                'description': 'Ten minutes walk from the venue',
                'amenities': 'wifi,breakfast',
            }
        }


class AccommodationUpdateRequest(BaseModel):
    """Every field optional; omitted fields keep their value"""

    name: Optional[str] = None
    location: Optional[str] = None
    total_rooms: Optional[int] = None
    price_per_night: Optional[Decimal] = None
    description: Optional[str] = None
    amenities: Optional[str] = None
    image_url: Optional[str] = None
    is_active: Optional[bool] = None

    class Config:
        json_schema_extra = {'example': {'price_per_night': '135.00', 'is_active': True}}


class RoomCreateRequest(BaseModel):
    room_number: str
    room_type: str
    capacity: Optional[int] = None
    is_available: Optional[bool] = None

    class Config:
        json_schema_extra = {
            'example': {'room_number': '101', 'room_type': 'double', 'capacity': 2}
        }


class RoomUpdateRequest(BaseModel):
    room_number: Optional[str] = None
    room_type: Optional[str] = None
    capacity: Optional[int] = None
    is_available: Optional[bool] = None

    class Config:
        json_schema_extra = {'example': {'is_available': False}}


class RoomResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'accommodation_id': 1,
                'room_number': '101',
                'room_type': 'double',
                'capacity': 2,
                'is_available': True,
            }
        },
    )

    id: int
    accommodation_id: int
    room_number: str
    room_type: RoomType
    capacity: int
    is_available: bool


class AccommodationResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'name': 'Harbour View Hotel',
                'location': 'Keelung',
                'total_rooms': 40,
                'price_per_night': '120.00',
                'is_active': True,
                'rooms': [],
            }
        },
    )

    id: int
    name: str
    location: str
    total_rooms: int
    price_per_night: Decimal
    description: Optional[str] = None
    amenities: Optional[str] = None
    image_url: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    rooms: List[RoomResponse] = Field(default_factory=list)


class AvailabilitySummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
    price_per_night: Decimal
    total_rooms: int
    available_rooms: int


class AvailableRoomsResponse(BaseModel):
    accommodation_id: int
    check_in_date: date
    check_out_date: date
    rooms: List[RoomResponse]


class RoomConflictResponse(BaseModel):
    room_id: int
    check_in_date: date
    check_out_date: date
    has_conflict: bool


class MessageResponse(BaseModel):
    message: str
