from datetime import date
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, status

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.command.add_room_use_case import AddRoomUseCase
from src.service.accommodation.app.command.create_accommodation_use_case import (
    CreateAccommodationUseCase,
)
from src.service.accommodation.app.command.delete_accommodation_use_case import (
    DeleteAccommodationUseCase,
)
from src.service.accommodation.app.command.delete_room_use_case import DeleteRoomUseCase
from src.service.accommodation.app.command.update_accommodation_use_case import (
    UpdateAccommodationUseCase,
)
from src.service.accommodation.app.command.update_room_use_case import UpdateRoomUseCase
from src.service.accommodation.app.dto.query_filter import AccommodationListFilter
from src.service.accommodation.app.query.find_available_rooms_use_case import (
    FindAvailableRoomsUseCase,
)
from src.service.accommodation.app.query.get_accommodation_use_case import (
    GetAccommodationUseCase,
)
from src.service.accommodation.app.query.list_accommodations_use_case import (
    ListAccommodationsUseCase,
)
from src.service.accommodation.domain.entity.user_entity import UserEntity
from src.service.accommodation.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
)
from src.service.accommodation.driving_adapter.http_controller.schema.accommodation_schema import (
    AccommodationCreateRequest,
    AccommodationResponse,
    AccommodationUpdateRequest,
    AvailabilitySummaryResponse,
    AvailableRoomsResponse,
    MessageResponse,
    RoomConflictResponse,
    RoomCreateRequest,
    RoomResponse,
    RoomUpdateRequest,
)


router = APIRouter()


@router.get('', response_model=List[AccommodationResponse])
@Logger.io
async def list_accommodations(
    is_active: Optional[bool] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    location: Optional[str] = None,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListAccommodationsUseCase = Depends(ListAccommodationsUseCase.depends),
) -> List[AccommodationResponse]:
    accommodations = await use_case.list_accommodations(
        query_filter=AccommodationListFilter(
            is_active=is_active, min_price=min_price, max_price=max_price, location=location
        )
    )
    return [AccommodationResponse.model_validate(a) for a in accommodations]


@router.get('/availability/summary', response_model=List[AvailabilitySummaryResponse])
@Logger.io
async def availability_summary(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListAccommodationsUseCase = Depends(ListAccommodationsUseCase.depends),
) -> List[AvailabilitySummaryResponse]:
    items = await use_case.availability_summary()
    return [AvailabilitySummaryResponse.model_validate(item) for item in items]


@router.post('', status_code=status.HTTP_201_CREATED, response_model=AccommodationResponse)
@Logger.io
async def create_accommodation(
    request: AccommodationCreateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: CreateAccommodationUseCase = Depends(CreateAccommodationUseCase.depends),
) -> AccommodationResponse:
    accommodation = await use_case.execute(**request.model_dump())
    return AccommodationResponse.model_validate(accommodation)


@router.get('/{accommodation_id}', response_model=AccommodationResponse)
@Logger.io
async def get_accommodation(
    accommodation_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetAccommodationUseCase = Depends(GetAccommodationUseCase.depends),
) -> AccommodationResponse:
    accommodation = await use_case.get_accommodation(accommodation_id=accommodation_id)
    return AccommodationResponse.model_validate(accommodation)


@router.put('/{accommodation_id}', response_model=AccommodationResponse)
@Logger.io
async def update_accommodation(
    accommodation_id: int,
    request: AccommodationUpdateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateAccommodationUseCase = Depends(UpdateAccommodationUseCase.depends),
) -> AccommodationResponse:
    accommodation = await use_case.execute(
        accommodation_id=accommodation_id, **request.model_dump(exclude_unset=True)
    )
    return AccommodationResponse.model_validate(accommodation)


@router.delete('/{accommodation_id}', response_model=MessageResponse)
@Logger.io
async def delete_accommodation(
    accommodation_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteAccommodationUseCase = Depends(DeleteAccommodationUseCase.depends),
) -> MessageResponse:
    await use_case.execute(accommodation_id=accommodation_id)
    return MessageResponse(message='Accommodation deleted successfully')


@router.post(
    '/{accommodation_id}/rooms', status_code=status.HTTP_201_CREATED, response_model=RoomResponse
)
@Logger.io
async def add_room(
    accommodation_id: int,
    request: RoomCreateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: AddRoomUseCase = Depends(AddRoomUseCase.depends),
) -> RoomResponse:
    room = await use_case.execute(accommodation_id=accommodation_id, **request.model_dump())
    return RoomResponse.model_validate(room)


@router.put('/rooms/{room_id}', response_model=RoomResponse)
@Logger.io
async def update_room(
    room_id: int,
    request: RoomUpdateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateRoomUseCase = Depends(UpdateRoomUseCase.depends),
) -> RoomResponse:
    room = await use_case.execute(room_id=room_id, **request.model_dump(exclude_unset=True))
    return RoomResponse.model_validate(room)


@router.delete('/rooms/{room_id}', response_model=MessageResponse)
@Logger.io
async def delete_room(
    room_id: int,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteRoomUseCase = Depends(DeleteRoomUseCase.depends),
) -> MessageResponse:
    if not await use_case.execute(room_id=room_id):
        raise NotFoundError('Room not found')
    return MessageResponse(message='Room deleted successfully')


@router.get('/{accommodation_id}/available-rooms', response_model=AvailableRoomsResponse)
@Logger.io
async def find_available_rooms(
    accommodation_id: int,
    check_in_date: Optional[date] = None,
    check_out_date: Optional[date] = None,
    current_user: UserEntity = Depends(get_current_user),
    use_case: FindAvailableRoomsUseCase = Depends(FindAvailableRoomsUseCase.depends),
) -> AvailableRoomsResponse:
    rooms = await use_case.find_available_rooms(
        accommodation_id=accommodation_id,
        check_in_date=check_in_date,
        check_out_date=check_out_date,
    )
    return AvailableRoomsResponse(
        accommodation_id=accommodation_id,
        check_in_date=check_in_date,  # type: ignore[arg-type]
        check_out_date=check_out_date,  # type: ignore[arg-type]
        rooms=[RoomResponse.model_validate(r) for r in rooms],
    )


@router.get('/rooms/{room_id}/conflict', response_model=RoomConflictResponse)
@Logger.io
async def check_room_conflict(
    room_id: int,
    check_in_date: Optional[date] = None,
    check_out_date: Optional[date] = None,
    current_user: UserEntity = Depends(get_current_user),
    use_case: FindAvailableRoomsUseCase = Depends(FindAvailableRoomsUseCase.depends),
) -> RoomConflictResponse:
    conflict = await use_case.has_conflict(
        room_id=room_id, check_in_date=check_in_date, check_out_date=check_out_date
    )
    return RoomConflictResponse(
        room_id=room_id,
        check_in_date=check_in_date,  # type: ignore[arg-type]
        check_out_date=check_out_date,  # type: ignore[arg-type]
        has_conflict=conflict,
    )
