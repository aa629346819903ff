from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.command.add_payment_use_case import AddPaymentUseCase
from src.service.accommodation.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.accommodation.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.accommodation.app.command.update_booking_status_use_case import (
    UpdateBookingStatusUseCase,
)
from src.service.accommodation.app.dto.query_filter import BookingListFilter
from src.service.accommodation.app.query.get_booking_use_case import GetBookingUseCase
from src.service.accommodation.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.accommodation.app.query.list_payments_use_case import ListPaymentsUseCase
from src.service.accommodation.domain.entity.booking_entity import (
    PaymentStatus,
    parse_booking_status,
)
from src.service.accommodation.domain.entity.user_entity import UserEntity
from src.service.accommodation.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_staff,
)
from src.service.accommodation.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingStatusUpdateRequest,
    BookingWithDetailsResponse,
)
from src.service.accommodation.driving_adapter.http_controller.schema.payment_schema import (
    PaymentCreatedResponse,
    PaymentCreateRequest,
    PaymentResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.post('', status_code=status.HTTP_201_CREATED, response_model=BookingResponse)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('room_id', request.room_id)
        span.set_attribute('event_id', request.event_id)
        span.set_attribute('user_id', current_user.id)

        booking = await use_case.create_booking(
            user_id=current_user.id,
            event_id=request.event_id,
            room_id=request.room_id,
            check_in_date=request.check_in_date,
            check_out_date=request.check_out_date,
            payment_method=request.payment_method,
            special_requests=request.special_requests,
        )
        return BookingResponse.model_validate(booking)


@router.get('', response_model=List[BookingWithDetailsResponse])
@Logger.io
async def list_bookings(
    booking_status: Optional[str] = Query(None, alias='status'),
    user_id: Optional[int] = None,
    event_id: Optional[int] = None,
    accommodation_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    payment_status: Optional[PaymentStatus] = None,
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingWithDetailsResponse]:
    """Admins and organizers see all bookings, other roles only their own"""
    query_filter = BookingListFilter(
        status=parse_booking_status(booking_status) if booking_status else None,
        event_id=event_id,
        user_id=user_id,
        accommodation_id=accommodation_id,
        start_date=start_date,
        end_date=end_date,
        payment_status=payment_status,
        limit=limit,
        offset=offset,
    )
    details = await use_case.list_bookings(query_filter=query_filter, actor=current_user)
    return [BookingWithDetailsResponse.from_detail(d) for d in details]


@router.get('/my', response_model=List[BookingWithDetailsResponse])
@Logger.io
async def list_my_bookings(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingWithDetailsResponse]:
    details = await use_case.list_my_bookings(actor=current_user)
    return [BookingWithDetailsResponse.from_detail(d) for d in details]


@router.get('/{booking_id}', response_model=BookingWithDetailsResponse)
@Logger.io
async def get_booking(
    booking_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingWithDetailsResponse:
    detail = await use_case.get_booking(booking_id=booking_id, actor=current_user)
    return BookingWithDetailsResponse.from_detail(detail)


@router.put('/{booking_id}/status', response_model=BookingResponse)
@Logger.io
async def update_booking_status(
    booking_id: int,
    request: BookingStatusUpdateRequest,
    current_user: UserEntity = Depends(require_staff),
    use_case: UpdateBookingStatusUseCase = Depends(UpdateBookingStatusUseCase.depends),
) -> BookingResponse:
    booking = await use_case.execute(
        booking_id=booking_id, new_status=request.status, actor=current_user
    )
    return BookingResponse.model_validate(booking)


@router.put('/{booking_id}/cancel', response_model=BookingResponse)
@Logger.io
async def cancel_booking(
    booking_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.execute(booking_id=booking_id, actor=current_user)
    return BookingResponse.model_validate(booking)


@router.post(
    '/{booking_id}/payments',
    status_code=status.HTTP_201_CREATED,
    response_model=PaymentCreatedResponse,
)
@Logger.io
async def add_payment(
    booking_id: int,
    request: PaymentCreateRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: AddPaymentUseCase = Depends(AddPaymentUseCase.depends),
) -> PaymentCreatedResponse:
    recorded = await use_case.execute(
        booking_id=booking_id, actor=current_user, **request.model_dump()
    )
    return PaymentCreatedResponse(
        payment=PaymentResponse.model_validate(recorded.payment),
        booking_id=booking_id,
        payment_status=recorded.booking.payment_status,
    )


@router.get('/{booking_id}/payments', response_model=List[PaymentResponse])
@Logger.io
async def list_payments(
    booking_id: int,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListPaymentsUseCase = Depends(ListPaymentsUseCase.depends),
) -> List[PaymentResponse]:
    payments = await use_case.list_payments(booking_id=booking_id, actor=current_user)
    return [PaymentResponse.model_validate(p) for p in payments]
