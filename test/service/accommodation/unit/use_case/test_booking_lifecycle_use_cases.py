"""
Unit tests for UpdateBookingStatusUseCase and CancelBookingUseCase
"""

import pytest

from src.platform.exception.exceptions import (
    ForbiddenError,
    NotFoundError,
    PolicyError,
    ValidationError,
)
from src.service.accommodation.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.accommodation.app.command.update_booking_status_use_case import (
    UpdateBookingStatusUseCase,
)
from src.service.accommodation.domain.entity.booking_entity import BookingStatus, PaymentStatus
from src.service.accommodation.domain.entity.user_entity import UserEntity, UserRole
from test.service.accommodation.unit.repository_mocks import RepositoryMocks, make_booking
from test.util_constant import (
    ADMIN_USER_ID,
    ANOTHER_PARTICIPANT_USER_ID,
    ORGANIZER_USER_ID,
    PARTICIPANT_USER_ID,
)


pytestmark = pytest.mark.unit

ADMIN = UserEntity(id=ADMIN_USER_ID, role=UserRole.ADMIN)
ORGANIZER = UserEntity(id=ORGANIZER_USER_ID, role=UserRole.ORGANIZER)
OWNER = UserEntity(id=PARTICIPANT_USER_ID, role=UserRole.PARTICIPANT)
STRANGER = UserEntity(id=ANOTHER_PARTICIPANT_USER_ID, role=UserRole.PARTICIPANT)


class TestUpdateBookingStatus:
    def _use_case(self, mocks: RepositoryMocks) -> UpdateBookingStatusUseCase:
        return UpdateBookingStatusUseCase(uow=mocks.uow, booking_metrics=mocks.metrics)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'current,target',
        [
            (BookingStatus.PENDING, 'confirmed'),
            (BookingStatus.CONFIRMED, 'checked_in'),
            (BookingStatus.CHECKED_IN, 'checked_out'),
            (BookingStatus.PENDING, 'cancelled'),
        ],
    )
    async def test_allowed_transition(self, current, target):
        mocks = RepositoryMocks(booking=make_booking(status=current))

        updated = await self._use_case(mocks).execute(
            booking_id=12, new_status=target, actor=ORGANIZER
        )

        assert updated.status == BookingStatus(target)
        mocks.uow.commit.assert_awaited_once()
        mocks.metrics.record_status_change.assert_called_once_with(to_status=target)

    @pytest.mark.asyncio
    async def test_skipping_a_step_is_refused(self):
        mocks = RepositoryMocks(booking=make_booking(status=BookingStatus.PENDING))

        with pytest.raises(PolicyError) as exc_info:
            await self._use_case(mocks).execute(
                booking_id=12, new_status='checked_out', actor=ADMIN
            )

        assert exc_info.value.message == (
            "Cannot change booking status from 'pending' to 'checked_out'"
        )
        mocks.booking_command_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_confirmed_cannot_return_to_pending(self):
        mocks = RepositoryMocks(booking=make_booking(status=BookingStatus.CONFIRMED))

        with pytest.raises(PolicyError):
            await self._use_case(mocks).execute(booking_id=12, new_status='pending', actor=ADMIN)

    @pytest.mark.asyncio
    async def test_unknown_status(self):
        mocks = RepositoryMocks(booking=make_booking())

        with pytest.raises(ValidationError) as exc_info:
            await self._use_case(mocks).execute(booking_id=12, new_status='lost', actor=ADMIN)

        assert exc_info.value.message.startswith('Invalid status. Must be one of:')

    @pytest.mark.asyncio
    async def test_participant_cannot_change_status(self):
        mocks = RepositoryMocks(booking=make_booking())

        with pytest.raises(ForbiddenError) as exc_info:
            await self._use_case(mocks).execute(
                booking_id=12, new_status='confirmed', actor=OWNER
            )

        assert exc_info.value.message == 'Only admins and organizers can update booking status'
        mocks.booking_command_repo.get_by_id_for_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_booking_not_found(self):
        mocks = RepositoryMocks(booking=None)

        with pytest.raises(NotFoundError):
            await self._use_case(mocks).execute(
                booking_id=12, new_status='confirmed', actor=ADMIN
            )


class TestCancelBooking:
    def _use_case(self, mocks: RepositoryMocks) -> CancelBookingUseCase:
        return CancelBookingUseCase(uow=mocks.uow, booking_metrics=mocks.metrics)

    @pytest.mark.asyncio
    async def test_owner_cancels_pending_booking(self):
        mocks = RepositoryMocks(booking=make_booking(payment_status=PaymentStatus.PARTIAL))

        cancelled = await self._use_case(mocks).execute(booking_id=12, actor=OWNER)

        # payment_status is kept as recorded
        assert cancelled.status == BookingStatus.CANCELLED
        assert cancelled.payment_status == PaymentStatus.PARTIAL
        mocks.metrics.record_status_change.assert_called_once_with(to_status='cancelled')

    @pytest.mark.asyncio
    async def test_admin_cancels_confirmed_booking(self):
        mocks = RepositoryMocks(booking=make_booking(status=BookingStatus.CONFIRMED))

        cancelled = await self._use_case(mocks).execute(booking_id=12, actor=ADMIN)

        assert cancelled.status == BookingStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_other_participant_is_forbidden(self):
        mocks = RepositoryMocks(booking=make_booking())

        with pytest.raises(ForbiddenError) as exc_info:
            await self._use_case(mocks).execute(booking_id=12, actor=STRANGER)

        assert exc_info.value.message == 'You do not have permission to cancel this booking'

    @pytest.mark.asyncio
    async def test_already_cancelled(self):
        mocks = RepositoryMocks(booking=make_booking(status=BookingStatus.CANCELLED))

        with pytest.raises(PolicyError) as exc_info:
            await self._use_case(mocks).execute(booking_id=12, actor=OWNER)

        assert exc_info.value.message == 'Booking is already cancelled'

    @pytest.mark.asyncio
    @pytest.mark.parametrize('status', [BookingStatus.CHECKED_IN, BookingStatus.CHECKED_OUT])
    async def test_cannot_cancel_after_check_in(self, status):
        mocks = RepositoryMocks(booking=make_booking(status=status))

        with pytest.raises(PolicyError) as exc_info:
            await self._use_case(mocks).execute(booking_id=12, actor=ADMIN)

        assert exc_info.value.message == f"Cannot cancel booking in '{status}' status"
        mocks.uow.commit.assert_not_called()
