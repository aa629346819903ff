"""
Report Query Repository Implementation

Both reads run inside one REPEATABLE READ transaction, so room counts and booking rows
describe the same moment even while bookings and payments keep arriving.
"""

from typing import AsyncContextManager, Callable, List, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_report_query_repo import IReportQueryRepo
from src.service.accommodation.domain.entity.accommodation_entity import (
    Accommodation,
    RoomType,
)
from src.service.accommodation.domain.entity.booking_entity import BookingStatus, PaymentStatus
from src.service.accommodation.domain.value_object.report import BookingReportRow, ReportFilter
from src.service.accommodation.driven_adapter.model.accommodation_model import (
    AccommodationModel,
    RoomModel,
)
from src.service.accommodation.driven_adapter.model.booking_model import BookingModel
from src.service.accommodation.driven_adapter.model.event_model import EventModel
from src.service.accommodation.driven_adapter.repo.model_entity_mapper import (
    accommodation_to_entity,
)


SNAPSHOT_ISOLATION_LEVEL = 'REPEATABLE READ'


class ReportQueryRepoImpl(IReportQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def load_snapshot(
        self, *, report_filter: ReportFilter
    ) -> Tuple[List[Accommodation], List[BookingReportRow]]:
        async with self.session_factory() as session:
            await session.connection(
                execution_options={'isolation_level': SNAPSHOT_ISOLATION_LEVEL}
            )

            accommodation_stmt = (
                select(AccommodationModel)
                .options(selectinload(AccommodationModel.rooms))
                .order_by(AccommodationModel.id)
            )
            if report_filter.accommodation_id is not None:
                accommodation_stmt = accommodation_stmt.where(
                    AccommodationModel.id == report_filter.accommodation_id
                )
            accommodation_result = await session.execute(accommodation_stmt)
            accommodations = [
                accommodation_to_entity(a, with_rooms=True)
                for a in accommodation_result.scalars().all()
            ]

            booking_stmt = (
                select(
                    BookingModel,
                    RoomModel.room_number,
                    RoomModel.room_type,
                    AccommodationModel.id.label('accommodation_id'),
                    AccommodationModel.name.label('accommodation_name'),
                    EventModel.title.label('event_title'),
                )
                .join(RoomModel, RoomModel.id == BookingModel.room_id)
                .join(AccommodationModel, AccommodationModel.id == RoomModel.accommodation_id)
                .outerjoin(EventModel, EventModel.id == BookingModel.event_id)
            )
            if report_filter.start_date is not None:
                booking_stmt = booking_stmt.where(
                    BookingModel.check_in_date >= report_filter.start_date
                )
            if report_filter.end_date is not None:
                booking_stmt = booking_stmt.where(
                    BookingModel.check_out_date <= report_filter.end_date
                )
            if report_filter.event_id is not None:
                booking_stmt = booking_stmt.where(BookingModel.event_id == report_filter.event_id)
            if report_filter.accommodation_id is not None:
                booking_stmt = booking_stmt.where(
                    AccommodationModel.id == report_filter.accommodation_id
                )

            booking_result = await session.execute(booking_stmt.order_by(BookingModel.id))
            rows = [
                BookingReportRow(
                    id=row.BookingModel.id,
                    user_id=row.BookingModel.user_id,
                    event_id=row.BookingModel.event_id,
                    room_id=row.BookingModel.room_id,
                    room_number=row.room_number,
                    room_type=RoomType(row.room_type),
                    accommodation_id=row.accommodation_id,
                    accommodation_name=row.accommodation_name,
                    check_in_date=row.BookingModel.check_in_date,
                    check_out_date=row.BookingModel.check_out_date,
                    status=BookingStatus(row.BookingModel.status),
                    payment_status=PaymentStatus(row.BookingModel.payment_status),
                    total_price=row.BookingModel.total_price,
                    event_title=row.event_title,
                    created_at=row.BookingModel.created_at,
                )
                for row in booking_result.all()
            ]

            Logger.base.info(
                f'📊 [REPORT] Snapshot loaded: {len(accommodations)} accommodations, '
                f'{len(rows)} bookings'
            )
            return accommodations, rows
