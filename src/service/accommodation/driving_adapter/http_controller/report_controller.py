from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.query.generate_report_use_case import GenerateReportUseCase
from src.service.accommodation.domain.entity.user_entity import UserEntity
from src.service.accommodation.domain.value_object.report import ReportFilter
from src.service.accommodation.driving_adapter.http_controller.auth.role_auth import (
    require_admin,
)
from src.service.accommodation.driving_adapter.http_controller.schema.report_schema import (
    AccommodationReportResponse,
)


router = APIRouter()


@router.get('', response_model=AccommodationReportResponse)
@Logger.io
async def get_accommodation_report(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    event_id: Optional[int] = None,
    accommodation_id: Optional[int] = None,
    current_user: UserEntity = Depends(require_admin),
    use_case: GenerateReportUseCase = Depends(GenerateReportUseCase.depends),
) -> AccommodationReportResponse:
    """
    Occupancy, revenue, status, room type, timeline and per-event breakdowns.

    Bookings count when check_in_date >= start_date and check_out_date <= end_date.
    """
    report = await use_case.generate(
        report_filter=ReportFilter(
            start_date=start_date,
            end_date=end_date,
            event_id=event_id,
            accommodation_id=accommodation_id,
        ),
        actor=current_user,
    )
    return AccommodationReportResponse.model_validate(report)
