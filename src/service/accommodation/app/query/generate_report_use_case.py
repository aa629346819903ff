from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_report_query_repo import IReportQueryRepo
from src.service.accommodation.domain.entity.user_entity import UserEntity
from src.service.accommodation.domain.service.report_aggregator import aggregate_report
from src.service.accommodation.domain.value_object.report import AccommodationReport, ReportFilter


class GenerateReportUseCase:
    """Occupancy and revenue report; read-only, admin only"""

    def __init__(self, *, report_query_repo: IReportQueryRepo) -> None:
        self.report_query_repo = report_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        report_query_repo: IReportQueryRepo = Depends(Provide[Container.report_query_repo]),
    ) -> Self:
        return cls(report_query_repo=report_query_repo)

    @Logger.io
    async def generate(
        self, *, report_filter: ReportFilter, actor: UserEntity
    ) -> AccommodationReport:
        if not actor.is_admin:
            raise ForbiddenError('Only admins can view accommodation reports')
        if (
            report_filter.start_date is not None
            and report_filter.end_date is not None
            and report_filter.end_date < report_filter.start_date
        ):
            raise ValidationError('end_date cannot be before start_date')

        with self.tracer.start_as_current_span('use_case.generate_accommodation_report'):
            accommodations, rows = await self.report_query_repo.load_snapshot(
                report_filter=report_filter
            )
            return aggregate_report(
                report_filter=report_filter, accommodations=accommodations, rows=rows
            )
