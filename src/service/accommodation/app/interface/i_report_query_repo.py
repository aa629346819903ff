from abc import ABC, abstractmethod
from typing import List, Tuple

from src.service.accommodation.domain.entity.accommodation_entity import Accommodation
from src.service.accommodation.domain.value_object.report import BookingReportRow, ReportFilter


class IReportQueryRepo(ABC):
    """Read-only snapshot for the reporting aggregator"""

    @abstractmethod
    async def load_snapshot(
        self, *, report_filter: ReportFilter
    ) -> Tuple[List[Accommodation], List[BookingReportRow]]:
        """
        Read accommodations (with rooms) and the bookings inside the window

        Both lists come from one read transaction so the figures agree with each other.
        Cancelled bookings are included; the aggregator decides where they count.
        """
        pass
