from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List

from src.service.accommodation.domain.entity.payment_entity import Payment


class IPaymentCommandRepo(ABC):
    """Append-only ledger writes; there is no update or delete"""

    @abstractmethod
    async def create(self, *, payment: Payment) -> Payment:
        pass

    @abstractmethod
    async def list_amounts(self, *, booking_id: int) -> List[Decimal]:
        """Every amount recorded for the booking, read inside the current transaction"""
        pass


class IPaymentQueryRepo(ABC):
    @abstractmethod
    async def list_by_booking(self, *, booking_id: int) -> List[Payment]:
        """Ordered by payment_date, then insertion"""
        pass
