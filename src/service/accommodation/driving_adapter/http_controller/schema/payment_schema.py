from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.service.accommodation.domain.entity.booking_entity import PaymentStatus
from src.service.accommodation.domain.entity.payment_entity import PaymentMethod


class PaymentCreateRequest(BaseModel):
    amount: Decimal
    payment_date: date
    payment_method: str
    reference_number: Optional[str] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'amount': '100.00',
                'payment_date': '2025-05-20',
                'payment_method': 'credit_card',
                'reference_number': 'TXN-2025-0001',
            }
        }


class PaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    booking_id: int
    amount: Decimal
    payment_date: date
    payment_method: PaymentMethod
    reference_number: Optional[str] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class PaymentCreatedResponse(BaseModel):
    """The new ledger entry and the booking's reconciled payment status"""

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'payment': {
                    'id': 5,
                    'booking_id': 12,
                    'amount': '100.00',
                    'payment_date': '2025-05-20',
                    'payment_method': 'credit_card',
                },
                'booking_id': 12,
                'payment_status': 'partial',
            }
        }
    )

    payment: PaymentResponse
    booking_id: int
    payment_status: PaymentStatus
